# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Collecting annotations onto the entities they describe."""

from annotext.collection.node import AnnotatedNode

__all__ = [
    "AnnotatedNode",
]
