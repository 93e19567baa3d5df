# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for Annotext documentation."""

project = "Annotext"
author = "Annotext Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
