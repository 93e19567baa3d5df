# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for annotations and their typed parameter values."""

from annotext.model.annotation import Annotation, quote_string
from annotext.model.values import (
    UNKNOWN,
    BoolValue,
    FloatValue,
    IntValue,
    StringValue,
    UnknownValue,
    Value,
    ValueType,
    from_payloads,
    value_of,
)

__all__ = [
    # Values
    "ValueType",
    "Value",
    "StringValue",
    "IntValue",
    "FloatValue",
    "BoolValue",
    "UnknownValue",
    "UNKNOWN",
    "from_payloads",
    "value_of",
    # Entities
    "Annotation",
    "quote_string",
]
