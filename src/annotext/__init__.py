# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse and validate ``@Name(key=value, ...)`` annotations found in text."""

from annotext.collection import AnnotatedNode
from annotext.model import Annotation, Value, ValueType
from annotext.parser import AnnotationSyntaxError, NotAnAnnotationError, ParseError, parse
from annotext.validation import (
    AnnotationCheckError,
    Definition,
    ParameterDefinition,
    new_definition,
    new_parameter_definition,
)

__all__ = [
    "AnnotatedNode",
    "Annotation",
    "AnnotationCheckError",
    "AnnotationSyntaxError",
    "Definition",
    "NotAnAnnotationError",
    "ParameterDefinition",
    "ParseError",
    "Value",
    "ValueType",
    "new_definition",
    "new_parameter_definition",
    "parse",
]
