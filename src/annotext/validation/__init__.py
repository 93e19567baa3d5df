# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Annotation definitions and the checks that apply them."""

from annotext.validation.checks import (
    ValidationResult,
    ValidationWarning,
    check_annotations,
    check_required,
    validate,
)
from annotext.validation.definitions import (
    Definition,
    ParameterDefinition,
    new_definition,
    new_parameter_definition,
)
from annotext.validation.errors import (
    AnnotationCheckError,
    MissingRequiredAnnotationError,
    MissingRequiredParameterError,
    MultiplicityError,
    NameMismatchError,
    TypeMismatchError,
    UnknownParameterError,
)

__all__ = [
    # Definitions
    "Definition",
    "ParameterDefinition",
    "new_definition",
    "new_parameter_definition",
    # Errors
    "AnnotationCheckError",
    "NameMismatchError",
    "UnknownParameterError",
    "MissingRequiredParameterError",
    "TypeMismatchError",
    "MissingRequiredAnnotationError",
    "MultiplicityError",
    # Checks
    "ValidationResult",
    "ValidationWarning",
    "check_annotations",
    "check_required",
    "validate",
]
