# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised when annotations do not match their definitions."""

from __future__ import annotations

from annotext.model.values import ValueType

# ###############
# Public Interface
# ###############


class AnnotationCheckError(Exception):
    """Base class for all definition check failures.

    Attributes:
        message: Human-readable description of the failure.
        definition: Name of the definition being checked against.
        annotation: Name of the offending annotation, if one was involved.
        parameter: Name of the offending parameter, if one was involved.
    """

    def __init__(
        self,
        message: str,
        *,
        definition: str,
        annotation: str | None = None,
        parameter: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.definition = definition
        self.annotation = annotation
        self.parameter = parameter


class NameMismatchError(AnnotationCheckError):
    """The annotation name differs from the definition name."""

    def __init__(self, *, definition: str, annotation: str) -> None:
        super().__init__(
            f"annotation name `{annotation}` does not match the definition name `{definition}`",
            definition=definition,
            annotation=annotation,
        )


class UnknownParameterError(AnnotationCheckError):
    """A parameter is not declared and the definition disallows unknown ones."""

    def __init__(self, *, definition: str, parameter: str) -> None:
        super().__init__(
            f"unknown parameter: `{parameter}` in `@{definition}()` Annotation",
            definition=definition,
            annotation=definition,
            parameter=parameter,
        )


class MissingRequiredParameterError(AnnotationCheckError):
    """A required parameter is absent."""

    def __init__(self, *, definition: str, parameter: str) -> None:
        super().__init__(
            f"the `{parameter}` parameter is required for @{definition}() Annotation",
            definition=definition,
            annotation=definition,
            parameter=parameter,
        )


class TypeMismatchError(AnnotationCheckError):
    """A present parameter has a different type than declared.

    Attributes:
        expected: The declared type.
        actual: The type of the value found.
    """

    def __init__(self, *, definition: str, parameter: str, expected: ValueType, actual: ValueType) -> None:
        super().__init__(
            f"the `{parameter}` parameter for @{definition}() Annotation should be of type "
            f"`{expected.value}`, got `{actual.value}`",
            definition=definition,
            annotation=definition,
            parameter=parameter,
        )
        self.expected = expected
        self.actual = actual


class MissingRequiredAnnotationError(AnnotationCheckError):
    """A required annotation does not appear at all."""

    def __init__(self, *, definition: str) -> None:
        super().__init__(f"the @{definition}() Annotation is required", definition=definition)


class MultiplicityError(AnnotationCheckError):
    """A non-repeatable annotation appears more than once.

    Attributes:
        count: How many instances were found.
    """

    def __init__(self, *, definition: str, count: int) -> None:
        super().__init__(
            f"the @{definition}() Annotation can only be used once, found {count}",
            definition=definition,
            annotation=definition,
        )
        self.count = count
