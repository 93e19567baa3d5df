# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Definitions describing what a valid annotation of a given name looks like."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from annotext.model.annotation import Annotation
from annotext.model.values import ValueType
from annotext.validation.errors import (
    MissingRequiredAnnotationError,
    MissingRequiredParameterError,
    MultiplicityError,
    NameMismatchError,
    TypeMismatchError,
    UnknownParameterError,
)

# ###############
# Public Interface
# ###############


class ParameterDefinition(BaseModel):
    """The declared name, type, and presence rule of one parameter."""

    model_config = ConfigDict(frozen=True)

    name: str = _Field(min_length=1)
    expected_type: ValueType
    required: bool = False

    def check(self, annotation: Annotation) -> None:
        """Check this parameter on an annotation.

        Raises:
            MissingRequiredParameterError: If the parameter is required and absent.
            TypeMismatchError: If the parameter is present with another type.
        """
        actual = annotation.get(self.name).value_type
        if actual == ValueType.UNKNOWN:
            if self.required:
                raise MissingRequiredParameterError(definition=annotation.name, parameter=self.name)
            return
        if actual != self.expected_type:
            raise TypeMismatchError(
                definition=annotation.name,
                parameter=self.name,
                expected=self.expected_type,
                actual=actual,
            )


class Definition(BaseModel):
    """The schema for all annotations sharing one name.

    Attributes:
        name: The annotation name this definition applies to.
        parameters: Declared parameters, checked in declaration order.
        allow_unknown_parameters: Accept parameters that are not declared.
        required: The annotation must appear at least once on a node.
        allow_multiple: The annotation may appear more than once on a node.
    """

    model_config = ConfigDict(frozen=True)

    name: str = _Field(min_length=1)
    parameters: tuple[ParameterDefinition, ...] = ()
    allow_unknown_parameters: bool = False
    required: bool = False
    allow_multiple: bool = False

    def parameter(self, name: str) -> ParameterDefinition | None:
        """Return the declared parameter with the given name, if any."""
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    def allows_parameter(self, name: str) -> bool:
        """Return True if a parameter of this name may appear on the annotation."""
        return self.allow_unknown_parameters or self.parameter(name) is not None

    def check(self, annotation: Annotation) -> None:
        """Check a single annotation against this definition.

        Checks run in a fixed order and the first failure is raised:

        1. The annotation name must equal the definition name.
        2. Every parameter present must be declared, unless unknown
           parameters are allowed.
        3. Each declared parameter, in declaration order, must be present if
           required and must have the declared type if present.

        Raises:
            NameMismatchError, UnknownParameterError,
            MissingRequiredParameterError, TypeMismatchError
        """
        if annotation.name != self.name:
            raise NameMismatchError(definition=self.name, annotation=annotation.name)
        for key in annotation.parameters:
            if not self.allows_parameter(key):
                raise UnknownParameterError(definition=self.name, parameter=key)
        for param in self.parameters:
            param.check(annotation)

    def check_group(self, annotations: Sequence[Annotation]) -> None:
        """Check all instances of this annotation found on one node.

        Raises:
            MissingRequiredAnnotationError: If none are present but one is required.
            MultiplicityError: If more than one is present but only one is allowed.
            AnnotationCheckError: The first failure of :meth:`check` on any instance.
        """
        if not annotations:
            if self.required:
                raise MissingRequiredAnnotationError(definition=self.name)
            return
        if len(annotations) > 1 and not self.allow_multiple:
            raise MultiplicityError(definition=self.name, count=len(annotations))
        for annotation in annotations:
            self.check(annotation)


def new_parameter_definition(name: str, required: bool, expected_type: ValueType) -> ParameterDefinition:
    """Create a ParameterDefinition."""
    return ParameterDefinition(name=name, required=required, expected_type=expected_type)


def new_definition(
    name: str,
    *parameters: ParameterDefinition,
    allow_unknown_parameters: bool = False,
    required: bool = False,
    allow_multiple: bool = False,
) -> Definition:
    """Create a Definition from its parameter definitions.

    The flags are keyword-only and follow the parameter definitions, so
    ``new_definition("Foo", p, required=True)`` declares a required ``@Foo``.
    Passing the flags positionally, e.g. ``new_definition("Foo", True, p)``,
    fails validation because ``True`` is not a ParameterDefinition.
    """
    return Definition(
        name=name,
        parameters=parameters,
        allow_unknown_parameters=allow_unknown_parameters,
        required=required,
        allow_multiple=allow_multiple,
    )
