# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Checks for the full set of annotations attached to one node.

These checks operate on annotations grouped by name, as collected from a
single declaration, and apply a list of definitions to them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from annotext.model.annotation import Annotation
from annotext.validation.definitions import Definition
from annotext.validation.errors import AnnotationCheckError, MissingRequiredAnnotationError

# ###############
# Public Interface
# ###############

AnnotationsByName = Mapping[str, Sequence[Annotation]]


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal finding, such as an annotation without a definition.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of validating a node's annotations.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: The first failure for each definition that did not pass.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[AnnotationCheckError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any definition failed."""
        return len(self.errors) > 0


def check_required(annotations: AnnotationsByName, definitions: Sequence[Definition]) -> None:
    """Check that every required definition has at least one annotation.

    Raises:
        MissingRequiredAnnotationError: For the first required definition, in
            list order, with no matching annotation.
    """
    for definition in definitions:
        if definition.required and not annotations.get(definition.name):
            raise MissingRequiredAnnotationError(definition=definition.name)


def check_annotations(annotations: AnnotationsByName, definitions: Sequence[Definition]) -> None:
    """Check a node's annotations against a list of definitions, failing fast.

    The required-annotation check runs over all definitions first. Then each
    definition checks its own group of annotations, in list order.

    Raises:
        AnnotationCheckError: The first failure found.
    """
    check_required(annotations, definitions)
    for definition in definitions:
        definition.check_group(annotations.get(definition.name, ()))


def validate(annotations: AnnotationsByName, definitions: Sequence[Definition]) -> ValidationResult:
    """Validate a node's annotations against a list of definitions.

    Unlike :func:`check_annotations`, this does not raise. Each definition
    contributes at most its first failure. Annotation names that no
    definition covers are reported as warnings.

    Args:
        annotations: Annotations grouped by name.
        definitions: The definitions to apply.

    Returns:
        A :class:`ValidationResult`. An empty result means all definitions passed.
    """
    warnings = _check_undefined_annotations(annotations, definitions)
    errors: list[AnnotationCheckError] = []
    for definition in definitions:
        try:
            definition.check_group(annotations.get(definition.name, ()))
        except AnnotationCheckError as exc:
            errors.append(exc)
    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _check_undefined_annotations(
    annotations: AnnotationsByName, definitions: Sequence[Definition]
) -> list[ValidationWarning]:
    """Return warnings for annotation names with no matching definition."""
    defined = {d.name for d in definitions}
    return [
        ValidationWarning(message=f"Annotation '@{name}' has no definition.")
        for name, instances in annotations.items()
        if instances and name not in defined
    ]
