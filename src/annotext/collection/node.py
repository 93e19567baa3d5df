# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Annotations collected from the candidate strings of one logical entity."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from annotext.model.annotation import Annotation
from annotext.parser.parser import NotAnAnnotationError, parse
from annotext.validation.checks import ValidationResult, check_annotations, validate
from annotext.validation.definitions import Definition

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass
class AnnotatedNode:
    """An entity, such as a declaration, that owns annotations grouped by name.

    Attributes:
        name: Optional label for the entity, e.g. a function name.
        annotations: Annotation instances keyed by annotation name, in the
            order they were added.
    """

    name: str = ""
    annotations: dict[str, list[Annotation]] = field(default_factory=dict)

    def add(self, annotation: Annotation) -> None:
        """Append an annotation under its name."""
        self.annotations.setdefault(annotation.name, []).append(annotation)

    def collect(self, candidates: Iterable[str]) -> list[Annotation]:
        """Parse candidate strings and add every annotation found.

        Candidates that do not start with ``@`` are skipped. Candidates that
        start with ``@`` but are malformed raise.

        Args:
            candidates: Raw strings, e.g. comment lines from a source file.

        Returns:
            The annotations added, in candidate order.

        Raises:
            AnnotationSyntaxError: If a candidate is a malformed annotation.
        """
        added: list[Annotation] = []
        for candidate in candidates:
            try:
                annotation = parse(candidate)
            except NotAnAnnotationError:
                logger.debug("Skipping non-annotation candidate %r", candidate)
                continue
            self.add(annotation)
            added.append(annotation)
        return added

    def get(self, name: str) -> list[Annotation]:
        """Return all annotations with the given name (empty if none)."""
        return list(self.annotations.get(name, []))

    def names(self) -> list[str]:
        """Return the annotation names present on this node."""
        return [name for name, instances in self.annotations.items() if instances]

    def check(self, definitions: Sequence[Definition]) -> None:
        """Check this node against definitions, raising the first failure."""
        check_annotations(self.annotations, definitions)

    def validate(self, definitions: Sequence[Definition]) -> ValidationResult:
        """Validate this node against definitions without raising."""
        return validate(self.annotations, definitions)
