# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for collecting annotations onto a node."""

import logging

import pytest

from annotext.collection import AnnotatedNode
from annotext.model.values import ValueType
from annotext.parser import LexerError, ParseError, parse
from annotext.validation import (
    MissingRequiredAnnotationError,
    MultiplicityError,
    new_definition,
    new_parameter_definition,
)

# ###############
# Collecting
# ###############


class TestCollect:
    def test_annotations_grouped_by_name(self) -> None:
        node = AnnotatedNode(name="create_order")
        added = node.collect(
            [
                '@Route(path="/orders", method="POST")',
                '@Tag(name="orders")',
                '@Tag(name="write")',
            ]
        )
        assert len(added) == 3
        assert node.names() == ["Route", "Tag"]
        assert [a.get("name").as_str() for a in node.get("Tag")] == ["orders", "write"]

    def test_non_annotations_are_skipped(self) -> None:
        node = AnnotatedNode()
        added = node.collect(["Creates an order.", "", "   @Deprecated()  "])
        assert [a.name for a in added] == ["Deprecated"]
        assert node.names() == ["Deprecated"]

    def test_skipped_candidates_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="annotext.collection.node"):
            AnnotatedNode().collect(["just a comment"])
        assert "just a comment" in caplog.text

    def test_malformed_annotation_raises(self) -> None:
        node = AnnotatedNode()
        with pytest.raises(ParseError):
            node.collect(['@Route(path="/")', "@Tag(name=)"])

    def test_lexer_error_raises(self) -> None:
        with pytest.raises(LexerError):
            AnnotatedNode().collect(["@Tag(name=#)"])

    def test_get_missing_name_is_empty(self) -> None:
        assert AnnotatedNode().get("Nope") == []

    def test_get_returns_a_copy(self) -> None:
        node = AnnotatedNode()
        node.add(parse("@Foo()"))
        node.get("Foo").clear()
        assert len(node.get("Foo")) == 1


# ###############
# Checking
# ###############


class TestNodeChecks:
    def _definitions(self) -> list:
        return [
            new_definition(
                "Route",
                new_parameter_definition("path", True, ValueType.STRING),
                required=True,
            ),
            new_definition("Deprecated"),
        ]

    def test_check_passes(self) -> None:
        node = AnnotatedNode()
        node.collect(['@Route(path="/")', "@Deprecated()"])
        node.check(self._definitions())

    def test_check_missing_required(self) -> None:
        node = AnnotatedNode()
        node.collect(["@Deprecated()"])
        with pytest.raises(MissingRequiredAnnotationError):
            node.check(self._definitions())

    def test_check_repeated_annotation(self) -> None:
        node = AnnotatedNode()
        node.collect(['@Route(path="/")', "@Deprecated()", "@Deprecated()"])
        with pytest.raises(MultiplicityError):
            node.check(self._definitions())

    def test_validate_collects_errors(self) -> None:
        node = AnnotatedNode()
        node.collect(["@Deprecated()", "@Deprecated()", "@Extra()"])
        result = node.validate(self._definitions())
        assert [type(e) for e in result.errors] == [MissingRequiredAnnotationError, MultiplicityError]
        assert len(result.warnings) == 1
