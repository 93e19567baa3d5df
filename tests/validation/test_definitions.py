# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for annotation and parameter definitions."""

import pytest
from pydantic import ValidationError

from annotext.model.annotation import Annotation
from annotext.model.values import ValueType
from annotext.parser import parse
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

# ###############
# Test Helpers
# ###############


def _full_definition(**kwargs: bool) -> Definition:
    """A definition with one required parameter of every type."""
    return new_definition(
        "Annotation",
        new_parameter_definition("stringParam", True, ValueType.STRING),
        new_parameter_definition("someInt", True, ValueType.INT),
        new_parameter_definition("someBool", True, ValueType.BOOL),
        new_parameter_definition("someFloat", True, ValueType.FLOAT),
        **kwargs,
    )


# ###############
# Construction
# ###############


class TestConstruction:
    def test_new_parameter_definition(self) -> None:
        param = new_parameter_definition("p", True, ValueType.INT)
        assert param == ParameterDefinition(name="p", required=True, expected_type=ValueType.INT)

    def test_new_definition_defaults(self) -> None:
        definition = new_definition("Foo")
        assert definition.name == "Foo"
        assert definition.parameters == ()
        assert not definition.allow_unknown_parameters
        assert not definition.required
        assert not definition.allow_multiple

    def test_new_definition_keeps_parameter_order(self) -> None:
        a = new_parameter_definition("a", False, ValueType.INT)
        b = new_parameter_definition("b", False, ValueType.INT)
        assert new_definition("Foo", b, a).parameters == (b, a)

    def test_new_definition_flags_are_keyword_only(self) -> None:
        param = new_parameter_definition("a", False, ValueType.INT)
        definition = new_definition("Foo", param, required=True, allow_multiple=True)
        assert definition.parameters == (param,)
        assert definition.required
        assert definition.allow_multiple

    def test_new_definition_rejects_positional_flag(self) -> None:
        param = new_parameter_definition("a", False, ValueType.INT)
        with pytest.raises(ValidationError):
            new_definition("Foo", True, param)  # type: ignore[arg-type]

    def test_definitions_are_immutable(self) -> None:
        definition = new_definition("Foo")
        with pytest.raises(ValidationError):
            definition.required = True  # type: ignore[misc]

    def test_unknown_type_name_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ParameterDefinition(name="p", expected_type="decimal")  # type: ignore[arg-type]


class TestAllowsParameter:
    def test_declared_parameter_is_allowed(self) -> None:
        definition = new_definition("Foo", new_parameter_definition("a", False, ValueType.INT))
        assert definition.allows_parameter("a")
        assert not definition.allows_parameter("b")

    def test_unknown_parameters_allowed_when_enabled(self) -> None:
        definition = new_definition("Foo", allow_unknown_parameters=True)
        assert definition.allows_parameter("anything")

    def test_parameter_lookup(self) -> None:
        param = new_parameter_definition("a", False, ValueType.INT)
        definition = new_definition("Foo", param)
        assert definition.parameter("a") is param
        assert definition.parameter("b") is None


# ###############
# Single Annotation Check
# ###############


class TestCheck:
    def test_matching_annotation_passes(self) -> None:
        ann = parse("@Annotation(stringParam='String Value', someInt=2, someBool=true, someFloat=2.5)")
        _full_definition().check(ann)

    def test_name_mismatch(self) -> None:
        with pytest.raises(NameMismatchError) as exc_info:
            new_definition("Foo").check(Annotation(name="Bar"))
        assert exc_info.value.definition == "Foo"
        assert exc_info.value.annotation == "Bar"
        assert "`Bar`" in exc_info.value.message

    def test_name_checked_before_parameters(self) -> None:
        definition = new_definition("Foo", new_parameter_definition("p", True, ValueType.STRING))
        with pytest.raises(NameMismatchError):
            definition.check(parse("@Bar(q=1)"))

    def test_unknown_parameter(self) -> None:
        with pytest.raises(UnknownParameterError) as exc_info:
            new_definition("Foo").check(parse("@Foo(q=1)"))
        assert exc_info.value.parameter == "q"
        assert exc_info.value.message == "unknown parameter: `q` in `@Foo()` Annotation"

    def test_unknown_parameter_allowed(self) -> None:
        new_definition("Foo", allow_unknown_parameters=True).check(parse("@Foo(q=1)"))

    def test_unknown_reported_before_missing_required(self) -> None:
        definition = new_definition("Foo", new_parameter_definition("p", True, ValueType.STRING))
        with pytest.raises(UnknownParameterError):
            definition.check(parse("@Foo(q=1)"))

    def test_first_unknown_in_source_order_is_reported(self) -> None:
        with pytest.raises(UnknownParameterError) as exc_info:
            new_definition("Foo").check(parse("@Foo(z=1, a=2)"))
        assert exc_info.value.parameter == "z"

    def test_missing_required_parameter(self) -> None:
        ann = parse("@Annotation(someInt=2, someBool=true, someFloat=2.5)")
        with pytest.raises(MissingRequiredParameterError) as exc_info:
            _full_definition().check(ann)
        assert exc_info.value.parameter == "stringParam"
        assert exc_info.value.message == "the `stringParam` parameter is required for @Annotation() Annotation"

    def test_missing_optional_parameter_passes(self) -> None:
        definition = new_definition("Foo", new_parameter_definition("p", False, ValueType.STRING))
        definition.check(parse("@Foo()"))

    def test_type_mismatch(self) -> None:
        definition = new_definition("Foo", new_parameter_definition("p", False, ValueType.STRING))
        with pytest.raises(TypeMismatchError) as exc_info:
            definition.check(parse("@Foo(p=1)"))
        assert exc_info.value.parameter == "p"
        assert exc_info.value.expected == ValueType.STRING
        assert exc_info.value.actual == ValueType.INT
        assert "should be of type `string`" in exc_info.value.message

    def test_int_does_not_satisfy_float(self) -> None:
        definition = new_definition("Foo", new_parameter_definition("p", True, ValueType.FLOAT))
        with pytest.raises(TypeMismatchError):
            definition.check(parse("@Foo(p=1)"))

    def test_parameters_checked_in_declaration_order(self) -> None:
        definition = new_definition(
            "Foo",
            new_parameter_definition("b", True, ValueType.INT),
            new_parameter_definition("a", True, ValueType.INT),
        )
        with pytest.raises(MissingRequiredParameterError) as exc_info:
            definition.check(parse("@Foo()"))
        assert exc_info.value.parameter == "b"

    def test_type_error_before_later_missing_parameter(self) -> None:
        definition = new_definition(
            "Foo",
            new_parameter_definition("a", True, ValueType.INT),
            new_parameter_definition("b", True, ValueType.INT),
        )
        with pytest.raises(TypeMismatchError):
            definition.check(parse("@Foo(a='x')"))

    def test_errors_share_a_base(self) -> None:
        with pytest.raises(AnnotationCheckError):
            new_definition("Foo").check(parse("@Foo(q=1)"))


class TestParameterCheck:
    def test_matching_parameter_passes(self) -> None:
        new_parameter_definition("p", True, ValueType.BOOL).check(parse("@Foo(p=false)"))

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredParameterError):
            new_parameter_definition("p", True, ValueType.BOOL).check(parse("@Foo()"))

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeMismatchError):
            new_parameter_definition("p", False, ValueType.BOOL).check(parse("@Foo(p='true')"))


# ###############
# Group Check
# ###############


class TestCheckGroup:
    def test_empty_group_passes_when_optional(self) -> None:
        new_definition("Foo").check_group([])

    def test_empty_group_fails_when_required(self) -> None:
        with pytest.raises(MissingRequiredAnnotationError) as exc_info:
            new_definition("Foo", required=True).check_group([])
        assert exc_info.value.definition == "Foo"
        assert exc_info.value.message == "the @Foo() Annotation is required"

    def test_multiple_instances_rejected(self) -> None:
        with pytest.raises(MultiplicityError) as exc_info:
            new_definition("Foo").check_group([parse("@Foo()"), parse("@Foo()")])
        assert exc_info.value.count == 2

    def test_multiple_instances_allowed(self) -> None:
        new_definition("Foo", allow_multiple=True).check_group([parse("@Foo()"), parse("@Foo()")])

    def test_multiplicity_checked_before_instances(self) -> None:
        with pytest.raises(MultiplicityError):
            new_definition("Foo").check_group([parse("@Foo(q=1)"), parse("@Foo()")])

    def test_first_failing_instance_is_reported(self) -> None:
        definition = new_definition("Foo", new_parameter_definition("p", True, ValueType.INT), allow_multiple=True)
        with pytest.raises(TypeMismatchError):
            definition.check_group([parse("@Foo(p=1)"), parse("@Foo(p='x')"), parse("@Foo()")])

    def test_single_instance_is_checked(self) -> None:
        with pytest.raises(UnknownParameterError):
            new_definition("Foo", required=True).check_group([parse("@Foo(q=1)")])
