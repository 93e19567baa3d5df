# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed parameter values for parsed annotations.

Every value can be read as any of the four primitive types. Reads never
fail: a value that cannot be coerced yields the zero value of the requested
type.
"""

from __future__ import annotations

import math
import re
from abc import abstractmethod
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ValueType(Enum):
    """The type tag of a parameter value."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    UNKNOWN = "unknown"


class _BaseValue(BaseModel):
    """Shared coercion behaviour for all value variants.

    Each variant must override :attr:`value_type`; the base class is abstract.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    @property
    @abstractmethod
    def value_type(self) -> ValueType: ...

    def as_str(self) -> str:
        return ""

    def as_int(self) -> int:
        return _parse_int(self.as_str())

    def as_float(self) -> float:
        return _parse_float(self.as_str())

    def as_bool(self) -> bool:
        """Return True only for a literal ``true`` value."""
        return False

    def __str__(self) -> str:
        return self.as_str()


class StringValue(_BaseValue):
    """A quoted or raw string literal."""

    kind: Literal["string"] = "string"
    value: str

    @property
    def value_type(self) -> ValueType:
        return ValueType.STRING

    def as_str(self) -> str:
        return self.value


class IntValue(_BaseValue):
    """A base-10 integer literal."""

    kind: Literal["int"] = "int"
    value: int

    @property
    def value_type(self) -> ValueType:
        return ValueType.INT

    def as_str(self) -> str:
        return _format_int(self.value)

    def as_int(self) -> int:
        return self.value

    def as_float(self) -> float:
        try:
            return float(self.value)
        except OverflowError:
            return 0.0


class FloatValue(_BaseValue):
    """A decimal floating-point literal. Renders with four decimal places."""

    kind: Literal["float"] = "float"
    value: float

    @property
    def value_type(self) -> ValueType:
        return ValueType.FLOAT

    def as_str(self) -> str:
        return f"{self.value:.4f}"

    def as_int(self) -> int:
        if not math.isfinite(self.value):
            return 0
        return int(self.value)

    def as_float(self) -> float:
        return self.value


class BoolValue(_BaseValue):
    """A ``true`` or ``false`` keyword literal."""

    kind: Literal["bool"] = "bool"
    value: bool

    @property
    def value_type(self) -> ValueType:
        return ValueType.BOOL

    def as_str(self) -> str:
        return "true" if self.value else "false"

    def as_bool(self) -> bool:
        return self.value


class UnknownValue(_BaseValue):
    """The value of a parameter that is not present."""

    kind: Literal["unknown"] = "unknown"

    @property
    def value_type(self) -> ValueType:
        return ValueType.UNKNOWN


# A parameter value — exactly one of the literal variants.
Value = Annotated[
    StringValue | IntValue | FloatValue | BoolValue | UnknownValue,
    _Field(discriminator="kind"),
]

UNKNOWN = UnknownValue()


def from_payloads(
    *,
    string: str | None = None,
    integer: int | None = None,
    number: float | None = None,
    boolean: bool | None = None,
) -> Value:
    """Build a value from optional payloads.

    When more than one payload is given, the first present one in the order
    integer, number, boolean, string wins.
    """
    if integer is not None:
        return IntValue(value=integer)
    if number is not None:
        return FloatValue(value=float(number))
    if boolean is not None:
        return BoolValue(value=boolean)
    if string is not None:
        return StringValue(value=string)
    return UNKNOWN


def value_of(obj: object) -> Value:
    """Wrap a Python literal in the matching value variant.

    Raises:
        TypeError: If ``obj`` is not a str, int, float, bool, or None.
    """
    # bool is a subclass of int and must be tested first.
    if isinstance(obj, bool):
        return BoolValue(value=obj)
    if isinstance(obj, int):
        return IntValue(value=obj)
    if isinstance(obj, float):
        return FloatValue(value=obj)
    if isinstance(obj, str):
        return StringValue(value=obj)
    if obj is None:
        return UNKNOWN
    raise TypeError(f"Cannot build an annotation value from {type(obj).__name__}")


# ################
# Implementation
# ################

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def _parse_int(text: str) -> int:
    """Parse a base-10 integer, returning 0 if the text is not one."""
    if _INT_PATTERN.fullmatch(text) is None:
        return 0
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter's integer string conversion limit.
        return 0


def _format_int(value: int) -> str:
    """Render an integer in base 10, including ones past the conversion limit."""
    try:
        return str(value)
    except ValueError:
        sign = "-" if value < 0 else ""
        chunks: list[str] = []
        value = abs(value)
        while value:
            value, chunk = divmod(value, _CHUNK_BASE)
            chunks.append(f"{chunk:0{_CHUNK_DIGITS}d}")
        return sign + "".join(reversed(chunks)).lstrip("0")


def _parse_float(text: str) -> float:
    """Parse a decimal float, returning 0.0 if the text is not one."""
    if not text or text != text.strip() or "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0
