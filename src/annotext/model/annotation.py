# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""The parsed annotation entity."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

from annotext.model.values import UNKNOWN, StringValue, Value

# ###############
# Public Interface
# ###############


class Annotation(BaseModel):
    """A named annotation such as ``@Route(path="/orders", method="GET")``.

    Attributes:
        name: The identifier following the ``@``.
        parameters: Parameter values keyed by name, in the order they were set.
    """

    name: str = _Field(min_length=1)
    parameters: dict[str, Value] = _Field(default_factory=dict)

    def get(self, name: str) -> Value:
        """Return the value of a parameter, or the Unknown value if it is absent."""
        return self.parameters.get(name, UNKNOWN)

    def set(self, name: str, value: Value) -> None:
        """Insert or overwrite a parameter value."""
        self.parameters[name] = value

    def has(self, name: str) -> bool:
        """Return True if the parameter is present."""
        return name in self.parameters

    def __str__(self) -> str:
        rendered = ", ".join(f"{key}={_render_value(value)}" for key, value in self.parameters.items())
        return f"@{self.name}({rendered})"


def quote_string(text: str) -> str:
    """Return ``text`` as a double-quoted literal the lexer reads back unchanged."""
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


# ################
# Implementation
# ################

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _render_value(value: Value) -> str:
    if isinstance(value, StringValue):
        return quote_string(value.value)
    return value.as_str()
