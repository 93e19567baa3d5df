# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML loader for annotation definition files."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from annotext.model.values import ValueType
from annotext.validation.definitions import Definition, ParameterDefinition

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DefinitionConfigError(Exception):
    """Raised when a definition file is invalid or cannot be loaded."""


def load_definitions(path: Path) -> list[Definition]:
    """Load annotation definitions from a YAML file.

    The file holds a top-level ``annotations`` list::

        annotations:
          - name: Route
            required: true
            allow-multiple: false
            allow-unknown-parameters: false
            parameters:
              - name: path
                type: string
                required: true

    Args:
        path: Path to the definition file.

    Returns:
        The definitions in file order.

    Raises:
        DefinitionConfigError: If the file cannot be read or its content is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DefinitionConfigError(f"Definition file not found: {path}") from None
    except OSError as exc:
        raise DefinitionConfigError(f"Cannot read definition file: {exc}") from exc

    definitions = parse_definitions(text, source_label=str(path))
    logger.debug("Loaded %d annotation definitions from %s", len(definitions), path)
    return definitions


def parse_definitions(text: str, source_label: str = "<string>") -> list[Definition]:
    """Parse definition YAML text into a list of Definitions.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        DefinitionConfigError: If the YAML is invalid or does not describe definitions.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DefinitionConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, dict):
        raise DefinitionConfigError(f"{source_label}: definition file must be a YAML mapping")

    raw_definitions = data.get("annotations", [])
    if not isinstance(raw_definitions, list):
        raise DefinitionConfigError(f"{source_label}: 'annotations' must be a list")

    definitions: list[Definition] = []
    seen: set[str] = set()
    for index, entry in enumerate(raw_definitions):
        definition = _parse_definition(entry, f"{source_label}: annotations[{index}]")
        if definition.name in seen:
            raise DefinitionConfigError(
                f"{source_label}: annotations[{index}] duplicates definition '{definition.name}'"
            )
        seen.add(definition.name)
        definitions.append(definition)
    return definitions


# ################
# Implementation
# ################

_TYPE_NAMES: dict[str, ValueType] = {
    "string": ValueType.STRING,
    "int": ValueType.INT,
    "float": ValueType.FLOAT,
    "bool": ValueType.BOOL,
}


def _require_string(mapping: dict[str, object], key: str, location: str) -> str:
    """Extract a required string field from a mapping, raising DefinitionConfigError if missing."""
    if key not in mapping:
        raise DefinitionConfigError(f"{location}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise DefinitionConfigError(f"{location}: '{key}' must be a non-empty string")
    return value


def _optional_bool(mapping: dict[str, object], key: str, location: str) -> bool:
    """Extract an optional boolean flag, defaulting to False."""
    value = mapping.get(key, False)
    if not isinstance(value, bool):
        raise DefinitionConfigError(f"{location}: '{key}' must be true or false")
    return value


def _parse_definition(entry: object, location: str) -> Definition:
    """Parse a single annotation definition entry."""
    if not isinstance(entry, dict):
        raise DefinitionConfigError(f"{location} must be a YAML mapping")

    name = _require_string(entry, "name", location)

    raw_parameters = entry.get("parameters", [])
    if not isinstance(raw_parameters, list):
        raise DefinitionConfigError(f"{location}: 'parameters' must be a list")

    parameters: list[ParameterDefinition] = []
    for index, raw in enumerate(raw_parameters):
        param = _parse_parameter(raw, f"{location}.parameters[{index}]")
        if any(p.name == param.name for p in parameters):
            raise DefinitionConfigError(f"{location}.parameters[{index}] duplicates parameter '{param.name}'")
        parameters.append(param)

    return Definition(
        name=name,
        parameters=tuple(parameters),
        allow_unknown_parameters=_optional_bool(entry, "allow-unknown-parameters", location),
        required=_optional_bool(entry, "required", location),
        allow_multiple=_optional_bool(entry, "allow-multiple", location),
    )


def _parse_parameter(entry: object, location: str) -> ParameterDefinition:
    """Parse a single parameter definition entry."""
    if not isinstance(entry, dict):
        raise DefinitionConfigError(f"{location} must be a YAML mapping")

    name = _require_string(entry, "name", location)
    type_name = _require_string(entry, "type", location)
    if type_name not in _TYPE_NAMES:
        allowed = ", ".join(_TYPE_NAMES)
        raise DefinitionConfigError(f"{location}: unknown type '{type_name}' (expected one of: {allowed})")

    return ParameterDefinition(
        name=name,
        expected_type=_TYPE_NAMES[type_name],
        required=_optional_bool(entry, "required", location),
    )
