# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading annotation definitions from YAML files."""

from annotext.schema.config import DefinitionConfigError, load_definitions, parse_definitions

__all__ = [
    "DefinitionConfigError",
    "load_definitions",
    "parse_definitions",
]
