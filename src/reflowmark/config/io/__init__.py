# topmark:header:start
#
#   project      : ReflowMark
#   file         : __init__.py
#   file_relpath : src/reflowmark/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for ReflowMark configuration.

This package centralizes helpers for reading, validating, and writing TOML
used by the configuration layer. Functions here do not mutate configuration
objects.

TOML parsing/formatting:
    ReflowMark uses `tomlkit` for parsing and rendering.

    - `load_toml_dict()` parses on-disk TOML and returns plain dicts.
    - `to_toml()` renders after stripping TOML-incompatible values like `None`.

Typical flow:
    1. Start from the runtime defaults (``load_defaults_dict``).
    2. Load project TOML files (``load_toml_dict``).
    3. Read values with the checked getters.
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    is_any_list,
    is_toml_table,
)
from .loaders import load_defaults_dict, load_toml_dict, parse_toml_text
from .render import nest_under_pyproject, to_toml
from .types import TomlTable

__all__: list[str] = [
    "TomlTable",
    "get_bool_value_or_none_checked",
    "get_enum_value_checked",
    "get_int_value_or_none_checked",
    "get_string_list_value_or_none_checked",
    "get_string_value_or_none_checked",
    "get_table_value",
    "is_any_list",
    "is_toml_table",
    "load_defaults_dict",
    "load_toml_dict",
    "nest_under_pyproject",
    "parse_toml_text",
    "to_toml",
]
