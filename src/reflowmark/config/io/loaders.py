# topmark:header:start
#
#   project      : ReflowMark
#   file         : loaders.py
#   file_relpath : src/reflowmark/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides helpers for reading ReflowMark configuration from:
- the runtime defaults defined in code, and
- on-disk TOML files (`reflowmark.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from reflowmark.config.keys import Toml
from reflowmark.config.logging import get_logger
from reflowmark.config.types import MeasurementMode
from reflowmark.constants import (
    DEFAULT_BREAK_TAGS,
    DEFAULT_FONT_SIZE,
    DEFAULT_IMMUTABLE_TAGS,
    DEFAULT_MAX_LINE_WIDTH,
    DEFAULT_NEWLINE_TAGS,
    DEFAULT_NO_FORMAT_TAG,
    DEFAULT_PARAGRAPH_TAGS,
    DEFAULT_PARAM_TAGS,
    DEFAULT_ROOT_TAGS,
    DEFAULT_TAB_SIZE,
)
from reflowmark.core.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from reflowmark.config.logging import ReflowmarkLogger

    from .types import TomlTable

logger: ReflowmarkLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return ReflowMark's **runtime defaults** as a Python dict.

    This function performs no I/O. Sections and keys align with
    `reflowmark.config.keys.Toml`.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.
        The returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_FORMATTING: {
            Toml.KEY_MAX_LINE_WIDTH: DEFAULT_MAX_LINE_WIDTH,
            Toml.KEY_TAB_SIZE: DEFAULT_TAB_SIZE,
            Toml.KEY_CLEAR_BLANK_LINES: False,
            Toml.KEY_USE_TABS_FOR_INDENT: False,
            Toml.KEY_FORMAT_DOC_FIRST_LINE: True,
            Toml.KEY_MEASUREMENT_MODE: MeasurementMode.CHAR.value,
            Toml.KEY_INDENT_ROOT_TAGS: False,
            Toml.KEY_NEW_LINE_FOR_PARAMETER: False,
            Toml.KEY_NO_FORMAT_TAG: DEFAULT_NO_FORMAT_TAG,
            Toml.KEY_FONT_SIZE: DEFAULT_FONT_SIZE,
        },
        Toml.SECTION_TAGS: {
            Toml.KEY_ROOT_TAGS: list(DEFAULT_ROOT_TAGS),
            Toml.KEY_PARAM_TAGS: list(DEFAULT_PARAM_TAGS),
            Toml.KEY_IMMUTABLE_TAGS: list(DEFAULT_IMMUTABLE_TAGS),
            Toml.KEY_BREAK_TAGS: list(DEFAULT_BREAK_TAGS),
            Toml.KEY_PARAGRAPH_TAGS: list(DEFAULT_PARAGRAPH_TAGS),
            Toml.KEY_NEWLINE_TAGS: list(DEFAULT_NEWLINE_TAGS),
        },
    }


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text with tomlkit into a plain dict.

    Raises:
        ConfigurationError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigurationError(f"Invalid TOML: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``reflowmark.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML.

    Notes:
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    try:
        return parse_toml_text(text)
    except ConfigurationError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigurationError(f"Error decoding TOML from {path}: {e.__cause__}") from e
