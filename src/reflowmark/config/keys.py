# topmark:header:start
#
#   project      : ReflowMark
#   file         : keys.py
#   file_relpath : src/reflowmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ReflowMark configuration.

This module defines the string constants used when reading, writing, and
validating ReflowMark configuration from TOML sources (``reflowmark.toml``
and ``[tool.reflowmark]`` in ``pyproject.toml``).

Keys defined here represent the *external configuration API*: renaming or
removing one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ReflowMark configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [formatting]
    SECTION_FORMATTING: Final[str] = "formatting"

    KEY_MAX_LINE_WIDTH: Final[str] = "max_line_width"
    KEY_TAB_SIZE: Final[str] = "tab_size"
    KEY_CLEAR_BLANK_LINES: Final[str] = "clear_blank_lines"
    KEY_USE_TABS_FOR_INDENT: Final[str] = "use_tabs_for_indent"
    KEY_FORMAT_DOC_FIRST_LINE: Final[str] = "format_doc_first_line"
    KEY_MEASUREMENT_MODE: Final[str] = "measurement_mode"
    KEY_INDENT_ROOT_TAGS: Final[str] = "indent_root_tags"
    KEY_NEW_LINE_FOR_PARAMETER: Final[str] = "new_line_for_parameter"
    KEY_NO_FORMAT_TAG: Final[str] = "no_format_tag"
    KEY_FONT_PATH: Final[str] = "font_path"
    KEY_FONT_SIZE: Final[str] = "font_size"

    # [tags]
    SECTION_TAGS: Final[str] = "tags"

    KEY_ROOT_TAGS: Final[str] = "root_tags"
    KEY_PARAM_TAGS: Final[str] = "param_tags"
    KEY_IMMUTABLE_TAGS: Final[str] = "immutable_tags"
    KEY_BREAK_TAGS: Final[str] = "break_tags"
    KEY_PARAGRAPH_TAGS: Final[str] = "paragraph_tags"
    KEY_NEWLINE_TAGS: Final[str] = "newline_tags"


class ArgKey:
    """Keys of the override mapping built by the CLI (and accepted by the API).

    These are deliberately kept apart from `Toml` even where the spelling
    coincides.
    """

    CONFIG_FILES: Final[str] = "config_files"
    NO_CONFIG: Final[str] = "no_config"
    MAX_LINE_WIDTH: Final[str] = "max_line_width"
    TAB_SIZE: Final[str] = "tab_size"
    CLEAR_BLANK_LINES: Final[str] = "clear_blank_lines"
    USE_TABS_FOR_INDENT: Final[str] = "use_tabs_for_indent"
    FORMAT_DOC_FIRST_LINE: Final[str] = "format_doc_first_line"
    INDENT_ROOT_TAGS: Final[str] = "indent_root_tags"
    NEW_LINE_FOR_PARAMETER: Final[str] = "new_line_for_parameter"
    MEASUREMENT_MODE: Final[str] = "measurement_mode"
    FONT_PATH: Final[str] = "font_path"
    FONT_SIZE: Final[str] = "font_size"
