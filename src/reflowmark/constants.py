# topmark:header:start
#
#   project      : ReflowMark
#   file         : constants.py
#   file_relpath : src/reflowmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

REFLOWMARK_VERSION: str = get_version("reflowmark")

# Config file names looked up during discovery:
REFLOWMARK_TOML_NAME: Final[str] = "reflowmark.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "reflowmark"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: Final[str] = "REFLOWMARK_LOG_LEVEL"

# Block comments starting with this prefix are never reformatted:
NON_FORMAT_START_PREFIX: Final[str] = "/*-"
# Default in-comment tag that disables formatting of that comment:
DEFAULT_NO_FORMAT_TAG: Final[str] = "@formatter:off"

DEFAULT_MAX_LINE_WIDTH: Final[int] = 80
DEFAULT_TAB_SIZE: Final[int] = 4
# Point size used when a font file is loaded for pixel measurement:
DEFAULT_FONT_SIZE: Final[int] = 12

# Documentation tag sets (tag names are matched case-insensitively for HTML).
DEFAULT_ROOT_TAGS: Final[tuple[str, ...]] = (
    "@author",
    "@deprecated",
    "@exception",
    "@param",
    "@return",
    "@see",
    "@serial",
    "@serialData",
    "@serialField",
    "@since",
    "@throws",
    "@version",
)
DEFAULT_PARAM_TAGS: Final[tuple[str, ...]] = (
    "@exception",
    "@param",
    "@serialField",
    "@throws",
)
DEFAULT_IMMUTABLE_TAGS: Final[tuple[str, ...]] = ("pre", "code", "tt")
DEFAULT_BREAK_TAGS: Final[tuple[str, ...]] = ("br",)
DEFAULT_PARAGRAPH_TAGS: Final[tuple[str, ...]] = (
    "blockquote",
    "dl",
    "hr",
    "ol",
    "p",
    "pre",
    "table",
    "ul",
)
DEFAULT_NEWLINE_TAGS: Final[tuple[str, ...]] = (
    "dd",
    "dt",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "li",
    "td",
    "th",
    "tr",
)
