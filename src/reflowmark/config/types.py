# topmark:header:start
#
#   project      : ReflowMark
#   file         : types.py
#   file_relpath : src/reflowmark/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumerations used by the configuration layer."""

from __future__ import annotations

from enum import Enum


class MeasurementMode(str, Enum):
    """How comment text widths are measured.

    Members:
        CHAR: Count characters, expanding tabs to the next tab stop.
        PIXEL: Measure rendered extent with a host-provided font.
    """

    CHAR = "char"
    PIXEL = "pixel"
