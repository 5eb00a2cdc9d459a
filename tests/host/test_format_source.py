# topmark:header:start
#
#   project      : ReflowMark
#   file         : test_format_source.py
#   file_relpath : tests/host/test_format_source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for formatting every comment of a source text."""

from __future__ import annotations

import pytest

from reflowmark.comment.measure import CharMeasurement
from reflowmark.config.model import Config
from reflowmark.config.types import MeasurementMode
from reflowmark.core.errors import ConfigurationError
from reflowmark.host.formatter import FormatResult, format_source

JAVA = (
    "class A {\n"
    "    // a b c d e f\n"
    "    int x; // trailing comment stays where it is\n"
    "    /** short */\n"
    "    void f() {}\n"
    "}\n"
)


def test_format_source_rewraps_comments_in_place() -> None:
    result: FormatResult = format_source(JAVA, Config(max_line_width=14))

    assert result.changed
    assert result.changed_comments == 1
    assert len(result.edits) == 2
    assert result.formatted == JAVA.replace(
        "    // a b c d e f\n", "    // a b c d\n    // e f\n"
    )


def test_format_source_is_idempotent() -> None:
    config = Config(max_line_width=14)
    once = format_source(JAVA, config)
    twice = format_source(once.formatted, config)
    assert not twice.changed
    assert twice.changed_comments == 0


def test_format_source_keeps_crlf() -> None:
    text = JAVA.replace("\n", "\r\n")
    result = format_source(text, Config(max_line_width=14))
    assert "    // a b c d\r\n    // e f\r\n" in result.formatted
    assert "\n" not in result.formatted.replace("\r\n", "")


def test_format_source_without_comments() -> None:
    result = format_source("int x;\n", Config())
    assert not result.changed
    assert result.edits == ()
    assert result.diagnostics == ()


def test_pixel_mode_needs_a_measurement() -> None:
    """Pixel mode without a host measurement fails; an explicit one is used."""
    config = Config(measurement_mode=MeasurementMode.PIXEL, max_line_width=14)
    with pytest.raises(ConfigurationError):
        format_source(JAVA, config)

    result = format_source(JAVA, config, measurement=CharMeasurement())
    assert result.changed_comments == 1
