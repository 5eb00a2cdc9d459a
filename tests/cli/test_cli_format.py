# topmark:header:start
#
#   project      : ReflowMark
#   file         : test_cli_format.py
#   file_relpath : tests/cli/test_cli_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `format` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from reflowmark.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

LONG = "class A {\n    // one two three four five six seven\n}\n"
WRAPPED = "class A {\n    // one two three four\n    // five six seven\n}\n"


@mark_cli
def test_format_rewrites_files(isolation: Path) -> None:
    target = isolation / "A.java"
    target.write_text(LONG, encoding="utf-8")

    result = run_cli_in(isolation, ["--no-color", "format", "--width", "25", "A.java"])

    assert_SUCCESS(result)
    assert "1 of 1 file(s) reformatted." in result.output
    assert target.read_text(encoding="utf-8") == WRAPPED

    again = run_cli_in(isolation, ["--no-color", "format", "--width", "25", "A.java"])
    assert_SUCCESS(again)
    assert "0 of 1 file(s) reformatted." in again.output


@mark_cli
def test_format_preserves_crlf(isolation: Path) -> None:
    target = isolation / "A.java"
    target.write_bytes(LONG.replace("\n", "\r\n").encode("utf-8"))

    assert_SUCCESS(run_cli_in(isolation, ["--no-color", "format", "--width", "25", "A.java"]))
    assert target.read_bytes() == WRAPPED.replace("\n", "\r\n").encode("utf-8")


@mark_cli
def test_format_stdout_leaves_files_alone(isolation: Path) -> None:
    target = isolation / "A.java"
    target.write_text(LONG, encoding="utf-8")

    result = run_cli_in(isolation, ["--no-color", "format", "--stdout", "--width", "25", "A.java"])

    assert_SUCCESS(result)
    assert result.output == WRAPPED
    assert target.read_text(encoding="utf-8") == LONG


@mark_cli
def test_format_stdin_to_stdout(isolation: Path) -> None:
    result = run_cli_in(
        isolation, ["--no-color", "format", "--width", "25", "-"], input_text=LONG
    )
    assert_SUCCESS(result)
    assert result.output == WRAPPED


@mark_cli
def test_format_formatting_flags(isolation: Path) -> None:
    """Formatting flags override the configuration."""
    source = "/**\n * @param name the value\n */\nclass A {}\n"
    result = run_cli_in(
        isolation,
        ["--no-color", "format", "--new-line-for-parameter", "--indent-root-tags", "-"],
        input_text=source,
    )
    assert_SUCCESS(result)
    assert result.output == "/**\n * @param name\n *        the value\n */\nclass A {}\n"


@mark_cli
def test_format_requires_paths(isolation: Path) -> None:
    assert_exit(run_cli_in(isolation, ["--no-color", "format"]), ExitCode.USAGE_ERROR)


@mark_cli
def test_format_stdin_keeps_crlf(isolation: Path) -> None:
    """Standard input is read as bytes, so CRLF line endings survive."""
    source = LONG.replace("\n", "\r\n").encode("utf-8")

    result = run_cli_in(
        isolation, ["--no-color", "format", "--width", "25", "-"], input_text=source
    )

    assert_SUCCESS(result)
    assert result.stdout_bytes == WRAPPED.replace("\n", "\r\n").encode("utf-8")


@mark_cli
def test_format_stdin_rejects_invalid_utf8(isolation: Path) -> None:
    result = run_cli_in(isolation, ["--no-color", "format", "-"], input_text=b"// caf\xe9\n")
    assert_exit(result, ExitCode.ENCODING_ERROR)


class _MonoFont:
    """Font with a fixed advance of 6 pixels per character."""

    def getlength(self, text: str) -> float:
        return 6.0 * len(text)


class _BrokenFont:
    def getlength(self, text: str) -> float:
        raise OSError("glyph table damaged")


@mark_cli
def test_format_pixel_mode_from_config_file(
    isolation: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """``measurement_mode = "pixel"`` with a ``font_path`` is usable from the CLI."""
    loaded: list[tuple[str, int]] = []

    def fake_truetype(path: str, size: int) -> _MonoFont:
        loaded.append((path, size))
        return _MonoFont()

    monkeypatch.setattr("reflowmark.comment.measure.ImageFont.truetype", fake_truetype)
    (isolation / "mono.ttf").write_bytes(b"")
    (isolation / "reflowmark.toml").write_text(
        '[formatting]\nmax_line_width = 25\nmeasurement_mode = "pixel"\n'
        'font_path = "mono.ttf"\nfont_size = 11\n',
        encoding="utf-8",
    )
    (isolation / "A.java").write_text(LONG, encoding="utf-8")

    result = run_cli_in(isolation, ["--no-color", "check", "A.java"])

    assert_exit(result, ExitCode.WOULD_CHANGE)
    assert len(loaded) == 1
    assert loaded[0][1] == 11


@mark_cli
def test_format_pixel_mode_from_flags(isolation: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "reflowmark.comment.measure.ImageFont.truetype", lambda path, size: _MonoFont()
    )
    (isolation / "mono.ttf").write_bytes(b"")

    result = run_cli_in(
        isolation,
        ["--no-color", "format", "--width", "25", "--measurement-mode", "pixel"]
        + ["--font", "mono.ttf", "--font-size", "10", "-"],
        input_text=LONG,
    )

    assert_SUCCESS(result)
    assert result.stdout_bytes == WRAPPED.encode("utf-8")


@mark_cli
def test_format_pixel_mode_without_font_is_a_config_error(isolation: Path) -> None:
    result = run_cli_in(
        isolation, ["--no-color", "format", "--measurement-mode", "pixel", "-"], input_text=LONG
    )
    assert_exit(result, ExitCode.CONFIG_ERROR)


@mark_cli
def test_format_summarizes_unformattable_comments(
    isolation: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Comments whose measurement fails are left alone and counted at the end."""
    monkeypatch.setattr(
        "reflowmark.comment.measure.ImageFont.truetype", lambda path, size: _BrokenFont()
    )
    (isolation / "broken.ttf").write_bytes(b"")
    target = isolation / "A.java"
    target.write_text(LONG, encoding="utf-8")

    result = run_cli_in(
        isolation,
        ["--no-color", "-v", "format", "--measurement-mode", "pixel", "--font", "broken.ttf"]
        + ["A.java"],
    )

    assert_SUCCESS(result)
    assert target.read_text(encoding="utf-8") == LONG
    assert "1 error" in result.output
    assert "1 comment(s) could not be formatted." in result.output
