# topmark:header:start
#
#   project      : ReflowMark
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output and group-level behavior."""

from __future__ import annotations

from reflowmark.cli.exit_codes import ExitCode
from reflowmark.constants import REFLOWMARK_VERSION
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_version() -> None:
    """It should output the installed version string exactly."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == REFLOWMARK_VERSION


@mark_cli
def test_verbose_version_is_labelled() -> None:
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert "ReflowMark version:" in result.output
    assert REFLOWMARK_VERSION in result.output


@mark_cli
def test_group_without_command_prints_hint() -> None:
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "check" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["--no-color", "-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)
