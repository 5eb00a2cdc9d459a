# topmark:header:start
#
#   project      : ReflowMark
#   file         : test_cli_options.py
#   file_relpath : tests/cli/test_cli_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for verbosity and color resolution."""

from __future__ import annotations

import pytest

from reflowmark.cli.errors import ReflowmarkUsageError
from reflowmark.cli.options import ColorMode, resolve_color_mode, resolve_verbosity


def test_resolve_verbosity() -> None:
    assert resolve_verbosity(0, 0) == 0
    assert resolve_verbosity(2, 0) == 2
    assert resolve_verbosity(0, 3) == -1
    with pytest.raises(ReflowmarkUsageError):
        resolve_verbosity(1, 1)


def test_resolve_color_mode_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """Explicit modes win over the environment, which wins over TTY detection."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False) is True
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True) is False
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is True
    assert resolve_color_mode(cli_mode=None, stdout_isatty=False) is False

    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=False) is True
