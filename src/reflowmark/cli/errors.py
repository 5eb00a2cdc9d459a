# topmark:header:start
#
#   project      : ReflowMark
#   file         : errors.py
#   file_relpath : src/reflowmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ReflowMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Click catches them, prints the message, and
    exits with ``exit_code``.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from reflowmark.cli.exit_codes import ExitCode


class ReflowmarkCliError(click.ClickException):
    """Base class for all ReflowMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ReflowmarkUsageError(ReflowmarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ReflowmarkConfigError(ReflowmarkCliError):
    """Error for configuration errors (unreadable or malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ReflowmarkFileNotFoundError(ReflowmarkCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ReflowmarkIOError(ReflowmarkCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class ReflowmarkEncodingError(ReflowmarkCliError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class ReflowmarkPipelineError(ReflowmarkCliError):
    """Error for internal formatting failures (e.g. edits that no longer match)."""

    exit_code = ExitCode.PIPELINE_ERROR
