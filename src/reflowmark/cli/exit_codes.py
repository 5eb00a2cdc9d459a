# topmark:header:start
#
#   project      : ReflowMark
#   file         : exit_codes.py
#   file_relpath : src/reflowmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the ReflowMark CLI application.

Codes above 2 follow the BSD ``sysexits.h`` conventions so scripts can tell
usage, input and configuration problems apart.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ReflowMark CLI.

    Attributes:
        SUCCESS (int): Nothing to do, or all requested changes were written.
        FAILURE (int): Generic failure.
        WOULD_CHANGE (int): ``check`` found comments that would be reformatted.
        USAGE_ERROR (int): Invalid command line (``EX_USAGE``).
        ENCODING_ERROR (int): Input could not be decoded (``EX_DATAERR``).
        FILE_NOT_FOUND (int): Input path does not exist (``EX_NOINPUT``).
        PIPELINE_ERROR (int): Internal formatting failure (``EX_SOFTWARE``).
        IO_ERROR (int): Reading or writing failed (``EX_IOERR``).
        CONFIG_ERROR (int): Configuration unusable (``EX_CONFIG``).
        UNEXPECTED_ERROR (int): Last-resort code for unhandled errors.

    Usage:
        ```python
        import subprocess
        from reflowmark.cli.exit_codes import ExitCode

        result = subprocess.run(["reflowmark", "check", "src"])
        if result.returncode == ExitCode.WOULD_CHANGE:
            print("Some comments need reformatting.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2
    USAGE_ERROR = 64
    ENCODING_ERROR = 65
    FILE_NOT_FOUND = 66
    PIPELINE_ERROR = 70
    IO_ERROR = 74
    CONFIG_ERROR = 78
    UNEXPECTED_ERROR = 255
