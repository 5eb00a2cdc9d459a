# topmark:header:start
#
#   project      : ReflowMark
#   file         : errors.py
#   file_relpath : src/reflowmark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for the ReflowMark engine and host layer.

These exceptions are UI-agnostic. The CLI maps them onto
[`ExitCode`][reflowmark.cli.exit_codes.ExitCode] values in
``reflowmark.cli.errors``.
"""

from __future__ import annotations


class ReflowmarkError(Exception):
    """Base class for all ReflowMark runtime errors."""


class MeasurementError(ReflowmarkError):
    """Raised when a text measurement cannot compute a width.

    A comment region catches this error, abandons the region and reports an
    empty edit set together with an error diagnostic.
    """


class DocumentMismatchError(ReflowmarkError):
    """Raised when edits no longer match the document they target.

    Either the document text changed since the comment snapshot was taken,
    or two edit sets overlap. Nothing is applied when this is raised.
    """

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class ConfigurationError(ReflowmarkError):
    """Raised for configuration that cannot be used at all (not merely defaulted)."""
