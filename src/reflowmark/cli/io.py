# topmark:header:start
#
#   project      : ReflowMark
#   file         : io.py
#   file_relpath : src/reflowmark/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and write source files for the CLI.

Files are read and written with ``newline=""`` so that line delimiters pass
through unchanged. A path of ``-`` stands for standard input.
"""

from __future__ import annotations

from pathlib import Path

import click

from reflowmark.cli.errors import (
    ReflowmarkEncodingError,
    ReflowmarkFileNotFoundError,
    ReflowmarkIOError,
)
from reflowmark.config.logging import get_logger

logger = get_logger(__name__)

STDIN_MARKER = "-"
STDIN_DISPLAY_NAME = "<stdin>"

# Files picked up when a directory is given; explicit file paths are always accepted.
SOURCE_SUFFIXES: frozenset[str] = frozenset(
    {
        ".java", ".c", ".h", ".cc", ".cpp", ".cxx", ".hpp", ".hh", ".cs", ".js", ".mjs",
        ".cjs", ".jsx", ".ts", ".tsx", ".go", ".kt", ".kts", ".rs", ".swift", ".scala",
    }
)


def display_name(path: str) -> str:
    """Return the name shown to the user for ``path``."""
    return STDIN_DISPLAY_NAME if path == STDIN_MARKER else path


def expand_paths(paths: tuple[str, ...] | list[str]) -> list[str]:
    """Expand directories into the source files below them (sorted).

    Raises:
        ReflowmarkFileNotFoundError: If a path does not exist.
    """
    out: list[str] = []
    for raw in paths:
        if raw == STDIN_MARKER:
            out.append(raw)
            continue
        p = Path(raw)
        if p.is_dir():
            out.extend(
                str(child)
                for child in sorted(p.rglob("*"))
                if child.is_file() and child.suffix.lower() in SOURCE_SUFFIXES
            )
        elif p.exists():
            out.append(raw)
        else:
            raise ReflowmarkFileNotFoundError(f"No such file or directory: {raw}")
    return out


def read_source(path: str) -> str:
    """Return the text of ``path`` (standard input for ``-``).

    Raises:
        ReflowmarkFileNotFoundError: If the file does not exist.
        ReflowmarkEncodingError: If the file is not valid UTF-8.
        ReflowmarkIOError: For any other read failure.
    """
    if path == STDIN_MARKER:
        # Decode ourselves: a text stream would translate CRLF line endings.
        data = click.get_binary_stream("stdin").read()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ReflowmarkEncodingError(
                f"Cannot decode standard input as UTF-8: {e.reason}"
            ) from e
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            return fh.read()
    except FileNotFoundError as e:
        raise ReflowmarkFileNotFoundError(f"No such file: {path}") from e
    except UnicodeDecodeError as e:
        raise ReflowmarkEncodingError(f"Cannot decode {path} as UTF-8: {e.reason}") from e
    except OSError as e:
        raise ReflowmarkIOError(f"Cannot read {path}: {e.strerror or e}") from e


def write_source(path: str, text: str) -> None:
    """Write ``text`` to ``path``.

    Raises:
        ReflowmarkIOError: If the file cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as e:
        raise ReflowmarkIOError(f"Cannot write {path}: {e.strerror or e}") from e
    logger.debug("Wrote %s", path)
