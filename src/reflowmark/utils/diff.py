# topmark:header:start
#
#   project      : ReflowMark
#   file         : diff.py
#   file_relpath : src/reflowmark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs between original and formatted sources.

`unified_diff` produces the patch text shown by ``reflowmark check --diff``;
`render_patch` colors it for terminal display.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING, Sequence

from yachalk import chalk

from reflowmark.config.logging import get_logger

if TYPE_CHECKING:
    from reflowmark.config.logging import ReflowmarkLogger

logger: ReflowmarkLogger = get_logger(__name__)


def unified_diff(path: str, before: str, after: str, *, context: int = 3) -> str:
    """Return a unified diff from ``before`` to ``after`` (empty when equal).

    Args:
        path: Name shown in the ``---`` / ``+++`` headers.
        before: The original text.
        after: The formatted text.
        context: Number of context lines around each hunk.

    Returns:
        The diff as a single string.
    """
    if before == after:
        return ""
    diff_lines = difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile=f"{path} (original)",
        tofile=f"{path} (formatted)",
        n=context,
    )
    patch = "".join(line if line.endswith(("\n", "\r")) else line + "\n" for line in diff_lines)
    logger.trace("Diff for %s:\n%s", path, patch)
    return patch


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        if line.startswith(("---", "+++")):
            return chalk.bold(content)
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
