# topmark:header:start
#
#   project      : ReflowMark
#   file         : edits.py
#   file_relpath : src/reflowmark/comment/edits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minimal text edits between an original comment and its rendering.

`EditEmitter` compares every rendered line with the original span it
replaces. Identical spans produce nothing; differing spans produce one
`TextEdit` trimmed to the differing middle (common prefix and suffix
removed). The edits of one comment are returned as a `CommentEdit`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from reflowmark.config.logging import get_logger
from reflowmark.core.errors import DocumentMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from reflowmark.comment.types import RenderedLine
    from reflowmark.config.logging import ReflowmarkLogger
    from reflowmark.core.diagnostics import Diagnostic

logger: ReflowmarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace ``length`` characters at ``offset`` with ``text``.

    A zero ``length`` makes the edit a pure insertion.
    """

    offset: int
    length: int
    text: str

    @property
    def end(self) -> int:
        """Exclusive end of the replaced span."""
        return self.offset + self.length


def common_affixes(old: str, new: str) -> tuple[int, int]:
    """Return the lengths of the common prefix and (non-overlapping) common suffix."""
    limit = min(len(old), len(new))
    prefix = 0
    while prefix < limit and old[prefix] == new[prefix]:
        prefix += 1
    suffix = 0
    while suffix < limit - prefix and old[-1 - suffix] == new[-1 - suffix]:
        suffix += 1
    return prefix, suffix


def apply_text_edits(text: str, edits: Iterable[TextEdit], *, base: int = 0) -> str:
    """Apply non-overlapping ``edits`` to ``text`` whose first character sits at ``base``.

    Raises:
        DocumentMismatchError: If edits overlap or fall outside ``text``.
    """
    ordered = sorted(edits, key=lambda e: (e.offset, e.length))
    previous_end = base
    for edit in ordered:
        if edit.offset < previous_end or edit.end > base + len(text):
            raise DocumentMismatchError(
                f"Edit at {edit.offset} overlaps another edit or leaves the text",
                offset=edit.offset,
            )
        previous_end = edit.end
    out = text
    for edit in reversed(ordered):
        start = edit.offset - base
        out = out[:start] + edit.text + out[start + edit.length :]
    return out


@dataclass(frozen=True)
class CommentEdit:
    """The edits produced for one comment.

    Attributes:
        offset (int): Document offset of the comment.
        snapshot (str): The comment text the edits were computed against.
        edits (tuple[TextEdit, ...]): Non-overlapping edits in ascending document order.
        diagnostics (tuple[Diagnostic, ...]): Diagnostics recorded while formatting.
    """

    offset: int
    snapshot: str
    edits: tuple[TextEdit, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def is_empty(self) -> bool:
        """Return True when the comment needs no change."""
        return not self.edits

    @property
    def formatted(self) -> str:
        """Return the comment text after applying the edits."""
        return apply_text_edits(self.snapshot, self.edits, base=self.offset)

    def matches(self, text: str) -> bool:
        """Return True when ``text`` still holds the snapshot at ``offset``."""
        return text[self.offset : self.offset + len(self.snapshot)] == self.snapshot

    def apply(self, text: str) -> str:
        """Apply the edits to the document ``text``.

        Raises:
            DocumentMismatchError: If the document no longer holds the snapshot.
        """
        if not self.matches(text):
            raise DocumentMismatchError(
                f"Document changed at offset {self.offset} since the comment was read",
                offset=self.offset,
            )
        end = self.offset + len(self.snapshot)
        return text[: self.offset] + self.formatted + text[end:]


class EditEmitter:
    """Turn rendered lines into minimal `TextEdit` objects in document coordinates."""

    def __init__(self, snapshot: str, *, offset: int = 0) -> None:
        self.snapshot = snapshot
        self.offset = offset

    def emit(self, rendered: Sequence[RenderedLine]) -> list[TextEdit]:
        """Return the edits for ``rendered`` in ascending order."""
        edits: list[TextEdit] = []
        for line in rendered:
            original = self.snapshot[line.offset : line.end]
            if original == line.text:
                continue
            prefix, suffix = common_affixes(original, line.text)
            edits.append(
                TextEdit(
                    offset=self.offset + line.offset + prefix,
                    length=len(original) - prefix - suffix,
                    text=line.text[prefix : len(line.text) - suffix],
                )
            )
        logger.debug("Emitted %d edit(s) for %d line(s)", len(edits), len(rendered))
        return edits
