# topmark:header:start
#
#   project      : ReflowMark
#   file         : document.py
#   file_relpath : src/reflowmark/host/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A mutable text document that comment edits are applied to.

`Document.apply` is all-or-nothing: every `CommentEdit` is checked against
the current text before any of them is applied, and edits are applied from
the end of the document backwards so earlier offsets stay valid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reflowmark.comment.edits import CommentEdit
from reflowmark.comment.tokenizer import LINE_BREAK_RE
from reflowmark.config.logging import get_logger
from reflowmark.core.errors import DocumentMismatchError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from reflowmark.comment.edits import TextEdit
    from reflowmark.config.logging import ReflowmarkLogger

logger: ReflowmarkLogger = get_logger(__name__)

DEFAULT_DELIMITER = "\n"


class Document:
    """Text buffer with offset-based access and transactional edit application."""

    def __init__(self, text: str) -> None:
        self.text = text

    def __len__(self) -> int:
        return len(self.text)

    def get(self, offset: int, length: int) -> str:
        """Return ``length`` characters starting at ``offset``.

        Raises:
            DocumentMismatchError: If the span leaves the document.
        """
        if offset < 0 or length < 0 or offset + length > len(self.text):
            raise DocumentMismatchError(
                f"Span [{offset}, {offset + length}) is outside the document "
                f"(length {len(self.text)})",
                offset=offset,
            )
        return self.text[offset : offset + length]

    def detect_delimiter(self) -> str:
        """Return the first line delimiter found in the text (``"\\n"`` if none)."""
        m = LINE_BREAK_RE.search(self.text)
        return m.group(0) if m else DEFAULT_DELIMITER

    def _validated(self, comment_edits: Sequence[CommentEdit]) -> list[TextEdit]:
        ordered = sorted(comment_edits, key=lambda ce: ce.offset)
        previous_end = 0
        for ce in ordered:
            if not ce.matches(self.text):
                raise DocumentMismatchError(
                    f"Comment at offset {ce.offset} no longer matches the document",
                    offset=ce.offset,
                )
            if ce.offset < previous_end:
                raise DocumentMismatchError(
                    f"Comment at offset {ce.offset} overlaps the previous comment",
                    offset=ce.offset,
                )
            previous_end = ce.offset + len(ce.snapshot)
        return [edit for ce in ordered for edit in ce.edits]

    def apply(self, edit: CommentEdit | Sequence[CommentEdit]) -> int:
        """Apply one or several comment edits.

        Args:
            edit (CommentEdit | Sequence[CommentEdit]): The edits to apply.

        Returns:
            int: The number of text edits applied.

        Raises:
            DocumentMismatchError: If any snapshot no longer matches the text or
                two comments overlap. The document is left unchanged.
        """
        comment_edits = [edit] if isinstance(edit, CommentEdit) else list(edit)
        text_edits = self._validated(comment_edits)

        out = self.text
        for te in reversed(sorted(text_edits, key=lambda e: (e.offset, e.length))):
            out = out[: te.offset] + te.text + out[te.end :]
        self.text = out
        logger.debug(
            "Applied %d edit(s) from %d comment(s)", len(text_edits), len(comment_edits)
        )
        return len(text_edits)
