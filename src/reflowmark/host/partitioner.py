# topmark:header:start
#
#   project      : ReflowMark
#   file         : partitioner.py
#   file_relpath : src/reflowmark/host/partitioner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate formattable comments in C-family source text.

The scanner understands enough of the lexical structure shared by Java, C,
C++, C#, JavaScript, TypeScript, Go, Kotlin, Rust and Swift to avoid
mistaking comment delimiters inside literals for comments:

* double-quoted strings and single-quoted character literals (with
  backslash escapes, ending at the line end at the latest);
* ``\"\"\"`` text blocks;
* backtick template literals.

Only comments standing on their own lines are formattable: nothing but
whitespace may precede the opening delimiter, and nothing but whitespace may
follow the closing delimiter of a block comment. Consecutive ``//`` lines at
the same indentation merge into one single-line comment. ``///``, ``//!``
and ``/**/`` are left alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from reflowmark.comment.kinds import CommentKind
from reflowmark.config.logging import get_logger

if TYPE_CHECKING:
    from reflowmark.config.logging import ReflowmarkLogger

logger: ReflowmarkLogger = get_logger(__name__)

TEXT_BLOCK_QUOTE = '"""'


@dataclass(frozen=True, slots=True)
class CommentPartition:
    """A formattable comment of a document.

    Attributes:
        offset (int): Document offset of the opening delimiter.
        length (int): Length of the comment text (line break after it excluded).
        kind (CommentKind): The comment kind.
        indentation (str): Whitespace between the line start and the opening delimiter.
    """

    offset: int
    length: int
    kind: CommentKind
    indentation: str

    @property
    def end(self) -> int:
        """Exclusive end offset of the comment."""
        return self.offset + self.length


def _line_start(text: str, pos: int) -> int:
    return max(text.rfind("\n", 0, pos), text.rfind("\r", 0, pos)) + 1


def _line_end(text: str, pos: int) -> int:
    ends = [i for i in (text.find("\n", pos), text.find("\r", pos)) if i >= 0]
    return min(ends) if ends else len(text)


def _skip_quoted(text: str, pos: int, quote: str, *, multiline: bool) -> int:
    """Return the index after the literal opened by ``quote`` at ``pos``."""
    i = pos + len(quote)
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if text.startswith(quote, i):
            return i + len(quote)
        if not multiline and ch in "\r\n":
            return i
        i += 1
    return n


def _only_whitespace(text: str, start: int, end: int) -> bool:
    return not text[start:end].strip()


def _merge_single(
    previous: CommentPartition, text: str, line_start: int, indentation: str
) -> bool:
    """Return True when a ``//`` comment on the line at ``line_start`` continues ``previous``."""
    if previous.kind is not CommentKind.SINGLE or previous.indentation != indentation:
        return False
    between = text[previous.end : line_start].strip(" \t")
    return between in ("\n", "\r\n", "\r")


def find_comments(text: str) -> list[CommentPartition]:
    """Return the formattable comments of ``text`` in document order."""
    partitions: list[CommentPartition] = []
    n = len(text)
    i = 0
    while i < n:
        ch = text[i]

        if text.startswith(TEXT_BLOCK_QUOTE, i):
            i = _skip_quoted(text, i, TEXT_BLOCK_QUOTE, multiline=True)
            continue
        if ch in "\"'":
            i = _skip_quoted(text, i, ch, multiline=False)
            continue
        if ch == "`":
            i = _skip_quoted(text, i, ch, multiline=True)
            continue
        if ch != "/" or i + 1 >= n or text[i + 1] not in "/*":
            i += 1
            continue

        line_start = _line_start(text, i)
        indentation = text[line_start:i]
        leading = _only_whitespace(text, line_start, i)

        if text[i + 1] == "/":
            end = _line_end(text, i)
            special = i + 2 < n and text[i + 2] in "/!"
            if leading and not special:
                body_end = i + len(text[i:end].rstrip())
                if partitions and _merge_single(partitions[-1], text, line_start, indentation):
                    previous = partitions.pop()
                    partitions.append(
                        CommentPartition(
                            previous.offset,
                            body_end - previous.offset,
                            CommentKind.SINGLE,
                            previous.indentation,
                        )
                    )
                else:
                    partitions.append(
                        CommentPartition(i, body_end - i, CommentKind.SINGLE, indentation)
                    )
            i = end
            continue

        close = text.find("*/", i + 2)
        if close < 0:
            logger.info("Unterminated block comment at offset %d; ignoring it", i)
            break
        end = close + 2
        if text.startswith("/**/", i):
            i = end
            continue
        kind = CommentKind.DOC if text.startswith("/**", i) else CommentKind.BLOCK
        trailing = _only_whitespace(text, end, _line_end(text, end))
        if leading and trailing:
            partitions.append(CommentPartition(i, end - i, kind, indentation))
        else:
            logger.debug("Skipping %s comment at offset %d: shares its line with code", kind, i)
        i = end

    logger.debug("Found %d formattable comment(s)", len(partitions))
    return partitions
