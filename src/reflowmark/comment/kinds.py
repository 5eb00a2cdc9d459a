# topmark:header:start
#
#   project      : ReflowMark
#   file         : kinds.py
#   file_relpath : src/reflowmark/comment/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment kinds and their per-kind strategy table.

Each `CommentKind` maps to one `CommentStyle`: the decoration prefixes used
when rendering, the filler character of border lines, and the line-breaking
strategy (`can_append` predicate and `adapt` hook) used by the wrapper.

| kind   | starting | content | ending |
|--------|----------|---------|--------|
| single | ``// ``  | ``// `` | (none) |
| block  | ``/* ``  | `` * `` | `` */``|
| doc    | ``/** `` | `` * `` | `` */``|
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from reflowmark.comment.wrapper import (
    block_can_append,
    default_adapt,
    default_can_append,
    doc_adapt,
    doc_can_append,
)

if TYPE_CHECKING:
    from reflowmark.comment.wrapper import AppendPredicate, LineAdapter


class CommentKind(str, Enum):
    """Closed set of supported comment kinds."""

    SINGLE = "single"
    BLOCK = "block"
    DOC = "doc"


@dataclass(frozen=True, slots=True)
class CommentStyle:
    """Per-kind decoration and line-breaking strategy.

    Attributes:
        kind (CommentKind): The kind this style renders.
        starting (str): Prefix of the first line (opening delimiter plus space).
        content (str): Prefix of interior lines.
        ending (str): Suffix of the last line (space plus closing delimiter).
        filler (str): Character repeated on border lines (empty: no borders).
        markup (bool): Whether HTML markup and inline tags are recognized.
        can_append (AppendPredicate): Whether a token may join the current line.
        adapt (LineAdapter): Initializes a new line from its predecessor.
    """

    kind: CommentKind
    starting: str
    content: str
    ending: str
    filler: str
    markup: bool
    can_append: AppendPredicate
    adapt: LineAdapter

    @property
    def opening(self) -> str:
        """The bare opening delimiter (``/*``, ``/**`` or ``//``)."""
        return self.starting.strip()

    @property
    def closing(self) -> str:
        """The bare closing delimiter (``*/``), empty for line comments."""
        return self.ending.strip()

    @property
    def marker(self) -> str:
        """The decoration character(s) of interior lines (``*`` or ``//``)."""
        return self.content.strip()


STYLES: dict[CommentKind, CommentStyle] = {
    CommentKind.SINGLE: CommentStyle(
        kind=CommentKind.SINGLE,
        starting="// ",
        content="// ",
        ending="",
        filler="",
        markup=False,
        can_append=default_can_append,
        adapt=default_adapt,
    ),
    CommentKind.BLOCK: CommentStyle(
        kind=CommentKind.BLOCK,
        starting="/* ",
        content=" * ",
        ending=" */",
        filler="*",
        markup=False,
        can_append=block_can_append,
        adapt=default_adapt,
    ),
    CommentKind.DOC: CommentStyle(
        kind=CommentKind.DOC,
        starting="/** ",
        content=" * ",
        ending=" */",
        filler="*",
        markup=True,
        can_append=doc_can_append,
        adapt=doc_adapt,
    ),
}


def style_for(kind: CommentKind) -> CommentStyle:
    """Return the `CommentStyle` of ``kind``."""
    return STYLES[kind]
