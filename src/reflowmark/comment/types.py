# topmark:header:start
#
#   project      : ReflowMark
#   file         : types.py
#   file_relpath : src/reflowmark/comment/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared types for the comment engine.

Sections:
    * TokenFlag: attribute bits carried by every token.
    * RegionState: the ordered passes of a comment region.
    * Borders: whether the first/last physical line carries only a delimiter.
    * Line: one output line under construction, as token handles.
    * RenderedLine: the text of one output line plus the span it replaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag


class TokenFlag(IntFlag):
    """Attribute bits of a comment token."""

    NONE = 0
    # HTML opening / closing markup tag, e.g. ``<p>`` or ``</code>``
    MARKUP_OPEN = 1 << 0
    MARKUP_CLOSE = 1 << 1
    # Inside an immutable markup pair; never split, whitespace kept verbatim
    IMMUTABLE = 1 << 2
    # Hard break after the token
    BREAK = 1 << 3
    # Hard break before the token
    NEWLINE = 1 << 4
    PARAGRAPH = 1 << 5
    # Documentation tag taking a parameter (``@param``)
    DOC_TAG = 1 << 6
    # Documentation tag starting a tag paragraph (``@return``)
    ROOT_DOC_TAG = 1 << 7
    # Zero-length marker for an empty comment line
    BLANK_LINE = 1 << 8
    # Name following a parameter tag
    PARAMETER = 1 << 9
    # Whitespace or a line start preceded the token in the original
    DELIMITED = 1 << 10
    # Inline ``{@...}`` tag
    INLINE_TAG = 1 << 11
    # Outermost opening or closing tag of an immutable pair
    IMMUTABLE_EDGE = 1 << 12


class RegionState(Enum):
    """Ordered states of a comment region; transitions only move forward."""

    SCANNED = 0
    TOKENIZED = 1
    CLASSIFIED = 2
    WRAPPED = 3
    RENDERED = 4
    EMITTED = 5


@dataclass(slots=True)
class Borders:
    """Border layout detected on the original comment.

    Attributes:
        upper (bool): The first physical line holds only the opening delimiter.
        lower (bool): The last physical line holds only the closing delimiter.
        upper_filler (bool): The upper border also carries a run of filler characters.
        lower_filler (bool): The lower border also carries a run of filler characters.
    """

    upper: bool = False
    lower: bool = False
    upper_filler: bool = False
    lower_filler: bool = False


@dataclass(slots=True)
class Line:
    """An output line under construction.

    Tokens are referenced by handle (index into the region's token arena).
    ``root_indent`` and ``after_immutable`` are adapted from the predecessor
    line when the wrapper opens this line.
    """

    handles: list[int] = field(default_factory=lambda: [])
    root_indent: str = ""
    after_immutable: bool = False

    def append(self, handle: int) -> None:
        """Append a token handle to this line."""
        self.handles.append(handle)

    @property
    def is_empty(self) -> bool:
        """Return True when no token has been appended yet."""
        return not self.handles

    @property
    def first(self) -> int:
        """Handle of the first token (the line must not be empty)."""
        return self.handles[0]

    @property
    def last(self) -> int:
        """Handle of the last token (the line must not be empty)."""
        return self.handles[-1]

    def __len__(self) -> int:
        return len(self.handles)


@dataclass(frozen=True, slots=True)
class RenderedLine:
    """Rendered text for one output line and the comment-local span it replaces."""

    text: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        """Exclusive end of the replaced span."""
        return self.offset + self.length
