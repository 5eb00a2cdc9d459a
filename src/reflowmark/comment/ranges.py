# topmark:header:start
#
#   project      : ReflowMark
#   file         : ranges.py
#   file_relpath : src/reflowmark/comment/ranges.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment-local text ranges and tokens.

A `Range` is an ``(offset, length)`` pair relative to the start of the comment
text. Coordinates only change through `Range.move`, `Range.trim_begin` and
`Range.trim_end`, which reject results with a negative offset or length.
"""

from __future__ import annotations

from dataclasses import dataclass

from reflowmark.comment.types import TokenFlag


@dataclass(slots=True)
class Range:
    """A half-open span ``[offset, offset + length)`` of comment text."""

    offset: int
    length: int

    def __post_init__(self) -> None:
        if self.offset < 0 or self.length < 0:
            raise ValueError(f"Invalid range: offset={self.offset}, length={self.length}")

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.offset + self.length

    def move(self, delta: int) -> None:
        """Shift the range by ``delta`` characters, keeping its length."""
        if self.offset + delta < 0:
            raise ValueError(f"Cannot move range at {self.offset} by {delta}")
        self.offset += delta

    def trim_begin(self, delta: int) -> None:
        """Move the start by ``delta`` characters, keeping the end fixed."""
        if self.offset + delta < 0 or self.length - delta < 0:
            raise ValueError(f"Cannot trim begin of {self} by {delta}")
        self.offset += delta
        self.length -= delta

    def trim_end(self, delta: int) -> None:
        """Move the end by ``delta`` characters, keeping the start fixed."""
        if self.length + delta < 0:
            raise ValueError(f"Cannot trim end of {self} by {delta}")
        self.length += delta

    def text(self, source: str) -> str:
        """Return the slice of ``source`` covered by this range."""
        return source[self.offset : self.end]


@dataclass(slots=True)
class Token(Range):
    """A `Range` carrying `TokenFlag` attributes."""

    flags: TokenFlag = TokenFlag.NONE

    def has(self, flag: TokenFlag) -> bool:
        """Return True if any bit of ``flag`` is set on this token."""
        return bool(self.flags & flag)

    def mark(self, flag: TokenFlag) -> None:
        """Set the bits of ``flag`` on this token."""
        self.flags |= flag

    @property
    def is_blank(self) -> bool:
        """Return True for a blank-line marker."""
        return bool(self.flags & TokenFlag.BLANK_LINE)

    @property
    def is_immutable(self) -> bool:
        """Return True when the token sits inside an immutable markup pair."""
        return bool(self.flags & TokenFlag.IMMUTABLE)

    @property
    def is_verbatim(self) -> bool:
        """Return True for immutable tokens and the outermost tags around them."""
        return bool(self.flags & (TokenFlag.IMMUTABLE | TokenFlag.IMMUTABLE_EDGE))


def verbatim_pair(previous: Token, candidate: Token) -> bool:
    """Return True when the original text between two tokens must be kept byte-for-byte.

    This holds for adjacent tokens of one immutable span, including the gap
    between the outermost tags and the first/last interior token.
    """
    return (
        previous.is_verbatim
        and candidate.is_verbatim
        and (previous.is_immutable or candidate.is_immutable)
    )
