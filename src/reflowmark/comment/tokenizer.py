# topmark:header:start
#
#   project      : ReflowMark
#   file         : tokenizer.py
#   file_relpath : src/reflowmark/comment/tokenizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split comment text into physical lines and tokens.

Two passes:

1. `Tokenizer.scan` strips the decoration expected for each physical line
   (opening delimiter on the first line, closing delimiter on the last, the
   content marker on the others) and records the content span of each line
   together with the detected `Borders`. Lines whose decoration does not
   match are kept whole and reported as warnings.
2. `Tokenizer.tokenize` splits each content span into maximal runs of
   non-whitespace. Documentation comments additionally split HTML tags off
   surrounding text and keep inline ``{@...}`` tags in one token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from reflowmark.comment.ranges import Range, Token
from reflowmark.comment.types import Borders, TokenFlag
from reflowmark.config.logging import get_logger

if TYPE_CHECKING:
    from reflowmark.comment.kinds import CommentStyle
    from reflowmark.config.logging import ReflowmarkLogger
    from reflowmark.core.diagnostics import DiagnosticLog

logger: ReflowmarkLogger = get_logger(__name__)

LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
HTML_TAG_RE: Final[re.Pattern[str]] = re.compile(r"</?[A-Za-z][A-Za-z0-9]*(?:\s[^<>]*)?/?>")
_WORD_RE: Final[re.Pattern[str]] = re.compile(r"\S+")
_INLINE_TAG_START: Final[str] = "{@"


@dataclass(slots=True)
class PhysicalLine:
    """One physical line of the comment and its content span (comment-local)."""

    start: int
    end: int
    content: Range


@dataclass(slots=True)
class ScanResult:
    """Outcome of `Tokenizer.scan`."""

    lines: list[PhysicalLine] = field(default_factory=lambda: [])
    borders: Borders = field(default_factory=Borders)

    @property
    def single_physical_line(self) -> bool:
        """Return True when the original comment fits on one physical line."""
        return len(self.lines) <= 1


def split_physical_lines(text: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` spans of the physical lines of ``text``, delimiters excluded."""
    spans: list[tuple[int, int]] = []
    pos = 0
    for m in LINE_BREAK_RE.finditer(text):
        spans.append((pos, m.start()))
        pos = m.end()
    spans.append((pos, len(text)))
    return spans


def _leading_ws(text: str, start: int, end: int) -> int:
    """Return the index of the first non-whitespace character in ``text[start:end]``."""
    i = start
    while i < end and text[i] in " \t":
        i += 1
    return i


class Tokenizer:
    """Scan and tokenize the text of one comment."""

    def __init__(self, text: str, style: CommentStyle, *, diagnostics: DiagnosticLog) -> None:
        self.text = text
        self.style = style
        self.diagnostics = diagnostics

    # ------------------------------ scanning ------------------------------
    def scan(self) -> ScanResult:
        """Strip per-line decoration and detect borders."""
        spans = split_physical_lines(self.text)
        result = ScanResult()
        if self.style.closing:
            self._scan_delimited(spans, result)
        else:
            self._scan_line_comments(spans, result)
        logger.trace(
            "Scanned %d physical line(s), borders=%s", len(result.lines), result.borders
        )
        return result

    def _malformed(self, index: int, reason: str) -> None:
        logger.info("Comment line %d is malformed (%s); keeping it unchanged", index + 1, reason)
        self.diagnostics.add_warning(f"Line {index + 1} of comment: {reason}")

    def _scan_line_comments(self, spans: list[tuple[int, int]], result: ScanResult) -> None:
        marker = self.style.marker
        for index, (start, end) in enumerate(spans):
            i = _leading_ws(self.text, start, end)
            if self.text.startswith(marker, i) and i + len(marker) <= end:
                content = Range(i + len(marker), end - i - len(marker))
            else:
                self._malformed(index, f"expected {marker!r}")
                content = Range(start, end - start)
            result.lines.append(PhysicalLine(start, end, content))

    def _scan_delimited(self, spans: list[tuple[int, int]], result: ScanResult) -> None:
        text = self.text
        opening = self.style.opening
        closing = self.style.closing
        filler = self.style.filler
        marker = self.style.marker
        borders = result.borders
        last = len(spans) - 1

        for index, (start, end) in enumerate(spans):
            content: Range
            if index == 0:
                if not text.startswith(opening, start) or start + len(opening) > end:
                    self._malformed(index, f"expected {opening!r}")
                    content = Range(start, end - start)
                elif last == 0:
                    body_start = start + len(opening)
                    close_at = text.rfind(closing, body_start, end)
                    if close_at < 0:
                        self._malformed(index, f"missing {closing!r}")
                        close_at = end
                    content = Range(body_start, close_at - body_start)
                else:
                    body_start = start + len(opening)
                    rest = text[body_start:end].strip()
                    if not rest:
                        borders.upper = True
                    elif filler and rest == filler * len(rest):
                        borders.upper = True
                        borders.upper_filler = True
                    content = (
                        Range(end, 0) if borders.upper else Range(body_start, end - body_start)
                    )
            elif index == last:
                close_at = text.rfind(closing, start, end)
                if close_at < 0:
                    self._malformed(index, f"missing {closing!r}")
                    content = Range(start, end - start)
                else:
                    i = _leading_ws(text, start, close_at)
                    body = text[i:close_at]
                    if not body:
                        borders.lower = True
                        content = Range(i, 0)
                    elif filler and body == filler * len(body):
                        borders.lower = True
                        borders.lower_filler = True
                        content = Range(i, 0)
                    else:
                        if text.startswith(marker, i):
                            i += len(marker)
                        content = Range(i, close_at - i)
            else:
                i = _leading_ws(text, start, end)
                if marker and text.startswith(marker, i):
                    i += len(marker)
                content = Range(i, end - i)
            result.lines.append(PhysicalLine(start, end, content))

    # ----------------------------- tokenizing -----------------------------
    def tokenize(self, scan: ScanResult, *, clear_blank_lines: bool) -> list[Token]:
        """Return the token arena for the scanned lines.

        A line whose content is blank yields a zero-length ``BLANK_LINE`` token
        (unless ``clear_blank_lines``). For delimited comments only interior
        lines produce blank markers; the first and last line never do.
        """
        tokens: list[Token] = []
        last = len(scan.lines) - 1
        delimited_kind = bool(self.style.closing)
        for index, line in enumerate(scan.lines):
            content = line.content
            if not content.text(self.text).strip():
                interior = 0 < index < last
                if clear_blank_lines or (delimited_kind and not interior):
                    continue
                tokens.append(
                    Token(
                        content.offset,
                        0,
                        TokenFlag.BLANK_LINE | TokenFlag.DELIMITED,
                    )
                )
                continue
            if self.style.markup:
                self._tokenize_markup(content, tokens)
            else:
                for m in _WORD_RE.finditer(self.text, content.offset, content.end):
                    tokens.append(Token(m.start(), m.end() - m.start(), TokenFlag.DELIMITED))
        logger.trace("Tokenized %d token(s)", len(tokens))
        return tokens

    def _tokenize_markup(self, content: Range, tokens: list[Token]) -> None:
        text = self.text
        i = content.offset
        end = content.end
        delimited = True
        while i < end:
            if text[i].isspace():
                delimited = True
                i += 1
                continue

            flags = TokenFlag.DELIMITED if delimited else TokenFlag.NONE
            tag = HTML_TAG_RE.match(text, i, end) if text[i] == "<" else None
            if text.startswith(_INLINE_TAG_START, i):
                close = text.find("}", i, end)
                stop = close + 1 if close >= 0 else i + len(text[i:end].rstrip())
                flags |= TokenFlag.INLINE_TAG
            elif tag is not None:
                stop = tag.end()
            else:
                stop = self._word_end(i + 1, end)

            tokens.append(Token(i, stop - i, flags))
            delimited = False
            i = stop

    def _word_end(self, i: int, end: int) -> int:
        text = self.text
        while i < end:
            ch = text[i]
            if ch.isspace() or text.startswith(_INLINE_TAG_START, i):
                break
            if ch == "<" and HTML_TAG_RE.match(text, i, end):
                break
            i += 1
        return i
