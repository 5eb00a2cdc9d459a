# topmark:header:start
#
#   project      : ReflowMark
#   file         : wrapper.py
#   file_relpath : src/reflowmark/comment/wrapper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Greedy line breaking of comment tokens.

`LineWrapper` consumes the token pool front to back. Each token is offered to
the current line through the kind's `AppendPredicate`; when it is refused the
line is flushed and a new one is opened and adapted from its predecessor
through the kind's `LineAdapter`.

Width bookkeeping follows the rendering rules: tokens are joined with one
separator, undelimited tokens with none, and tokens of an immutable span with
their original gap.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from itertools import islice
from typing import TYPE_CHECKING

from reflowmark.comment.ranges import Token, verbatim_pair
from reflowmark.comment.tokenizer import LINE_BREAK_RE
from reflowmark.comment.types import Line, TokenFlag
from reflowmark.config.logging import get_logger

if TYPE_CHECKING:
    from reflowmark.comment.kinds import CommentStyle
    from reflowmark.comment.measure import TextMeasurement
    from reflowmark.config.logging import ReflowmarkLogger
    from reflowmark.config.model import Config

logger: ReflowmarkLogger = get_logger(__name__)

# (wrapper, line, previous token or None, candidate, current width, budget) -> append?
AppendPredicate = Callable[["LineWrapper", Line, "Token | None", Token, float, float], bool]
# (wrapper, predecessor or None, new line) -> None
LineAdapter = Callable[["LineWrapper", "Line | None", Line], None]


def is_short_punctuation(text: str) -> bool:
    """Return True for tokens of at most two characters without letters or digits."""
    return 0 < len(text) <= 2 and not any(ch.isalnum() for ch in text)


class LineWrapper:
    """Break a token arena into `Line` objects.

    Args:
        text (str): Comment snapshot the tokens index into.
        tokens (list[Token]): The token arena.
        style (CommentStyle): Decoration and strategy of the comment kind.
        config (Config): Formatting options.
        measurement (TextMeasurement): Width measurement.
        indentation (str): Reference indentation of the comment.
        first_line_extra (float): Width lost by the first line when it shares the
            physical line of the opening delimiter.
    """

    def __init__(
        self,
        text: str,
        tokens: list[Token],
        style: CommentStyle,
        config: Config,
        measurement: TextMeasurement,
        *,
        indentation: str = "",
        first_line_extra: float = 0.0,
    ) -> None:
        self.text = text
        self.tokens = tokens
        self.style = style
        self.config = config
        self.measurement = measurement
        self.first_line_extra = first_line_extra
        self.separator_width: float = measurement.width(" ")
        decoration = measurement.width(indentation) + measurement.width(style.content)
        self.base_budget: float = max(1.0, config.max_line_width - decoration)
        self.pool: deque[int] = deque(range(len(tokens)))
        self.lines: list[Line] = []

    # ------------------------------ queries -------------------------------
    def token_text(self, token: Token) -> str:
        """Return the original text of ``token``."""
        return token.text(self.text)

    def budget(self, line: Line) -> float:
        """Return the width available to the content of ``line``."""
        budget = self.base_budget - self.measurement.width(line.root_indent)
        if not self.lines:
            budget -= self.first_line_extra
        return max(1.0, budget)

    def fits(self, candidate: Token, width: float, budget: float) -> bool:
        """Default width rule: the token plus one separator fits the remaining budget."""
        token_width = self.measurement.width(self.token_text(candidate))
        return width + self.separator_width + token_width <= budget

    def immutable_run_fits(self, candidate: Token, width: float, budget: float) -> bool:
        """Return True when the immutable span starting at ``candidate`` fits the line.

        Only the part of the span before its first line break is measured; the
        rest keeps the original layout.
        """
        last = candidate
        for handle in islice(self.pool, 1, None):
            tok = self.tokens[handle]
            if not verbatim_pair(last, tok):
                break
            last = tok
        run = self.text[candidate.offset : last.end]
        head = LINE_BREAK_RE.split(run, maxsplit=1)[0]
        separator = self.separator_width if candidate.has(TokenFlag.DELIMITED) else 0.0
        return width + separator + self.measurement.width(head) <= budget

    def column_after_break(self, gap: str) -> float:
        """Return the content column reached after a gap spanning a line break."""
        tail = LINE_BREAK_RE.split(gap)[-1].lstrip(" \t")
        marker = self.style.marker
        if marker and tail.startswith(marker):
            tail = tail[len(marker) :]
            if tail.startswith(" "):
                tail = tail[1:]
        return self.measurement.width(tail)

    def advance(self, previous: Token | None, candidate: Token, width: float) -> float:
        """Return the line width after appending ``candidate``."""
        token_width = self.measurement.width(self.token_text(candidate))
        if previous is None:
            return token_width
        if verbatim_pair(previous, candidate):
            gap = self.text[previous.end : candidate.offset]
            if LINE_BREAK_RE.search(gap):
                return self.column_after_break(gap) + token_width
            return width + self.measurement.width(gap) + token_width
        if not candidate.has(TokenFlag.DELIMITED):
            return width + token_width
        return width + self.separator_width + token_width

    # ------------------------------ wrapping ------------------------------
    def _open_line(self, previous: Line | None) -> Line:
        line = Line()
        self.style.adapt(self, previous, line)
        return line

    def _flush(self, line: Line) -> None:
        logger.trace("Flushing line %d with %d token(s)", len(self.lines), len(line))
        self.lines.append(line)

    def wrap(self) -> list[Line]:
        """Consume the token pool and return the produced lines."""
        line = self._open_line(None)
        width = 0.0
        while self.pool:
            handle = self.pool[0]
            candidate = self.tokens[handle]
            previous = None if line.is_empty else self.tokens[line.last]
            if self.style.can_append(self, line, previous, candidate, width, self.budget(line)):
                if previous is None and candidate.has(TokenFlag.ROOT_DOC_TAG):
                    line.root_indent = ""
                width = self.advance(previous, candidate, width)
                line.append(handle)
                self.pool.popleft()
            else:
                self._flush(line)
                line = self._open_line(line)
                width = 0.0
        if not line.is_empty:
            self._flush(line)
        logger.debug("Wrapped %d token(s) into %d line(s)", len(self.tokens), len(self.lines))
        return self.lines


# ------------------------- per-kind strategies -------------------------


def default_can_append(
    wrapper: LineWrapper,
    line: Line,
    previous: Token | None,
    candidate: Token,
    width: float,
    budget: float,
) -> bool:
    """Line comments: blank markers stand alone, everything else follows the width rule."""
    if previous is None:
        return True
    if candidate.is_blank or previous.is_blank:
        return False
    return wrapper.fits(candidate, width, budget)


def block_can_append(
    wrapper: LineWrapper,
    line: Line,
    previous: Token | None,
    candidate: Token,
    width: float,
    budget: float,
) -> bool:
    """Block comments: the default rule, plus forced joins for glued text and punctuation."""
    if previous is None:
        return True
    if not candidate.has(TokenFlag.DELIMITED):
        return True
    if candidate.is_blank or previous.is_blank:
        return False
    if is_short_punctuation(wrapper.token_text(candidate)):
        return True
    return wrapper.fits(candidate, width, budget)


def doc_can_append(
    wrapper: LineWrapper,
    line: Line,
    previous: Token | None,
    candidate: Token,
    width: float,
    budget: float,
) -> bool:
    """Documentation comments: markup and tag aware breaking.

    Rules, first match wins:

    1. an empty line accepts anything;
    2. undelimited tokens and tokens of one immutable span always join;
    3. blank-line markers stand alone;
    4. break before paragraph, newline and root tags, after break tags, and
       after a parameter name when ``new_line_for_parameter`` is set;
    5. an immutable span starts a new line unless its first line fits;
    6. the token after a root or parameter tag and short punctuation always join;
    7. otherwise the width rule.
    """
    if previous is None:
        return True
    if not candidate.has(TokenFlag.DELIMITED):
        return True
    if verbatim_pair(previous, candidate):
        return True
    if candidate.is_blank or previous.is_blank:
        return False
    if candidate.has(TokenFlag.PARAGRAPH | TokenFlag.NEWLINE | TokenFlag.ROOT_DOC_TAG):
        return False
    if previous.has(TokenFlag.BREAK):
        return False
    if previous.has(TokenFlag.PARAMETER) and wrapper.config.new_line_for_parameter:
        return False
    if candidate.is_verbatim and not wrapper.immutable_run_fits(candidate, width, budget):
        return False
    if previous.has(TokenFlag.ROOT_DOC_TAG | TokenFlag.DOC_TAG):
        return True
    if is_short_punctuation(wrapper.token_text(candidate)):
        return True
    return wrapper.fits(candidate, width, budget)


def default_adapt(wrapper: LineWrapper, previous: Line | None, line: Line) -> None:
    """Carry the immutable-span state over from the predecessor."""
    if previous is not None and not previous.is_empty:
        line.after_immutable = wrapper.tokens[previous.last].is_verbatim


def doc_adapt(wrapper: LineWrapper, previous: Line | None, line: Line) -> None:
    """Also inherit the enclosing root-tag paragraph for ``indent_root_tags``."""
    default_adapt(wrapper, previous, line)
    if previous is None or previous.is_empty or not wrapper.config.indent_root_tags:
        return
    first = wrapper.tokens[previous.first]
    if first.has(TokenFlag.ROOT_DOC_TAG):
        line.root_indent = " " * (len(wrapper.token_text(first)) + 1)
    else:
        line.root_indent = previous.root_indent
