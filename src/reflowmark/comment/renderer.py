# topmark:header:start
#
#   project      : ReflowMark
#   file         : renderer.py
#   file_relpath : src/reflowmark/comment/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render wrapped lines back into decorated comment text.

Each output line is rendered together with the span of the original comment
it replaces. Spans tile the comment: line 0 starts at offset 0, line ``i``
starts where the last token of line ``i - 1`` ends, and the last line runs to
the end of the comment. Everything between two lines (line break,
indentation, decoration) therefore belongs to the later line.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from reflowmark.comment.kinds import CommentKind
from reflowmark.comment.ranges import verbatim_pair
from reflowmark.comment.types import Borders, RenderedLine, TokenFlag
from reflowmark.config.logging import get_logger

if TYPE_CHECKING:
    from reflowmark.comment.kinds import CommentStyle
    from reflowmark.comment.measure import TextMeasurement
    from reflowmark.comment.ranges import Token
    from reflowmark.comment.types import Line
    from reflowmark.config.logging import ReflowmarkLogger
    from reflowmark.config.model import Config

logger: ReflowmarkLogger = get_logger(__name__)


def render_indentation(width: float, *, use_tabs: bool, tab_size: int) -> str:
    """Return whitespace of the given column ``width``, using tabs when requested."""
    columns = max(0, int(round(width)))
    if not use_tabs:
        return " " * columns
    tabs, spaces = divmod(columns, tab_size)
    return "\t" * tabs + " " * spaces


class LineRenderer:
    """Produce `RenderedLine` objects for the lines of one comment."""

    def __init__(
        self,
        text: str,
        tokens: list[Token],
        style: CommentStyle,
        config: Config,
        measurement: TextMeasurement,
        *,
        borders: Borders,
        delimiter: str = "\n",
        indentation: str = "",
        single_physical_line: bool = False,
    ) -> None:
        self.text = text
        self.tokens = tokens
        self.style = style
        self.config = config
        self.measurement = measurement
        self.borders = borders
        self.delimiter = delimiter
        self.single_physical_line = single_physical_line
        self.indent_width: float = measurement.width(indentation)
        self.indent: str = render_indentation(
            self.indent_width,
            use_tabs=config.use_tabs_for_indent,
            tab_size=config.tab_size,
        )

    # ------------------------------ layout -------------------------------
    def _fill(self, used: float) -> str:
        """Return a filler run reaching the line width after ``used`` columns (at least one)."""
        filler = self.style.filler
        target = self.config.max_line_width - self.indent_width - used
        count = math.floor(target / self.measurement.width(filler)) if target > 0 else 0
        return filler * max(1, count)

    def _content(self, line: Line) -> str:
        parts: list[str] = []
        previous: Token | None = None
        for handle in line.handles:
            tok = self.tokens[handle]
            if previous is not None:
                if verbatim_pair(previous, tok):
                    parts.append(self.text[previous.end : tok.offset])
                elif tok.has(TokenFlag.DELIMITED):
                    parts.append(" ")
            parts.append(tok.text(self.text))
            previous = tok
        return "".join(parts)

    def _is_blank(self, line: Line) -> bool:
        return len(line) == 1 and self.tokens[line.first].is_blank

    def _continuation(self, line: Line) -> str:
        """Line break, indentation and decoration opening a continuation line."""
        if self._is_blank(line):
            return self.delimiter + self.indent + self.style.content.rstrip()
        return self.delimiter + self.indent + self.style.content + line.root_indent

    def _upper_border(self) -> str:
        opening = self.style.opening
        if self.borders.upper_filler:
            return opening + self._fill(self.measurement.width(opening))
        return opening

    def _lower_border(self) -> str:
        closing = self.style.closing
        if self.borders.lower_filler:
            used = self.measurement.width(" ") + self.measurement.width(closing)
            return self.delimiter + self.indent + " " + self._fill(used) + closing
        return self.delimiter + self.indent + self.style.ending

    # ------------------------------ render -------------------------------
    def render(self, lines: list[Line]) -> list[RenderedLine]:
        """Return one `RenderedLine` per wrapped line."""
        if not lines:
            return []

        delimited = bool(self.style.closing)
        collapse = delimited and self.single_physical_line and len(lines) == 1
        forced = (
            self.style.kind is CommentKind.DOC
            and not self.config.format_doc_first_line
            and not collapse
        )
        upper = delimited and (self.borders.upper or forced)
        # A trailing blank line cannot carry the ending, which would turn it
        # into a content line on the next pass.
        lower = delimited and (self.borders.lower or forced or self._is_blank(lines[-1]))
        last_index = len(lines) - 1

        rendered: list[RenderedLine] = []
        start = 0
        for index, line in enumerate(lines):
            content = self._content(line)

            if index == 0:
                if not delimited:
                    head = self.style.starting
                    if self._is_blank(line):
                        head = head.rstrip()
                elif upper:
                    head = self._upper_border() + self._continuation(line)
                else:
                    head = self.style.starting
            else:
                previous_last = self.tokens[lines[index - 1].last]
                first = self.tokens[line.first]
                if line.after_immutable and verbatim_pair(previous_last, first):
                    head = self.text[previous_last.end : first.offset]
                else:
                    head = self._continuation(line)

            tail = ""
            if index == last_index and delimited:
                tail = self._lower_border() if lower else self.style.ending

            end = len(self.text) if index == last_index else self.tokens[line.last].end
            rendered.append(RenderedLine(head + content + tail, start, end - start))
            start = end

        logger.trace(
            "Rendered %d line(s) (upper=%s, lower=%s, collapse=%s)",
            len(rendered),
            upper,
            lower,
            collapse,
        )
        return rendered
