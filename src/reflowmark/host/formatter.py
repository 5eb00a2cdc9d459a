# topmark:header:start
#
#   project      : ReflowMark
#   file         : formatter.py
#   file_relpath : src/reflowmark/host/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format every comment of a source text.

`format_source` is the bridge between a whole document and the per-comment
engine: it partitions the text, runs one `CommentRegion` per comment, and
applies the resulting edits to a `Document` in a single transaction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from reflowmark.comment.measure import create_measurement
from reflowmark.comment.region import CommentRegion
from reflowmark.config.logging import get_logger
from reflowmark.core.diagnostics import DiagnosticLog
from reflowmark.host.document import Document
from reflowmark.host.partitioner import find_comments

if TYPE_CHECKING:
    from reflowmark.comment.edits import CommentEdit
    from reflowmark.comment.measure import TextMeasurement
    from reflowmark.config.logging import ReflowmarkLogger
    from reflowmark.config.model import Config
    from reflowmark.core.diagnostics import Diagnostic
    from reflowmark.host.partitioner import CommentPartition

logger: ReflowmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class FormatResult:
    """Outcome of formatting one source text.

    Attributes:
        original (str): The input text.
        formatted (str): The text after all comment edits were applied.
        edits (tuple[CommentEdit, ...]): One entry per formattable comment, in document order.
        changed_comments (int): Number of comments with at least one edit.
        diagnostics (tuple[Diagnostic, ...]): Diagnostics of all comments, in document order.
    """

    original: str
    formatted: str
    edits: tuple[CommentEdit, ...] = ()
    changed_comments: int = 0
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def changed(self) -> bool:
        """Return True when formatting changed the text."""
        return self.formatted != self.original


def format_source(
    text: str,
    config: Config,
    *,
    measurement: TextMeasurement | None = None,
) -> FormatResult:
    """Format all comments of ``text``.

    Args:
        text (str): The source text.
        config (Config): Formatting options.
        measurement (TextMeasurement | None): Width measurement override; derived
            from ``config`` when None.

    Returns:
        FormatResult: The formatted text together with edits and diagnostics.

    Raises:
        ConfigurationError: If ``config`` asks for pixel measurement and neither
            ``measurement`` nor a loadable ``config.font_path`` is available.
    """
    if measurement is None:
        measurement = create_measurement(config)
    document = Document(text)
    delimiter: str = document.detect_delimiter()
    partitions: list[CommentPartition] = find_comments(text)

    diagnostics = DiagnosticLog()
    comment_edits: list[CommentEdit] = []
    for part in partitions:
        region = CommentRegion(
            document.get(part.offset, part.length),
            part.kind,
            config=config,
            delimiter=delimiter,
            indentation=part.indentation,
            offset=part.offset,
            measurement=measurement,
        )
        result: CommentEdit = region.format()
        diagnostics.extend(result.diagnostics)
        comment_edits.append(result)

    document.apply(comment_edits)
    changed = sum(1 for ce in comment_edits if not ce.is_empty)
    logger.debug(
        "Formatted %d comment(s), %d changed, %d diagnostic(s)",
        len(comment_edits),
        changed,
        len(diagnostics),
    )
    return FormatResult(
        original=text,
        formatted=document.text,
        edits=tuple(comment_edits),
        changed_comments=changed,
        diagnostics=diagnostics.freeze(),
    )
