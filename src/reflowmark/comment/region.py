# topmark:header:start
#
#   project      : ReflowMark
#   file         : region.py
#   file_relpath : src/reflowmark/comment/region.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format one comment.

A `CommentRegion` owns everything needed to reformat a single comment: the
immutable snapshot of its text, the token arena, the wrapped lines and the
accumulated diagnostics. It runs its passes exactly once and in order:

``SCANNED → TOKENIZED → CLASSIFIED → WRAPPED → RENDERED → EMITTED``

Comments carrying an opt-out marker (a block comment opened with ``/*-`` or
any comment containing the configured ``no_format_tag``) go from
``SCANNED`` straight to ``EMITTED`` without edits. A measurement failure
aborts the region: it is logged, recorded as an error diagnostic, and an
empty `CommentEdit` is returned.

Example:
    ```python
    from reflowmark import CommentKind, Config, format_comment

    edit = format_comment("// a b c", CommentKind.SINGLE, config=Config(max_line_width=7))
    edit.formatted  # "// a b\\n// c"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reflowmark.comment.edits import CommentEdit, EditEmitter
from reflowmark.comment.kinds import CommentKind, style_for
from reflowmark.comment.measure import CheckedMeasurement, create_measurement
from reflowmark.comment.renderer import LineRenderer
from reflowmark.comment.tags import TagClassifier
from reflowmark.comment.tokenizer import Tokenizer
from reflowmark.comment.types import RegionState
from reflowmark.comment.wrapper import LineWrapper
from reflowmark.config.logging import get_logger
from reflowmark.config.model import Config
from reflowmark.constants import NON_FORMAT_START_PREFIX
from reflowmark.core.diagnostics import DiagnosticLog
from reflowmark.core.errors import MeasurementError

if TYPE_CHECKING:
    from reflowmark.comment.kinds import CommentStyle
    from reflowmark.comment.measure import TextMeasurement
    from reflowmark.comment.ranges import Token
    from reflowmark.comment.tokenizer import ScanResult
    from reflowmark.comment.types import Line, RenderedLine
    from reflowmark.comment.edits import TextEdit
    from reflowmark.config.logging import ReflowmarkLogger

logger: ReflowmarkLogger = get_logger(__name__)


class CommentRegion:
    """Reformat one comment and compute the edits that get there.

    Args:
        text (str): The comment text, from its opening to its closing delimiter.
        kind (CommentKind): The comment kind.
        config (Config): Formatting options.
        delimiter (str): Line delimiter used for inserted line breaks.
        indentation (str): Whitespace preceding the comment on its first line.
        offset (int): Document offset of the comment; edits use document coordinates.
        measurement (TextMeasurement | None): Width measurement; derived from
            ``config`` when None.
    """

    def __init__(
        self,
        text: str,
        kind: CommentKind,
        *,
        config: Config,
        delimiter: str = "\n",
        indentation: str = "",
        offset: int = 0,
        measurement: TextMeasurement | None = None,
    ) -> None:
        self.snapshot: str = text
        self.kind: CommentKind = kind
        self.style: CommentStyle = style_for(kind)
        self.config: Config = config
        self.delimiter: str = delimiter
        self.indentation: str = indentation
        self.offset: int = offset
        self.measurement: TextMeasurement = CheckedMeasurement(
            measurement if measurement is not None else create_measurement(config)
        )
        self.diagnostics = DiagnosticLog()

        self.tokens: list[Token] = []
        self.lines: list[Line] = []
        self.rendered: list[RenderedLine] = []

        self._tokenizer = Tokenizer(text, self.style, diagnostics=self.diagnostics)
        self.scan: ScanResult = self._tokenizer.scan()
        self.state: RegionState = RegionState.SCANNED

    # ------------------------------ helpers -------------------------------
    @property
    def opted_out(self) -> bool:
        """Return True when the comment carries an opt-out marker."""
        if self.kind is CommentKind.BLOCK and self.snapshot.startswith(NON_FORMAT_START_PREFIX):
            return True
        return self.config.no_format_tag in self.snapshot

    def _advance(self, state: RegionState) -> None:
        logger.trace("Comment at %d: %s -> %s", self.offset, self.state.name, state.name)
        self.state = state

    def _result(self, edits: list[TextEdit]) -> CommentEdit:
        self._advance(RegionState.EMITTED)
        return CommentEdit(
            offset=self.offset,
            snapshot=self.snapshot,
            edits=tuple(edits),
            diagnostics=self.diagnostics.freeze(),
        )

    def _first_line_extra(self) -> float:
        """Width the first line loses when it shares the opening delimiter's line."""
        shares_opening_line = not self.scan.borders.upper and (
            self.kind is not CommentKind.DOC or self.config.format_doc_first_line
        )
        if not shares_opening_line:
            return 0.0
        return max(
            0.0,
            self.measurement.width(self.style.starting)
            - self.measurement.width(self.style.content),
        )

    # ------------------------------- passes -------------------------------
    def _run_passes(self) -> list[TextEdit]:
        self.tokens = self._tokenizer.tokenize(
            self.scan, clear_blank_lines=self.config.clear_blank_lines
        )
        self._advance(RegionState.TOKENIZED)

        if self.style.markup:
            TagClassifier(self.snapshot, self.config).classify(self.tokens)
        self._advance(RegionState.CLASSIFIED)

        wrapper = LineWrapper(
            self.snapshot,
            self.tokens,
            self.style,
            self.config,
            self.measurement,
            indentation=self.indentation,
            first_line_extra=self._first_line_extra(),
        )
        self.lines = wrapper.wrap()
        self._advance(RegionState.WRAPPED)

        renderer = LineRenderer(
            self.snapshot,
            self.tokens,
            self.style,
            self.config,
            self.measurement,
            borders=self.scan.borders,
            delimiter=self.delimiter,
            indentation=self.indentation,
            single_physical_line=self.scan.single_physical_line,
        )
        self.rendered = renderer.render(self.lines)
        self._advance(RegionState.RENDERED)

        return EditEmitter(self.snapshot, offset=self.offset).emit(self.rendered)

    def format(self) -> CommentEdit:
        """Run all passes and return the edits for this comment.

        Raises:
            RuntimeError: If the region was already formatted.
        """
        if self.state is not RegionState.SCANNED:
            raise RuntimeError(f"Comment region already processed (state {self.state.name})")

        if self.opted_out:
            logger.debug("Comment at %d carries an opt-out marker; skipping", self.offset)
            return self._result([])

        try:
            edits = self._run_passes()
        except MeasurementError as e:
            logger.error("Cannot format comment at offset %d: %s", self.offset, e)
            self.diagnostics.add_error(f"Comment at offset {self.offset} not formatted: {e}")
            return self._result([])

        return self._result(edits)


def format_comment(
    text: str,
    kind: CommentKind,
    *,
    config: Config | None = None,
    delimiter: str = "\n",
    indentation: str = "",
    offset: int = 0,
    measurement: TextMeasurement | None = None,
) -> CommentEdit:
    """Format one comment and return its `CommentEdit`.

    Args:
        text (str): The comment text.
        kind (CommentKind): The comment kind.
        config (Config | None): Formatting options (defaults when None).
        delimiter (str): Line delimiter used for inserted line breaks.
        indentation (str): Whitespace preceding the comment on its first line.
        offset (int): Document offset of the comment.
        measurement (TextMeasurement | None): Width measurement override.

    Returns:
        CommentEdit: The edits, in document coordinates, plus diagnostics.
    """
    region = CommentRegion(
        text,
        kind,
        config=config if config is not None else Config(),
        delimiter=delimiter,
        indentation=indentation,
        offset=offset,
        measurement=measurement,
    )
    return region.format()
