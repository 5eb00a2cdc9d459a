# topmark:header:start
#
#   project      : ReflowMark
#   file         : test_wrapper.py
#   file_relpath : tests/comment/test_wrapper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for greedy line breaking."""

from __future__ import annotations

from reflowmark.comment.kinds import CommentKind, style_for
from reflowmark.comment.measure import CharMeasurement
from reflowmark.comment.tokenizer import Tokenizer
from reflowmark.comment.wrapper import LineWrapper, is_short_punctuation
from reflowmark.config.model import Config
from reflowmark.core.diagnostics import DiagnosticLog
from tests.conftest import parametrize


def _wrap(
    text: str,
    width: int,
    *,
    kind: CommentKind = CommentKind.SINGLE,
    indentation: str = "",
    first_line_extra: float = 0.0,
) -> list[list[str]]:
    style = style_for(kind)
    tokenizer = Tokenizer(text, style, diagnostics=DiagnosticLog())
    tokens = tokenizer.tokenize(tokenizer.scan(), clear_blank_lines=False)
    wrapper = LineWrapper(
        text,
        tokens,
        style,
        Config(max_line_width=width),
        CharMeasurement(),
        indentation=indentation,
        first_line_extra=first_line_extra,
    )
    return [[tokens[h].text(text) for h in line.handles] for line in wrapper.wrap()]


@parametrize(
    "text, expected",
    [
        (",", True),
        ("--", True),
        ("a", False),
        ("...", False),
        ("1.", False),
        ("", False),
    ],
)
def test_is_short_punctuation(text: str, expected: bool) -> None:
    """Up to two characters, none of them alphanumeric."""
    assert is_short_punctuation(text) is expected


def test_greedy_fill() -> None:
    """Lines are filled up to the budget, decoration excluded."""
    assert _wrap("// a b c d", 8) == [["a", "b", "c"], ["d"]]


def test_first_line_extra_only_affects_first_line() -> None:
    """The first line loses ``first_line_extra`` columns; later lines do not."""
    assert _wrap("// a b c d e", 8, first_line_extra=2) == [["a", "b"], ["c", "d", "e"]]


def test_indentation_reduces_budget() -> None:
    """The comment's indentation counts against the width."""
    assert _wrap("// a b c d", 12, indentation="    ") == [["a", "b", "c"], ["d"]]


def test_overlong_token_gets_its_own_line() -> None:
    """A token wider than the budget is never split."""
    assert _wrap("// a abcdefghij b", 8) == [["a"], ["abcdefghij"], ["b"]]


def test_tiny_width_keeps_a_positive_budget() -> None:
    """A width smaller than the decoration still makes progress, one token per line."""
    assert _wrap("// a b", 1) == [["a"], ["b"]]


def test_blank_markers_stand_alone() -> None:
    """Blank markers never share a line."""
    assert _wrap("// a\n//\n// b", 80) == [["a"], [""], ["b"]]
