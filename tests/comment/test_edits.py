# topmark:header:start
#
#   project      : ReflowMark
#   file         : test_edits.py
#   file_relpath : tests/comment/test_edits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for minimal text edits and their application."""

from __future__ import annotations

import pytest

from reflowmark.comment.edits import (
    CommentEdit,
    EditEmitter,
    TextEdit,
    apply_text_edits,
    common_affixes,
)
from reflowmark.comment.types import RenderedLine
from reflowmark.core.errors import DocumentMismatchError
from tests.conftest import parametrize


@parametrize(
    "old, new, expected",
    [
        ("abc", "abc", (3, 0)),
        ("abc", "abXc", (2, 1)),
        ("aaa", "aa", (2, 0)),
        ("", "x", (0, 0)),
        (" c", "\n// c", (0, 2)),
    ],
)
def test_common_affixes(old: str, new: str, expected: tuple[int, int]) -> None:
    """Prefix and suffix never overlap."""
    assert common_affixes(old, new) == expected


def test_apply_text_edits_keeps_insert_order() -> None:
    """Inserts at the same offset appear in the order they were given."""
    edits = [TextEdit(1, 0, "b"), TextEdit(1, 0, "B")]
    assert apply_text_edits("ac", edits) == "abBc"


def test_apply_text_edits_with_base() -> None:
    """Offsets are relative to ``base``."""
    assert apply_text_edits("hello", [TextEdit(11, 3, "p")], base=10) == "hpo"


def test_apply_text_edits_rejects_overlaps() -> None:
    """Overlapping or out-of-range edits raise."""
    with pytest.raises(DocumentMismatchError):
        apply_text_edits("abcdef", [TextEdit(0, 3, "x"), TextEdit(2, 1, "y")])
    with pytest.raises(DocumentMismatchError):
        apply_text_edits("abc", [TextEdit(2, 5, "x")])


def test_emitter_skips_identical_lines() -> None:
    """Unchanged spans produce no edit; changed spans only their differing middle."""
    snapshot = "// a b c"
    rendered = [RenderedLine("// a b", 0, 6), RenderedLine("\n// c", 6, 2)]
    edits = EditEmitter(snapshot, offset=10).emit(rendered)
    assert edits == [TextEdit(16, 0, "\n//")]


def test_comment_edit_apply_checks_snapshot() -> None:
    """Applying to a document that no longer holds the snapshot raises."""
    edit = CommentEdit(offset=2, snapshot="// a", edits=(TextEdit(4, 0, "x"),))
    assert edit.matches("x\n// a\n")
    assert edit.apply("x\n// a\n") == "x\n//x a\n"
    assert edit.formatted == "//x a"

    with pytest.raises(DocumentMismatchError) as excinfo:
        edit.apply("x\n// b\n")
    assert excinfo.value.offset == 2
