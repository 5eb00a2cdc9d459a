# topmark:header:start
#
#   project      : ReflowMark
#   file         : test_partitioner.py
#   file_relpath : tests/host/test_partitioner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for locating formattable comments in source text."""

from __future__ import annotations

from reflowmark.comment.kinds import CommentKind
from reflowmark.host.partitioner import CommentPartition, find_comments

SOURCE = (
    "int a; // trailing\n"
    "  // one\n"
    "  // two\n"
    "/* block */\n"
    "/** doc */\n"
    's = "/* not */";\n'
    "c = '\\'';\n"
    "/**/\n"
    "/// triple\n"
    "//! bang\n"
)


def _texts(text: str) -> list[tuple[str, CommentKind, str]]:
    return [(text[p.offset : p.end], p.kind, p.indentation) for p in find_comments(text)]


def test_finds_own_line_comments_of_every_kind() -> None:
    assert _texts(SOURCE) == [
        ("// one\n  // two", CommentKind.SINGLE, "  "),
        ("/* block */", CommentKind.BLOCK, ""),
        ("/** doc */", CommentKind.DOC, ""),
    ]


def test_partition_offsets() -> None:
    parts = find_comments("x\n    // hi  \n")
    assert parts == [
        CommentPartition(offset=6, length=5, kind=CommentKind.SINGLE, indentation="    ")
    ]
    assert parts[0].end == 11


def test_line_comments_merge_only_when_adjacent_and_aligned() -> None:
    text = "// a\n\n// b\n  // c\n// d  \n// e"
    assert [t for t, _, _ in _texts(text)] == ["// a", "// b", "// c", "// d  \n// e"]


def test_comments_sharing_a_line_with_code_are_skipped() -> None:
    text = "x = 1; /* c */\n/* d */ y = 2;\n  /* e */  \n"
    assert [t for t, _, _ in _texts(text)] == ["/* e */"]


def test_comment_markers_inside_literals_are_ignored() -> None:
    text = 'a = """\n// no\n/* no */\n""";\nb = `\n// no\n`;\n// yes\n'
    assert [t for t, _, _ in _texts(text)] == ["// yes"]


def test_unterminated_block_comment_stops_scanning() -> None:
    assert _texts("// a\n/* open\n// b\n") == [("// a", CommentKind.SINGLE, "")]


def test_multiline_block_comment_with_crlf() -> None:
    text = "\t/*\r\n\t * a\r\n\t */\r\n"
    assert _texts(text) == [("/*\r\n\t * a\r\n\t */", CommentKind.BLOCK, "\t")]
