# topmark:header:start
#
#   project      : ReflowMark
#   file         : test_scenarios.py
#   file_relpath : tests/comment/test_scenarios.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end formatting scenarios for single comments.

Each test formats one comment through `format_comment` and checks the
resulting text, the minimal edits, and that formatting the output again is a
no-op.
"""

from __future__ import annotations

from reflowmark.comment.edits import CommentEdit, TextEdit
from reflowmark.comment.kinds import CommentKind
from reflowmark.comment.region import format_comment
from reflowmark.config.model import Config
from tests.conftest import reformat


def _assert_stable(text: str, kind: CommentKind, config: Config) -> None:
    again: CommentEdit = format_comment(text, kind, config=config)
    assert again.is_empty, f"second pass produced edits: {again.edits}"


def test_line_comment_wraps_with_single_insert() -> None:
    """A long ``//`` comment wraps greedily and the edit only inserts the new prefix."""
    config = Config(max_line_width=14)
    text = "// a b c d e f g h i j k l"

    edit: CommentEdit = format_comment(text, CommentKind.SINGLE, config=config)

    assert edit.formatted == "// a b c d e f\n// g h i j k l"
    assert edit.edits == (TextEdit(14, 0, "\n//"),)
    _assert_stable(edit.formatted, CommentKind.SINGLE, config)


def test_short_block_comment_is_untouched() -> None:
    """A block comment that already fits yields no edits."""
    edit = format_comment("/* short */", CommentKind.BLOCK, config=Config())
    assert edit.is_empty
    assert edit.formatted == "/* short */"


def test_root_tag_keeps_its_argument() -> None:
    """The token after a root tag joins it even when the line overflows."""
    config = Config(max_line_width=20)
    edit = format_comment("/** @see SomeType#method() next */", CommentKind.DOC, config=config)

    assert edit.formatted == "/** @see SomeType#method()\n * next */"
    _assert_stable(edit.formatted, CommentKind.DOC, config)


def test_preformatted_content_is_preserved() -> None:
    """Text between ``<pre>`` tags keeps its spacing on a line of its own."""
    text = "/** Example <pre>int x = 1;   // two    spaces</pre> end */"
    verbatim = "<pre>int x = 1;   // two    spaces</pre>"

    wide = format_comment(text, CommentKind.DOC, config=Config(max_line_width=80))
    assert wide.formatted == f"/** Example\n * {verbatim}\n * end */"

    narrow_config = Config(max_line_width=30)
    narrow = format_comment(text, CommentKind.DOC, config=narrow_config)
    assert narrow.formatted == f"/** Example\n * {verbatim}\n * end */"
    assert verbatim in narrow.formatted
    _assert_stable(narrow.formatted, CommentKind.DOC, narrow_config)


def test_no_format_tag_disables_formatting() -> None:
    """A comment containing the no-format marker is never edited."""
    for width in (5, 20, 80):
        edit = format_comment(
            "/** @formatter:off Non-format marker */",
            CommentKind.DOC,
            config=Config(max_line_width=width),
        )
        assert edit.is_empty


def test_block_opt_out_prefix() -> None:
    """Block comments opened with ``/*-`` are never edited."""
    config = Config(max_line_width=5)
    edit = format_comment("/*- keep   this   */", CommentKind.BLOCK, config=config)
    assert edit.is_empty
    assert edit.formatted == "/*- keep   this   */"


def test_custom_no_format_tag() -> None:
    """The opt-out marker is configurable."""
    config = Config(max_line_width=8, no_format_tag="KEEP")
    assert format_comment("// KEEP a b c d e f", CommentKind.SINGLE, config=config).is_empty
    assert not format_comment("// a b c d e f", CommentKind.SINGLE, config=config).is_empty


def test_consecutive_root_tags_break_once() -> None:
    """Two root tags in a row are separated by exactly one line break."""
    text = "/**\n * @deprecated @return value\n */"
    assert reformat(text, CommentKind.DOC) == "/**\n * @deprecated\n * @return value\n */"


def test_parameter_description_on_new_line() -> None:
    """``new_line_for_parameter`` moves the description after a ``@param`` name."""
    text = "/** @param name the value */"
    assert reformat(text, CommentKind.DOC) == text
    assert (
        reformat(text, CommentKind.DOC, new_line_for_parameter=True)
        == "/** @param name\n * the value */"
    )


def test_parameter_tag_keeps_its_name() -> None:
    """The name after a parameter tag joins it even when the tag is not a root tag."""
    text = "/** see @arg identifier */"
    tags = {"root_tags": ("@return",), "max_line_width": 14}
    assert reformat(text, CommentKind.DOC, param_tags=("@arg",), **tags) == text
    assert (
        reformat(text, CommentKind.DOC, param_tags=(), **tags)
        == "/** see @arg\n * identifier */"
    )


def test_indent_root_tags_indents_continuations() -> None:
    """Continuation lines of a tag paragraph are indented past the tag."""
    out = reformat(
        "/** @param name the value */",
        CommentKind.DOC,
        new_line_for_parameter=True,
        indent_root_tags=True,
    )
    assert out == "/** @param name\n * " + " " * 7 + "the value */"


def test_break_tag_forces_following_break() -> None:
    """A ``<br>`` ends the line it is on."""
    assert reformat("/** one <br> two */", CommentKind.DOC) == "/** one <br>\n * two */"


def test_newline_tags_start_lines() -> None:
    """List items start on a new line."""
    out = reformat("/** list <li>a <li>b */", CommentKind.DOC)
    assert out == "/** list\n * <li>a\n * <li>b */"


def test_inline_tag_is_never_split() -> None:
    """An inline ``{@link ...}`` tag is one token."""
    out = reformat("/** see {@link Foo bar} now */", CommentKind.DOC, max_line_width=12)
    assert out == "/** see\n * {@link Foo bar}\n * now */"


def test_block_short_punctuation_joins() -> None:
    """Short punctuation sticks to the preceding word even past the width."""
    out = reformat("/* aaaa bbbbbb ! */", CommentKind.BLOCK, max_line_width=10)
    assert out == "/* aaaa\n * bbbbbb ! */"


def test_blank_lines_kept_or_cleared() -> None:
    """Blank lines separate paragraphs unless ``clear_blank_lines`` is set."""
    line_text = "// a\n//\n// b"
    assert format_comment(line_text, CommentKind.SINGLE, config=Config()).is_empty
    assert reformat(line_text, CommentKind.SINGLE, clear_blank_lines=True) == "// a b"

    block_text = "/*\n * a\n *\n * b\n */"
    assert format_comment(block_text, CommentKind.BLOCK, config=Config()).is_empty
    assert reformat(block_text, CommentKind.BLOCK, clear_blank_lines=True) == "/*\n * a b\n */"


def test_doc_first_line_off_forces_borders() -> None:
    """With ``format_doc_first_line`` off, a wrapped doc comment gets both borders."""
    config = Config(max_line_width=10, format_doc_first_line=False)
    edit = format_comment("/** aaaa bbbb */", CommentKind.DOC, config=config)
    assert edit.formatted == "/**\n * aaaa\n * bbbb\n */"
    _assert_stable(edit.formatted, CommentKind.DOC, config)


def test_doc_first_line_off_keeps_collapsed_comment() -> None:
    """A one-line doc comment that still fits stays on one line."""
    config = Config(format_doc_first_line=False)
    assert format_comment("/** a b */", CommentKind.DOC, config=config).is_empty


def test_short_lines_are_joined() -> None:
    """Under-full lines are refilled up to the width."""
    out = reformat("/*\n * a\n * b\n * c\n */", CommentKind.BLOCK)
    assert out == "/*\n * a b c\n */"


def test_indentation_with_tabs_and_spaces() -> None:
    """Continuation lines repeat the comment's indentation."""
    text = "// aaa bbb"
    with_tabs = format_comment(
        text,
        CommentKind.SINGLE,
        config=Config(max_line_width=10, use_tabs_for_indent=True),
        indentation="\t",
    )
    assert with_tabs.formatted == "// aaa\n\t// bbb"

    with_spaces = format_comment(
        text,
        CommentKind.SINGLE,
        config=Config(max_line_width=10),
        indentation="\t",
    )
    assert with_spaces.formatted == "// aaa\n    // bbb"


def test_crlf_delimiter_is_used_for_new_breaks() -> None:
    """Inserted line breaks use the document's delimiter."""
    edit = format_comment(
        "// a b c",
        CommentKind.SINGLE,
        config=Config(max_line_width=7),
        delimiter="\r\n",
    )
    assert edit.formatted == "// a b\r\n// c"


def test_filler_borders_span_the_width() -> None:
    """Upper and lower filler borders are stretched to the line width."""
    config = Config(max_line_width=10)
    edit = format_comment("/*****\n * a b c\n *****/", CommentKind.BLOCK, config=config)
    lines = edit.formatted.split("\n")

    assert lines[0].startswith("/*") and set(lines[0][1:]) == {"*"}
    assert len(lines[0]) == 10
    assert lines[1] == " * a b c"
    assert lines[2].endswith("*/") and len(lines[2]) == 10
    _assert_stable(edit.formatted, CommentKind.BLOCK, config)


def test_edits_use_document_offsets() -> None:
    """Edits are expressed in document coordinates."""
    edit = format_comment(
        "// a b c",
        CommentKind.SINGLE,
        config=Config(max_line_width=7),
        offset=100,
    )
    assert [e.offset for e in edit.edits] == [106]
    assert edit.formatted == "// a b\n// c"
