# topmark:header:start
#
#   project      : ReflowMark
#   file         : strategies_reflowmark.py
#   file_relpath : tests/strategies_reflowmark.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating well-formed comments of every kind.

Plain words are lower-case alphanumerics so that decoration characters (``/``,
``*``) never occur inside generated text. `s_doc_comment` mixes them with
documentation tags, HTML markup, inline tags and immutable spans whose inner
spacing must survive formatting.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hypothesis import strategies as st

from reflowmark.comment.kinds import CommentKind

Draw = Callable[[st.SearchStrategy[Any]], Any]

WORD_PATTERN = r"[a-z][a-z0-9]{0,9}"

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

OPENERS: dict[CommentKind, str] = {
    CommentKind.BLOCK: "/*",
    CommentKind.DOC: "/**",
}


@dataclass(frozen=True)
class CommentSample:
    """A generated comment and the words it contains."""

    kind: CommentKind
    text: str
    words: tuple[str, ...]
    delimiter: str


def s_words(max_size: int = 8) -> st.SearchStrategy[list[str]]:
    """Lists of words for one comment line (possibly empty = blank line)."""
    return st.lists(st.from_regex(WORD_PATTERN, fullmatch=True), min_size=0, max_size=max_size)


def _join(words: list[str], spacing: str) -> str:
    return spacing.join(words)


@st.composite
def s_comment(draw: Draw, kinds: tuple[CommentKind, ...] = tuple(CommentKind)) -> CommentSample:
    """Generate a well-formed comment with random wrapping, spacing and borders."""
    kind: CommentKind = draw(st.sampled_from(kinds))
    le: str = draw(st.sampled_from(LINE_ENDINGS))
    lines: list[list[str]] = draw(st.lists(s_words(), min_size=1, max_size=6))
    spacing: str = draw(st.sampled_from([" ", "  ", "\t"]))
    words: tuple[str, ...] = tuple(w for line in lines for w in line)

    if kind is CommentKind.SINGLE:
        rendered = [("// " + _join(line, spacing)) if line else "//" for line in lines]
        return CommentSample(kind, le.join(rendered), words, le)

    opener = OPENERS[kind]
    upper: bool = draw(st.booleans())
    lower: bool = draw(st.booleans())

    out: list[str] = []
    body = list(lines)
    if upper:
        out.append(opener)
    else:
        first = body.pop(0)
        out.append(f"{opener} {_join(first, spacing)}".rstrip())
    out.extend(f" * {_join(line, spacing)}".rstrip() for line in body)
    if lower or len(out) == 1 and upper:
        out.append(" */")
    else:
        out[-1] = out[-1] + " */"
    return CommentSample(kind, le.join(out), words, le)


# Atoms whose text, inner spacing included, must come out unchanged
VERBATIM_ATOMS: tuple[str, ...] = (
    "{@link A#b(int,  x)}",
    "<pre>a  b</pre>",
    "<code>c  d</code>",
)

MARKUP_ATOMS: tuple[str, ...] = (
    "@param x",
    "@return",
    "<p>",
    "</p>",
    "<br>",
    "<li>",
    ",",
)


@dataclass(frozen=True)
class DocSample:
    """A generated documentation comment and the atoms it was built from."""

    text: str
    atoms: tuple[str, ...]
    delimiter: str


def s_doc_atom() -> st.SearchStrategy[str]:
    """One word, tag or markup atom; multi-token atoms never span lines."""
    return st.one_of(
        st.from_regex(WORD_PATTERN, fullmatch=True),
        st.sampled_from(MARKUP_ATOMS),
        st.sampled_from(VERBATIM_ATOMS),
    )


@st.composite
def s_doc_comment(draw: Draw) -> DocSample:
    """Generate a ``/** ... */`` comment mixing words with tags and markup."""
    le: str = draw(st.sampled_from(LINE_ENDINGS))
    lines: list[list[str]] = draw(
        st.lists(st.lists(s_doc_atom(), min_size=0, max_size=6), min_size=1, max_size=6)
    )
    spacing: str = draw(st.sampled_from([" ", "  ", "\t"]))
    upper: bool = draw(st.booleans())
    lower: bool = draw(st.booleans())

    out: list[str] = []
    body = list(lines)
    if upper:
        out.append("/**")
    else:
        out.append(f"/** {_join(body.pop(0), spacing)}".rstrip())
    out.extend(f" * {_join(line, spacing)}".rstrip() for line in body)
    if lower or len(out) == 1 and upper:
        out.append(" */")
    else:
        out[-1] = out[-1] + " */"
    atoms = tuple(a for line in lines for a in line)
    return DocSample(le.join(out), atoms, le)
