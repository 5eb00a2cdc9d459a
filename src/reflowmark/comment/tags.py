# topmark:header:start
#
#   project      : ReflowMark
#   file         : tags.py
#   file_relpath : src/reflowmark/comment/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute documentation tokens from markup and documentation tags.

Only documentation comments are classified. Two passes run over the token
arena:

1. Markup: HTML tag tokens get ``MARKUP_OPEN`` / ``MARKUP_CLOSE`` and the
   break, paragraph or newline attribute of their tag set. The closing tag of
   a paragraph (``</p>``, ``</pre>``) breaks the line after it. Tokens strictly
   inside an outermost immutable pair (``<pre>...</pre>``) get ``IMMUTABLE``.
2. Documentation tags: a token equal to a root tag gets ``ROOT_DOC_TAG``; a
   token equal to a parameter tag gets ``DOC_TAG`` and the token after it
   ``PARAMETER``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from reflowmark.comment.tokenizer import HTML_TAG_RE
from reflowmark.comment.types import TokenFlag
from reflowmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from reflowmark.comment.ranges import Token
    from reflowmark.config.logging import ReflowmarkLogger
    from reflowmark.config.model import Config

logger: ReflowmarkLogger = get_logger(__name__)

_TAG_NAME_RE: Final[re.Pattern[str]] = re.compile(r"<(/?)([A-Za-z][A-Za-z0-9]*)")


@dataclass(frozen=True, slots=True)
class MarkupTag:
    """A parsed HTML tag token."""

    name: str
    closing: bool
    self_closing: bool


def parse_markup_tag(token_text: str) -> MarkupTag | None:
    """Return the parsed tag when ``token_text`` is exactly one HTML tag.

    Tag names are lower-cased.
    """
    if not HTML_TAG_RE.fullmatch(token_text):
        return None
    m = _TAG_NAME_RE.match(token_text)
    if m is None:
        return None
    return MarkupTag(
        name=m.group(2).lower(),
        closing=bool(m.group(1)),
        self_closing=token_text.endswith("/>"),
    )


def _lowered(names: Iterable[str]) -> frozenset[str]:
    return frozenset(n.lower() for n in names)


class TagClassifier:
    """Set markup and documentation-tag flags on a token arena."""

    def __init__(self, text: str, config: Config) -> None:
        self.text = text
        self.immutable_tags = _lowered(config.immutable_tags)
        self.break_tags = _lowered(config.break_tags)
        self.paragraph_tags = _lowered(config.paragraph_tags)
        self.newline_tags = _lowered(config.newline_tags)
        self.root_tags = frozenset(config.root_tags)
        self.param_tags = frozenset(config.param_tags)

    def classify(self, tokens: list[Token]) -> None:
        """Attribute ``tokens`` in place."""
        parsed = [parse_markup_tag(tok.text(self.text)) for tok in tokens]
        self._mark_markup(tokens, parsed)
        for name in sorted(self.immutable_tags):
            self._mark_immutable(tokens, parsed, name)
        self._mark_doc_tags(tokens)
        logger.trace(
            "Classified %d token(s): %d immutable, %d root tag(s)",
            len(tokens),
            sum(1 for t in tokens if t.is_immutable),
            sum(1 for t in tokens if t.has(TokenFlag.ROOT_DOC_TAG)),
        )

    def _mark_markup(self, tokens: list[Token], parsed: list[MarkupTag | None]) -> None:
        for tok, tag in zip(tokens, parsed):
            if tag is None:
                continue
            if tag.closing:
                tok.mark(TokenFlag.MARKUP_CLOSE)
            else:
                tok.mark(TokenFlag.MARKUP_OPEN)
            if tag.name in self.break_tags or (tag.closing and tag.name in self.paragraph_tags):
                tok.mark(TokenFlag.BREAK)
            if tag.closing:
                continue
            if tag.name in self.paragraph_tags:
                tok.mark(TokenFlag.PARAGRAPH)
            if tag.name in self.newline_tags:
                tok.mark(TokenFlag.NEWLINE)

    @staticmethod
    def _mark_immutable(tokens: list[Token], parsed: list[MarkupTag | None], name: str) -> None:
        # The opening tag sees the level before incrementing, the closing tag
        # after decrementing: only tokens strictly inside the outermost pair are marked.
        level = 0
        for tok, tag in zip(tokens, parsed):
            if tag is not None and tag.name == name and not tag.self_closing:
                if tag.closing:
                    if level == 1:
                        tok.mark(TokenFlag.IMMUTABLE_EDGE)
                    level = max(0, level - 1)
                    if level > 0:
                        tok.mark(TokenFlag.IMMUTABLE)
                else:
                    if level > 0:
                        tok.mark(TokenFlag.IMMUTABLE)
                    else:
                        tok.mark(TokenFlag.IMMUTABLE_EDGE)
                    level += 1
            elif level > 0:
                tok.mark(TokenFlag.IMMUTABLE)

    def _mark_doc_tags(self, tokens: list[Token]) -> None:
        for index, tok in enumerate(tokens):
            if tok.is_immutable or tok.is_blank:
                continue
            word = tok.text(self.text)
            if word in self.root_tags:
                tok.mark(TokenFlag.ROOT_DOC_TAG)
            if word not in self.param_tags:
                continue
            tok.mark(TokenFlag.DOC_TAG)
            if index + 1 < len(tokens):
                nxt = tokens[index + 1]
                name = nxt.text(self.text)
                if not nxt.is_blank and name not in self.root_tags | self.param_tags:
                    nxt.mark(TokenFlag.PARAMETER)
