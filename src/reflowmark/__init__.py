# topmark:header:start
#
#   project      : ReflowMark
#   file         : __init__.py
#   file_relpath : src/reflowmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowMark package.

ReflowMark re-wraps source-code comments (``//`` line comments, ``/* */`` block
comments and ``/** */`` documentation comments) to a target line width and
emits the minimal set of text edits needed to get there. It exposes a small
typed engine API and a CLI for formatting files.
"""

from __future__ import annotations

from reflowmark.comment.edits import CommentEdit, TextEdit
from reflowmark.comment.kinds import CommentKind
from reflowmark.comment.region import CommentRegion, format_comment
from reflowmark.config.model import Config, MutableConfig

__all__ = [
    "CommentEdit",
    "CommentKind",
    "CommentRegion",
    "Config",
    "MutableConfig",
    "TextEdit",
    "format_comment",
]
