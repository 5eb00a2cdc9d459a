# topmark:header:start
#
#   project      : ReflowMark
#   file         : __init__.py
#   file_relpath : src/reflowmark/comment/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment formatting engine.

One `reflowmark.comment.region.CommentRegion` per comment runs the passes
implemented by the sibling modules:

* `tokenizer`: physical lines, borders and tokens.
* `tags`: markup and documentation-tag attributes (documentation comments).
* `wrapper`: greedy line breaking.
* `renderer`: decorated output lines and the spans they replace.
* `edits`: minimal text edits.
"""
