# topmark:header:start
#
#   project      : ReflowMark
#   file         : __init__.py
#   file_relpath : src/reflowmark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across ReflowMark.

Included modules:

- ``diagnostics``
  Diagnostic types and helpers (levels, messages, aggregation) used to
  collect and report info, warnings, and errors consistently.

- ``errors``
  The exception hierarchy rooted at ``ReflowmarkError``.
"""

from __future__ import annotations
