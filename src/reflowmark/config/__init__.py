# topmark:header:start
#
#   project      : ReflowMark
#   file         : __init__.py
#   file_relpath : src/reflowmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for ReflowMark.

Modules:
    - ``logging``: TRACE-aware logger and colored formatter.
    - ``keys``: TOML section and key names.
    - ``types``: configuration enumerations.
    - ``io``: TOML loading, checked getters and rendering (tomlkit).
    - ``model``: the frozen `Config` and the `MutableConfig` builder.

This package initializer imports nothing so that ``reflowmark.config.logging``
can be imported from any layer without pulling in the model.
"""

from __future__ import annotations
