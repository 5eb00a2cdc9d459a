# topmark:header:start
#
#   project      : ReflowMark
#   file         : __main__.py
#   file_relpath : src/reflowmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ReflowMark via ``python -m reflowmark``.

Examples:
    ```bash
    python -m reflowmark check src/
    python -m reflowmark format --width 72 Main.java
    ```
"""

from __future__ import annotations

from reflowmark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
