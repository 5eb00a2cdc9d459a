# topmark:header:start
#
#   project      : ReflowMark
#   file         : version.py
#   file_relpath : src/reflowmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowMark `version` command.

Prints the current ReflowMark version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from reflowmark.cli.cmd_common import get_console, get_effective_verbosity
from reflowmark.constants import REFLOWMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of ReflowMark.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of ReflowMark."""
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("ReflowMark version:", bold=True, underline=True))
        console.print(f"    {console.styled(REFLOWMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(REFLOWMARK_VERSION, bold=True))
