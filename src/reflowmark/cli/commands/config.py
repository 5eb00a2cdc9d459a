# topmark:header:start
#
#   project      : ReflowMark
#   file         : config.py
#   file_relpath : src/reflowmark/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowMark `config` command.

Emits the effective configuration as TOML after applying defaults, discovered
and explicit config files, and CLI overrides.
"""

from __future__ import annotations

from typing import Any

import click

from reflowmark.cli.cmd_common import build_config, get_console
from reflowmark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatting_options,
)
from reflowmark.config.io import nest_under_pyproject, to_toml
from reflowmark.constants import PYPROJECT_TOOL_SECTION


@click.command(
    name="config",
    help="Print the effective configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--pyproject",
    is_flag=True,
    help=f"Nest the output under [tool.{PYPROJECT_TOOL_SECTION}] for pyproject.toml.",
)
@common_config_options
@common_formatting_options
@click.pass_context
def config_command(ctx: click.Context, *, pyproject: bool, **options: Any) -> None:
    """Print the merged configuration.

    Args:
        ctx: The Click context.
        pyproject: Emit a ``pyproject.toml`` fragment instead of ``reflowmark.toml``.
        **options: Config and formatting options keyed by `ArgKey` names.
    """
    console = get_console(ctx)
    config = build_config(ctx, (), options)
    toml_dict = config.to_toml_dict()
    if pyproject:
        text = nest_under_pyproject(toml_dict, PYPROJECT_TOOL_SECTION)
    else:
        text = to_toml(toml_dict)
    console.print(text, nl=not text.endswith("\n"))
