# topmark:header:start
#
#   project      : ReflowMark
#   file         : check.py
#   file_relpath : src/reflowmark/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowMark `check` command.

Reports files whose comments would be reformatted without writing anything.
Exits with `ExitCode.WOULD_CHANGE` when at least one file would change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from reflowmark.cli.cmd_common import (
    build_config,
    build_measurement,
    format_path,
    get_console,
    get_effective_verbosity,
    report_summary,
)
from reflowmark.cli.errors import ReflowmarkUsageError
from reflowmark.cli.exit_codes import ExitCode
from reflowmark.cli.io import display_name, expand_paths
from reflowmark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatting_options,
)
from reflowmark.config.logging import get_logger
from reflowmark.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from reflowmark.core.diagnostics import Diagnostic

logger = get_logger(__name__)


@click.command(
    name="check",
    help="Report files whose comments would be reformatted (dry run).",
    epilog="Exit status: 0 when nothing would change, 2 when some file would change.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@click.option("--diff", "show_diff", is_flag=True, help="Print a unified diff per changed file.")
@common_config_options
@common_formatting_options
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    show_diff: bool,
    **options: Any,
) -> None:
    """Check which files would be reformatted.

    Args:
        ctx: The Click context.
        paths: Files or directories to check; ``-`` reads standard input.
        show_diff: Print a unified diff for each file that would change.
        **options: Config and formatting options keyed by `ArgKey` names.
    """
    if not paths:
        raise ReflowmarkUsageError("No input paths given. Pass files, directories, or '-'.")

    console = get_console(ctx)
    verbosity = get_effective_verbosity(ctx)
    config = build_config(ctx, paths, options)
    measurement = build_measurement(config)

    files = expand_paths(paths)
    diagnostics: list[Diagnostic] = []
    would_change = 0
    for path in files:
        result = format_path(ctx, path, config, measurement)
        diagnostics.extend(result.diagnostics)
        name = display_name(path)
        if not result.changed:
            if verbosity > 0:
                console.print(f"{name}: unchanged")
            continue
        would_change += 1
        if verbosity >= 0:
            console.print(
                f"{console.styled('would reformat', fg='yellow', bold=True)} {name} "
                f"({result.changed_comments} comment(s))"
            )
        if show_diff:
            patch = unified_diff(name, result.original, result.formatted)
            console.print(render_patch(patch) if console.enable_color else patch, nl=False)

    if verbosity >= 0:
        console.print(f"{would_change} of {len(files)} file(s) would be reformatted.")
    report_summary(ctx, diagnostics)
    logger.debug("check: %d of %d file(s) would change", would_change, len(files))
    if would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)
