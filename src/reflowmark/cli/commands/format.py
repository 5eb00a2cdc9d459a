# topmark:header:start
#
#   project      : ReflowMark
#   file         : format.py
#   file_relpath : src/reflowmark/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowMark `format` command.

Rewrites files in place. With ``--stdout`` (or when reading ``-``) the
formatted text is written to standard output instead.
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
from reflowmark.cli.io import STDIN_MARKER, display_name, expand_paths, write_source
from reflowmark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatting_options,
)
from reflowmark.config.logging import get_logger

if TYPE_CHECKING:
    from reflowmark.core.diagnostics import Diagnostic

logger = get_logger(__name__)


@click.command(
    name="format",
    help="Reformat comments of the given files in place.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Write the formatted text to standard output instead of the files.",
)
@common_config_options
@common_formatting_options
@click.pass_context
def format_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    to_stdout: bool,
    **options: Any,
) -> None:
    """Reformat comments.

    Args:
        ctx: The Click context.
        paths: Files or directories to format; ``-`` reads standard input.
        to_stdout: Print results instead of rewriting files.
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
    reformatted = 0
    for path in files:
        result = format_path(ctx, path, config, measurement)
        diagnostics.extend(result.diagnostics)
        if to_stdout or path == STDIN_MARKER:
            # Bytes keep the original line endings on any platform.
            click.echo(result.formatted.encode("utf-8"), nl=False, file=console.out)
            continue
        if not result.changed:
            continue
        write_source(path, result.formatted)
        reformatted += 1
        if verbosity > 0:
            console.warn(f"reformatted {display_name(path)}")

    report_summary(ctx, diagnostics)
    logger.debug("format: %d of %d file(s) rewritten", reformatted, len(files))
    if verbosity >= 0 and not to_stdout and STDIN_MARKER not in files:
        console.print(f"{reformatted} of {len(files)} file(s) reformatted.")
