# topmark:header:start
#
#   project      : ReflowMark
#   file         : cmd_common.py
#   file_relpath : src/reflowmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the ``check`` and ``format`` commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from reflowmark.cli.config_resolver import resolve_config_from_click
from reflowmark.cli.errors import ReflowmarkConfigError, ReflowmarkPipelineError
from reflowmark.cli.io import display_name, read_source
from reflowmark.comment.measure import create_measurement
from reflowmark.config.logging import get_logger
from reflowmark.core.diagnostics import DiagnosticLevel, DiagnosticLog
from reflowmark.core.errors import ConfigurationError, DocumentMismatchError
from reflowmark.host.formatter import format_source

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from reflowmark.cli.console import ClickConsole
    from reflowmark.comment.measure import TextMeasurement
    from reflowmark.config.logging import ReflowmarkLogger
    from reflowmark.config.model import Config
    from reflowmark.core.diagnostics import Diagnostic
    from reflowmark.host.formatter import FormatResult

logger: ReflowmarkLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the context by the CLI group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` terse, ``>0`` verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(ctx: click.Context, paths: Sequence[str], options: Mapping[str, Any]) -> Config:
    """Resolve and freeze the configuration, reporting config diagnostics."""
    config: Config = resolve_config_from_click(paths=paths, options=options).freeze()
    report_diagnostics(ctx, "<config>", config.diagnostics)
    return config


def report_diagnostics(ctx: click.Context, name: str, diagnostics: Iterable[Diagnostic]) -> None:
    """Print diagnostics to stderr.

    Warnings and errors are shown unless ``-q`` is given; info diagnostics
    only with ``-v``.
    """
    console = get_console(ctx)
    verbosity = get_effective_verbosity(ctx)
    for diag in diagnostics:
        if verbosity < 0:
            return
        if diag.level is DiagnosticLevel.INFO and verbosity < 1:
            continue
        label = diag.level.color(diag.level.value) if console.enable_color else diag.level.value
        console.warn(f"{name}: {label}: {diag.message}")


def build_measurement(config: Config) -> TextMeasurement:
    """Create the width measurement shared by every file of a run.

    Raises:
        ReflowmarkConfigError: If pixel measurement has no usable font.
    """
    try:
        return create_measurement(config)
    except ConfigurationError as e:
        raise ReflowmarkConfigError(str(e)) from e


def format_path(
    ctx: click.Context, path: str, config: Config, measurement: TextMeasurement
) -> FormatResult:
    """Read ``path`` and format its comments.

    Raises:
        ReflowmarkPipelineError: If the computed edits do not match the text.
    """
    text = read_source(path)
    try:
        result = format_source(text, config, measurement=measurement)
    except DocumentMismatchError as e:
        raise ReflowmarkPipelineError(f"{display_name(path)}: {e}") from e
    logger.info(
        "%s: %d comment(s), %d changed",
        display_name(path),
        len(result.edits),
        result.changed_comments,
    )
    report_diagnostics(ctx, display_name(path), result.diagnostics)
    return result


def report_summary(ctx: click.Context, diagnostics: Iterable[Diagnostic]) -> None:
    """Print the diagnostic totals of a run to stderr.

    Comments that could not be formatted are always announced (unless ``-q``);
    the per-level counts are only shown with ``-v``.
    """
    verbosity = get_effective_verbosity(ctx)
    log = DiagnosticLog.from_iterable(diagnostics)
    if verbosity < 0 or not log:
        return
    console = get_console(ctx)
    if verbosity > 0:
        counts = ", ".join(f"{n} {level}" for level, n in log.to_dict().items())
        console.warn(f"diagnostics: {counts}")
    if log.has_error():
        console.error(f"{log.stats().n_error} comment(s) could not be formatted.")
