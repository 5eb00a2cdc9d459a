# topmark:header:start
#
#   project      : ReflowMark
#   file         : options.py
#   file_relpath : src/reflowmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, configuration and
formatting overrides) and their resolution logic, so commands and the group
can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from reflowmark.cli.errors import ReflowmarkUsageError
from reflowmark.config.keys import ArgKey
from reflowmark.config.logging import TRACE_LEVEL, get_logger
from reflowmark.config.types import MeasurementMode

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logger = get_logger(__name__)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``verbose_count`` when verbose, ``-1`` when quiet, ``0`` otherwise.

    Raises:
        ReflowmarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ReflowmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    if quiet_count > 0:
        return -1
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output except errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags, then the FORCE_COLOR and
        NO_COLOR environment variables, and defaults to color on a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def trap_underscored_option(ctx: click.Context, param: click.Option, _value: object) -> None:
    """Raise a helpful error for underscored long options (e.g., --tab_size)."""
    name = getattr(param, "name", None)
    src = ctx.get_parameter_source(name) if name else None
    if src is not ParameterSource.COMMANDLINE:
        return

    bad = param.opts[0] if param.opts else "--?"
    suggestion = bad.replace("_", "-")
    raise click.UsageError(f"Unknown option: {bad}. Did you mean {suggestion}?")


def underscored_trap_option(*names: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Register hidden underscored spellings that raise a helpful error.

    The hidden option gets a unique destination name so its parameter source
    never overlaps with the real option's destination.

    Args:
        *names: One or more underscored long option names to trap.

    Returns:
        A decorator compatible with Click's option stacking.
    """
    if not names:
        raise ValueError("underscored_trap_option requires at least one option name")

    dest = f"_trap_{names[0].lstrip('-').replace('-', '_')}"
    return click.option(
        *names,
        dest,
        hidden=True,
        expose_value=False,
        is_eager=True,
        multiple=True,
        callback=trap_underscored_option,
    )


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        ArgKey.NO_CONFIG,
        is_flag=True,
        help="Ignore discovered project config files (only use defaults and --config).",
    )(f)
    f = underscored_trap_option("--no_config")(f)
    f = click.option(
        "--config",
        ArgKey.CONFIG_FILES,
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply formatting override options.

    Every option defaults to None so that unset flags do not override the
    merged configuration.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--width",
        ArgKey.MAX_LINE_WIDTH,
        type=click.IntRange(min=1),
        default=None,
        help="Maximum line width, comment decoration included.",
    )(f)
    f = click.option(
        "--tab-size",
        ArgKey.TAB_SIZE,
        type=click.IntRange(min=1),
        default=None,
        help="Tab stop distance used to measure widths.",
    )(f)
    f = underscored_trap_option("--tab_size")(f)
    f = click.option(
        "--clear-blank-lines/--keep-blank-lines",
        ArgKey.CLEAR_BLANK_LINES,
        default=None,
        help="Drop or keep blank lines inside comments.",
    )(f)
    f = click.option(
        "--use-tabs/--use-spaces",
        ArgKey.USE_TABS_FOR_INDENT,
        default=None,
        help="Indent continuation lines with tabs or spaces.",
    )(f)
    f = click.option(
        "--format-doc-first-line/--no-format-doc-first-line",
        ArgKey.FORMAT_DOC_FIRST_LINE,
        default=None,
        help="Let documentation text start on the '/**' line.",
    )(f)
    f = click.option(
        "--indent-root-tags/--no-indent-root-tags",
        ArgKey.INDENT_ROOT_TAGS,
        default=None,
        help="Indent continuation lines of @param/@return paragraphs.",
    )(f)
    f = click.option(
        "--new-line-for-parameter/--no-new-line-for-parameter",
        ArgKey.NEW_LINE_FOR_PARAMETER,
        default=None,
        help="Start the description after a @param name on a new line.",
    )(f)
    f = click.option(
        "--measurement-mode",
        ArgKey.MEASUREMENT_MODE,
        type=click.Choice([m.value for m in MeasurementMode]),
        default=None,
        help="Measure widths in character columns or in font pixels.",
    )(f)
    f = click.option(
        "--font",
        ArgKey.FONT_PATH,
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="TrueType/OpenType font used by '--measurement-mode pixel'.",
    )(f)
    f = click.option(
        "--font-size",
        ArgKey.FONT_SIZE,
        type=click.IntRange(min=1),
        default=None,
        help="Point size used when loading '--font'.",
    )(f)
    return f
