# topmark:header:start
#
#   project      : ReflowMark
#   file         : config_resolver.py
#   file_relpath : src/reflowmark/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective ReflowMark configuration from Click parameters.

Resolution order (lowest → highest precedence):
  1. **Built-in defaults**.
  2. **Discovered project configs** (root → nearest), unless ``--no-config``:
     ``pyproject.toml`` (``[tool.reflowmark]``) then ``reflowmark.toml`` per
     directory; a file with ``root = true`` stops the upward walk.
  3. **Explicit config files** passed via ``--config``, merged in order.
  4. **CLI overrides** (``--width``, ``--tab-size``...), applied last.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from reflowmark.cli.errors import ReflowmarkConfigError
from reflowmark.config.keys import ArgKey
from reflowmark.config.logging import get_logger
from reflowmark.config.model import MutableConfig
from reflowmark.core.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from reflowmark.config.logging import ReflowmarkLogger

logger: ReflowmarkLogger = get_logger(__name__)


def discovery_anchor(paths: Sequence[str]) -> Path:
    """Return the directory config discovery starts from.

    The first real input path is used (its parent if it is a file); the current
    working directory otherwise, or when reading standard input.
    """
    for raw in paths:
        if raw and raw != "-":
            p = Path(raw)
            return (p.parent if p.is_file() else p).resolve()
    return Path.cwd().resolve()


def resolve_config_from_click(
    *,
    paths: Sequence[str],
    options: Mapping[str, Any],
) -> MutableConfig:
    """Build the merged configuration draft for a command invocation.

    Args:
        paths (Sequence[str]): Input paths of the command (may be empty).
        options (Mapping[str, Any]): Click parameters keyed by `ArgKey` names.

    Returns:
        MutableConfig: The merged draft; call ``freeze()`` for the runtime `Config`.

    Raises:
        ReflowmarkConfigError: If a config file cannot be read or parsed.
    """
    anchor = discovery_anchor(paths)
    logger.debug("Config discovery anchor: %s", anchor)
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            anchor=anchor,
            extra_config_files=[Path(p) for p in options.get(ArgKey.CONFIG_FILES) or ()],
            no_config=bool(options.get(ArgKey.NO_CONFIG)),
        )
    except ConfigurationError as e:
        raise ReflowmarkConfigError(str(e)) from e

    draft.apply_overrides(options)
    logger.trace("Resolved config draft: %s", draft)
    return draft
