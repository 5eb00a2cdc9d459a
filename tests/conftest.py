# topmark:header:start
#
#   project      : ReflowMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ReflowMark test suite.

Notes:
    Tests should respect the immutable/mutable configuration split: build a
    `reflowmark.config.model.Config` directly (all fields have defaults) or
    through `MutableConfig.freeze()`, and never mutate a frozen `Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from reflowmark.comment.kinds import CommentKind
from reflowmark.comment.region import format_comment
from reflowmark.config import logging
from reflowmark.config.model import Config, MutableConfig

if TYPE_CHECKING:
    from reflowmark.comment.edits import CommentEdit

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_reflowmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ReflowMark's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``REFLOWMARK_LOG_LEVEL``.
    """
    monkeypatch.delenv("REFLOWMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failing tests show the engine's pass transitions."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory marked as config root.

    The ``reflowmark.toml`` written here sets ``root = true`` so discovery never
    walks up into the developer's own configuration.

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "reflowmark.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied to the mutable builder.

    Returns:
        Config: An immutable configuration snapshot.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def reformat(text: str, kind: CommentKind, **overrides: Any) -> str:
    """Format one comment with ``overrides`` and return the new comment text."""
    edit: CommentEdit = format_comment(text, kind, config=make_config(**overrides))
    return edit.formatted
