# topmark:header:start
#
#   project      : GenSync
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the GenSync test suite.

Sets up global fixtures and TRACE logging for test runs, and exposes typed
wrappers around pytest decorators so static type checkers keep the decorated
function types.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from gensync.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_gensync_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear ``GENSYNC_LOG_LEVEL``.
    """
    monkeypatch.delenv("GENSYNC_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so failures carry full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_bytes_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def read_bytes_text(path: Path) -> str:
    """Read ``path`` without newline translation."""
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()
