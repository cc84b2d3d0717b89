# topmark:header:start
#
#   project      : GenSync
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging helpers (TRACE level, env resolution)."""

from __future__ import annotations

import logging as std_logging

import pytest

from tests.conftest import parametrize
from gensync.config.logging import (
    TRACE_LEVEL,
    GensyncLogger,
    get_logger,
    resolve_env_log_level,
)


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("20", 20),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """``GENSYNC_LOG_LEVEL`` accepts names and numbers."""
    monkeypatch.setenv("GENSYNC_LOG_LEVEL", value)

    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """The autouse fixture clears the variable."""
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers are `GensyncLogger` instances with a working `trace`."""
    logger = get_logger("gensync.tests.trace")
    assert isinstance(logger, GensyncLogger)

    with caplog.at_level(TRACE_LEVEL, logger="gensync.tests.trace"):
        logger.trace("hello %s", "trace")

    assert [r.getMessage() for r in caplog.records] == ["hello trace"]
    assert caplog.records[0].levelname == "TRACE"
