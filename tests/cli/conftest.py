# topmark:header:start
#
#   project      : GenSync
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running GenSync against a temporary project root.

`run_cli_at()` passes ``--root <tmp_path>`` and ``--no-color`` so that relative
paths in output are rendered against the test project and can be compared as
plain text.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from gensync.cli.exit_codes import ExitCode
from gensync.cli.main import cli
from gensync.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Re-attach the test log handler after each CLI run.

    The group calls `setup_logging()`, which binds the handler to the
    runner's (temporary) stderr.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI as-is (no implicit options).

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), input=input_text, obj={})


def run_cli_at(
    root: Path,
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``--root root --no-color`` prepended to ``argv``."""
    return run_cli(["--root", str(root), "--no-color", *argv], input_text=input_text)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert the exit code, showing the output on failure."""
    assert result.exit_code == code, result.output


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert_exit(result, ExitCode.SUCCESS)
