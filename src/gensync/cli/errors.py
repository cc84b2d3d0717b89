# topmark:header:start
#
#   project      : GenSync
#   file         : errors.py
#   file_relpath : src/gensync/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the GenSync CLI.

Usage:
    Commands catch core exceptions ([`gensync.errors`][]) and re-raise them as one
    of these, so Click prints a single message and exits with the matching code.

Styling:
    Click calls `show()` after the command context has been torn down, so the
    project console is looked up when the exception is *raised*. Without a
    console (e.g. errors raised before the group initialized it), Click's
    default ``Error: ...`` rendering is used.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from gensync.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from gensync.cli.console import ClickConsole


def _current_console() -> ClickConsole | None:
    ctx: click.Context | None = click.get_current_context(silent=True)
    if ctx is None or not isinstance(ctx.obj, dict):
        return None
    return ctx.obj.get("console")


class GensyncCliError(click.ClickException):
    """Base class for all GenSync CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.console: ClickConsole | None = _current_console()

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the message through the project console when one is known."""
        if self.console is None:
            super().show(file)
            return
        self.console.error(self.console.styled(self.format_message(), fg="bright_red"))


class GensyncUsageError(GensyncCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class GensyncStaleError(GensyncCliError):
    """A generated file was out of date (``--mode ensure``)."""

    exit_code = ExitCode.STALE


class GensyncConfigError(GensyncCliError):
    """Malformed configuration file."""

    exit_code = ExitCode.CONFIG_ERROR


class GensyncFileNotFoundError(GensyncCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class GensyncFormatterError(GensyncCliError):
    """The external formatter is unavailable or failed."""

    exit_code = ExitCode.FORMATTER_UNAVAILABLE


class GensyncIOError(GensyncCliError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR
