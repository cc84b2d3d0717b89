# topmark:header:start
#
#   project      : GenSync
#   file         : errors.py
#   file_relpath : src/gensync/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the GenSync core.

Usage:
    The core raises these exceptions and lets them propagate; the CLI maps
    them to Click exceptions and exit codes (see `gensync.cli.errors`).

Precondition violations (an invalid tag name, a location outside the project
root) are programming errors and raise ``ValueError`` instead. Filesystem
failures propagate as ``OSError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class GensyncError(Exception):
    """Base class for all GenSync errors."""


class StaleFileError(GensyncError):
    """A generated file was not up to date and has been rewritten.

    Raised by `gensync.sync.update` in ``Mode.ENSURE`` *after* the corrective
    write, so a second run converges.

    Attributes:
        path (Path): The path that was rewritten.
        relpath (Path): ``path`` relative to the project root when resolvable,
            otherwise ``path`` itself.
        diff (str): Unified diff from the stale content to the new content.
    """

    def __init__(self, path: Path, relpath: Path, *, diff: str = "") -> None:
        self.path = path
        self.relpath = relpath
        self.diff = diff
        super().__init__(f"`{relpath.as_posix()}` was not up-to-date, updating")


class FormatterError(GensyncError):
    """The external formatter could not be launched or exited with an error.

    Attributes:
        command (tuple[str, ...]): The command line that was executed.
        returncode (int | None): Exit status, or ``None`` when the process
            never started.
        stderr (str): Captured standard error output (may be empty).
    """

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command: tuple[str, ...] = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class ConfigError(GensyncError):
    """Configuration file is present but malformed."""
