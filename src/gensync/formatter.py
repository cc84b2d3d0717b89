# topmark:header:start
#
#   project      : GenSync
#   file         : formatter.py
#   file_relpath : src/gensync/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format pipe: run generated text through an external formatter.

The formatter is injected as a callable (see [`Formatter`][gensync.formatter.Formatter])
so callers and tests can substitute [`IdentityFormatter`][gensync.formatter.IdentityFormatter]
for the real tool.

[`ExternalFormatter`][gensync.formatter.ExternalFormatter] pins the toolchain
through an environment variable for the child process only, points the tool
at a style configuration inside the project root, and pipes the text through
its standard input/output. Failures are raised as
[`FormatterError`][gensync.errors.FormatterError]; there is no retry and no
timeout.
"""

from __future__ import annotations

import os
import subprocess
from typing import TYPE_CHECKING, Protocol

from gensync.config.logging import get_logger
from gensync.constants import COMMENT_PREFIX, PREAMBLE
from gensync.errors import FormatterError

if TYPE_CHECKING:
    from pathlib import Path

    from gensync.config.logging import GensyncLogger
    from gensync.config.model import Config, FormatterSettings

logger: GensyncLogger = get_logger(__name__)


class Formatter(Protocol):
    """Callable that returns a formatted version of ``text``."""

    def __call__(self, text: str) -> str:
        """Format ``text``.

        Args:
            text (str): Raw generated text.

        Returns:
            str: The formatted text.
        """
        ...


class IdentityFormatter:
    """Formatter that returns its input unchanged."""

    def __call__(self, text: str) -> str:  # noqa: D102
        return text


def _child_env(settings: FormatterSettings) -> dict[str, str]:
    env: dict[str, str] = dict(os.environ)
    if settings.toolchain_env:
        env[settings.toolchain_env] = settings.toolchain
    return env


def _run(
    command: list[str], *, stdin: str | None, env: dict[str, str], cwd: Path
) -> subprocess.CompletedProcess[str]:
    logger.debug("Running %s (cwd=%s)", " ".join(command), cwd)
    try:
        proc: subprocess.CompletedProcess[str] = subprocess.run(  # noqa: S603
            command,
            input=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=env,
            cwd=cwd,
            check=False,
        )
    except OSError as exc:
        raise FormatterError(
            f"Failed to launch `{command[0]}`: {exc}", command=command
        ) from exc
    if proc.returncode != 0:
        joined: str = " ".join(command)
        raise FormatterError(
            f"Command failed with exit code {proc.returncode}: {joined}\n\n{proc.stderr}",
            command=command,
            returncode=proc.returncode,
            stderr=proc.stderr,
        )
    return proc


class ExternalFormatter:
    """Formatter backed by an external process.

    Args:
        settings (FormatterSettings): Command, style config and toolchain pinning.
        root (Path): Project root; the style config is resolved against it and
            the process runs with it as working directory.
    """

    def __init__(self, settings: FormatterSettings, *, root: Path) -> None:
        self.settings = settings
        self.root = root

    @classmethod
    def from_config(cls, config: Config) -> ExternalFormatter:
        """Build a formatter from the ``formatter`` section of ``config``."""
        return cls(config.formatter, root=config.root)

    def command(self) -> list[str]:
        """Return the full command line, style config flag included."""
        cmd: list[str] = list(self.settings.command)
        if self.settings.style_config:
            style_path: Path = self.root / self.settings.style_config
            cmd += [self.settings.style_config_flag, str(style_path)]
        return cmd

    def __call__(self, text: str) -> str:
        """Pipe ``text`` through the formatter and return its standard output.

        Raises:
            FormatterError: If the tool cannot be launched or exits non-zero.
        """
        proc = _run(self.command(), stdin=text, env=_child_env(self.settings), cwd=self.root)
        return proc.stdout


def ensure_formatter(settings: FormatterSettings, *, root: Path) -> str:
    """Check that the formatter runs under the pinned toolchain.

    Runs ``<tool> --version`` with the same environment used for formatting.

    Returns:
        str: The reported version string.

    Raises:
        FormatterError: If the tool is missing, fails, or does not report the
            pinned toolchain.
    """
    tool: str = settings.command[0]
    try:
        proc = _run([tool, "--version"], stdin=None, env=_child_env(settings), cwd=root)
    except FormatterError as exc:
        raise FormatterError(
            f"Failed to run `{tool}`. Is it installed and on PATH?\n{exc}",
            command=exc.command,
            returncode=exc.returncode,
            stderr=exc.stderr,
        ) from exc

    version: str = proc.stdout.strip()
    if settings.toolchain_env and settings.toolchain not in version:
        raise FormatterError(
            f"Failed to run `{tool}` from toolchain '{settings.toolchain}' "
            f"(got '{version}'). Install it for that toolchain.",
            command=[tool, "--version"],
            returncode=proc.returncode,
        )
    logger.debug("Formatter version: %s", version)
    return version


def preamble(generator: str) -> str:
    """Return the generated-file marker line (without trailing newline)."""
    return f"{COMMENT_PREFIX}{PREAMBLE} {generator}"


def reformat(text: str, formatter: Formatter, *, generator: str) -> str:
    """Format ``text`` and prefix it with the generated-file preamble.

    Args:
        text (str): Raw generated text.
        formatter (Formatter): Formatter to pipe the text through.
        generator (str): Generator location cited in the preamble.

    Returns:
        str: ``"<preamble>\\n\\n<formatted>\\n"``.

    Raises:
        FormatterError: Propagated verbatim from the formatter.
    """
    formatted: str = formatter(text)
    return f"{preamble(generator)}\n\n{formatted}\n"
