# topmark:header:start
#
#   project      : GenSync
#   file         : console.py
#   file_relpath : src/gensync/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output for GenSync commands.

Everything a command *reports* (block listings, ``updated <path>``, error
messages) goes through `ClickConsole`; diagnostics go through `logging` and
land on stderr. Keeping the two apart makes ``--format json`` output safe to
pipe even at TRACE verbosity.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Thin wrapper around `click.echo` bound to a color setting.

    Streams default to the *current* ``sys.stdout`` / ``sys.stderr`` at write
    time, so output follows stream swaps done by `click.testing.CliRunner`.

    Args:
        enable_color (bool): Emit ANSI styles; when False they are stripped.
        out (TextIO | None): Stream for program output.
        err (TextIO | None): Stream for error messages.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        """Stream used by `print`."""
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        """Stream used by `error`."""
        return self._err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the error stream."""
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Apply `click.style` to ``text`` unless color is disabled."""
        return click.style(text, **style_kwargs) if self.enable_color else text
