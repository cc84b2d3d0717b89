# topmark:header:start
#
#   project      : GenSync
#   file         : formatter.py
#   file_relpath : src/gensync/cli/commands/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync `check-formatter` command.

Verifies that the configured formatter can be launched under the pinned
toolchain, so a CI job fails early with an actionable message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gensync.cli.cmd_common import get_config, get_console
from gensync.cli.errors import GensyncFormatterError
from gensync.cli.options import CONTEXT_SETTINGS
from gensync.errors import FormatterError
from gensync.formatter import ensure_formatter

if TYPE_CHECKING:
    from gensync.config.model import Config


@click.command(
    name="check-formatter",
    help="Check that the configured formatter is installed.",
    context_settings=CONTEXT_SETTINGS,
)
def check_formatter_command() -> None:
    """Run ``<formatter> --version`` and print the result."""
    ctx: click.Context = click.get_current_context()
    config: Config = get_config(ctx)
    try:
        version: str = ensure_formatter(config.formatter, root=config.root)
    except FormatterError as exc:
        raise GensyncFormatterError(str(exc)) from exc
    get_console(ctx).print(version)
