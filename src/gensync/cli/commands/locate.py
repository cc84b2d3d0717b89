# topmark:header:start
#
#   project      : GenSync
#   file         : locate.py
#   file_relpath : src/gensync/cli/commands/locate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync `locate` command: print the cross-reference for PATH:LINE."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from gensync.cli.cmd_common import get_config, get_console
from gensync.cli.errors import GensyncUsageError
from gensync.cli.options import CONTEXT_SETTINGS
from gensync.location import Location

if TYPE_CHECKING:
    from gensync.config.model import Config


@click.command(
    name="locate",
    help="Print the root-relative cross-reference for PATH at LINE.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("path", type=str)
@click.argument("line", type=click.IntRange(min=1))
def locate_command(*, path: str, line: int) -> None:
    """Render a [`Location`][gensync.location.Location] with the configured base URL."""
    ctx: click.Context = click.get_current_context()
    config: Config = get_config(ctx)
    try:
        rendered: str = Location(Path(path), line).render(
            config.root, base_url=config.source_url
        )
    except ValueError as exc:
        raise GensyncUsageError(str(exc)) from exc
    get_console(ctx).print(rendered)
