# topmark:header:start
#
#   project      : GenSync
#   file         : version.py
#   file_relpath : src/gensync/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync `version` command.

Prints the GenSync version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from gensync.cli.cmd_common import get_console
from gensync.constants import GENSYNC_VERSION


@click.command(
    name="version",
    help="Show the current version of GenSync.",
)
def version_command() -> None:
    """Show the current version of GenSync."""
    console = get_console(click.get_current_context())
    console.print(console.styled(GENSYNC_VERSION, bold=True))
