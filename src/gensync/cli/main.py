# topmark:header:start
#
#   project      : GenSync
#   file         : main.py
#   file_relpath : src/gensync/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync Click group.

Group-level options (project root, verbosity, color) are resolved once and
placed into ``ctx.obj``; subcommands read them through
[`gensync.cli.cmd_common`][]. The configuration itself is loaded lazily so
that commands which do not need it keep working with a broken config file.
"""

from __future__ import annotations

from pathlib import Path

import click

from gensync.cli.commands.blocks import blocks_command
from gensync.cli.commands.formatter import check_formatter_command
from gensync.cli.commands.locate import locate_command
from gensync.cli.commands.sync import sync_command
from gensync.cli.commands.version import version_command
from gensync.cli.console import ClickConsole
from gensync.cli.options import CONTEXT_SETTINGS, common_verbose_options, resolve_verbosity
from gensync.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    root: Path | None,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (root, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        root (Path | None): Explicit project root (defaults to the CWD).
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    level: int = resolve_verbosity(verbose, quiet)
    # GENSYNC_LOG_LEVEL wins over -v/-q so CI can force TRACE without editing commands.
    env_level: int | None = resolve_env_log_level()
    if env_level is not None:
        level = env_level
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.obj["root"] = (root or Path.cwd()).resolve()
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)
    logger.debug("Project root: %s", ctx.obj["root"])


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Extract tagged comment blocks and keep generated files in sync.",
)
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (config lookup and relative paths). Defaults to the CWD.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    root: Path | None,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the GenSync CLI."""
    init_common_state(ctx, root=root, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(blocks_command)

cli.add_command(sync_command)

cli.add_command(locate_command)

cli.add_command(check_formatter_command)

if __name__ == "__main__":
    cli()
