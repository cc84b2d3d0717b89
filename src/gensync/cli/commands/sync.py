# topmark:header:start
#
#   project      : GenSync
#   file         : sync.py
#   file_relpath : src/gensync/cli/commands/sync.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync `sync` command.

Writes generated content to TARGET only when it differs from the file on disk.
In ``--mode ensure`` a stale TARGET is still rewritten, but the command exits
with ``ExitCode.STALE`` so CI fails.

Examples:
  Regenerate a file from a generator's output:

    $ my-generator | gensync sync src/generated.rs

  Verify in CI, through the configured formatter:

    $ my-generator | gensync sync --mode ensure --reformat --diff src/generated.rs
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from gensync.cli.cmd_common import get_config, get_console, read_text_input
from gensync.cli.errors import GensyncFormatterError, GensyncIOError, GensyncStaleError
from gensync.cli.options import CONTEXT_SETTINGS, EnumChoiceParam
from gensync.config.logging import get_logger
from gensync.errors import FormatterError, StaleFileError
from gensync.formatter import ExternalFormatter, ensure_formatter, reformat
from gensync.sync import Mode, update
from gensync.utils.diff import render_patch
from gensync.utils.file import display_path

if TYPE_CHECKING:
    from gensync.cli.console import ClickConsole
    from gensync.config.model import Config
    from gensync.sync import UpdateResult

logger = get_logger(__name__)


@click.command(
    name="sync",
    help="Write generated content to TARGET if it changed.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("target", type=str)
@click.option(
    "--input",
    "-i",
    "input_path",
    default="-",
    show_default=True,
    help="File holding the generated content ('-' for STDIN).",
)
@click.option(
    "--mode",
    type=EnumChoiceParam(Mode),
    default=Mode.OVERWRITE.value,
    show_default=True,
    help="'overwrite' regenerates silently; 'ensure' also fails when TARGET was stale.",
)
@click.option(
    "--reformat",
    "do_reformat",
    is_flag=True,
    help="Pipe the content through the configured formatter and add the preamble.",
)
@click.option("--diff", "show_diff", is_flag=True, help="Show a unified diff of the changes.")
def sync_command(
    *,
    target: str,
    input_path: str,
    mode: Mode,
    do_reformat: bool,
    show_diff: bool,
) -> None:
    """Synchronize TARGET with generated content.

    Args:
        target (str): File to write.
        input_path (str): Source of the generated content (``-`` for STDIN).
        mode (Mode): ``overwrite`` or ``ensure``.
        do_reformat (bool): Run the Format Pipe before syncing.
        show_diff (bool): Print a colorized diff when TARGET changes.
    """
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    config: Config = get_config(ctx)

    contents: str = read_text_input(input_path)
    if do_reformat:
        try:
            ensure_formatter(config.formatter, root=config.root)
            contents = reformat(
                contents, ExternalFormatter.from_config(config), generator=config.generator
            )
        except FormatterError as exc:
            raise GensyncFormatterError(str(exc)) from exc

    path = Path(target)
    try:
        result: UpdateResult = update(path, contents, mode, root=config.root)
    except StaleFileError as exc:
        if show_diff and exc.diff:
            console.print(render_patch(exc.diff), nl=False)
        raise GensyncStaleError(str(exc)) from exc
    except OSError as exc:
        raise GensyncIOError(f"Cannot update {path}: {exc}") from exc

    shown: Path = display_path(path, config.root)
    if not result.changed:
        console.print(f"{shown.as_posix()} is up to date")
        return
    if show_diff and result.diff:
        console.print(render_patch(result.diff), nl=False)
    console.print(console.styled(f"updated {shown.as_posix()}", fg="green"))
