# topmark:header:start
#
#   project      : GenSync
#   file         : blocks.py
#   file_relpath : src/gensync/cli/commands/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync `blocks` command.

Lists the ``//`` comment blocks of a source file. With ``--tag``, only blocks
whose first line is ``<TAG>: <id>`` are listed, with their ids and start lines;
otherwise every block's contents is printed.

Examples:
  List feature documentation blocks:

    $ gensync blocks --tag Feature crates/ide/src/hover.rs

  Dump all comment blocks as JSON:

    $ gensync blocks --format json src/lib.rs
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from gensync.cli.cmd_common import OutputFormat, get_console, read_text_input
from gensync.cli.errors import GensyncUsageError
from gensync.cli.options import CONTEXT_SETTINGS, EnumChoiceParam
from gensync.extract import extract_comment_blocks, extract_tagged_blocks

if TYPE_CHECKING:
    from gensync.cli.console import ClickConsole
    from gensync.extract import TaggedBlock


@click.command(
    name="blocks",
    help="List comment blocks of PATH (use '-' for STDIN).",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("path", type=str)
@click.option(
    "--tag",
    default=None,
    help="Only list blocks starting with '<TAG>: <id>' (TAG must start uppercase).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def blocks_command(
    *,
    path: str,
    tag: str | None,
    output_format: OutputFormat | None,
) -> None:
    """List tagged or untagged comment blocks of a single file.

    Args:
        path (str): Source file, or ``-`` to read from STDIN.
        tag (str | None): Tag name to filter on.
        output_format (OutputFormat | None): ``text`` (default) or ``json``.
    """
    console: ClickConsole = get_console(click.get_current_context())
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if tag is not None and not tag[:1].isupper():
        raise GensyncUsageError(f"--tag must start with an uppercase character: {tag!r}")

    text: str = read_text_input(path)

    if tag is None:
        untagged: list[list[str]] = extract_comment_blocks(text)
        if fmt == OutputFormat.JSON:
            console.print(json.dumps(untagged, indent=2))
            return
        console.print("\n\n".join("\n".join(block) for block in untagged))
        return

    tagged: list[TaggedBlock] = extract_tagged_blocks(tag, text)
    if fmt == OutputFormat.JSON:
        console.print(json.dumps([b.to_dict() for b in tagged], indent=2))
        return
    for block in tagged:
        console.print(console.styled(f"{path}:{block.line}: {block.id}", bold=True))
        for line in block.contents:
            console.print(f"    {line}".rstrip())
