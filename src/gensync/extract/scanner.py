# topmark:header:start
#
#   project      : GenSync
#   file         : scanner.py
#   file_relpath : src/gensync/extract/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scanner for contiguous ``//`` line-comment blocks.

The scanner walks a document line by line. Leading whitespace is stripped
before a line is classified:

- ``// text``: a comment line; ``text`` is appended to the current block.
- ``//`` (bare marker): an empty continuation entry, but only when
  ``allow_empty_lines`` is set. Otherwise it ends the block like any other line.
- anything else ends the current block. The next block's start line is the
  line after the terminator.

Only single-line prefixed comments are recognized; block comment delimiters
and nesting are not interpreted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gensync.config.logging import get_logger
from gensync.constants import COMMENT_MARKER, COMMENT_PREFIX
from gensync.extract.types import CommentBlock

if TYPE_CHECKING:
    from gensync.config.logging import GensyncLogger

logger: GensyncLogger = get_logger(__name__)


def _split_lines(text: str) -> list[str]:
    r"""Split on ``\n`` only; a trailing ``\r`` is dropped from each line.

    Unlike `str.splitlines`, form feeds and other Unicode separators do not
    start a new line, so line numbers match what editors show.
    """
    lines: list[str] = text.split("\n")
    if lines[-1] == "":
        # Text ends with a newline (or is empty): no extra line.
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def scan_comment_blocks(text: str, *, allow_empty_lines: bool = False) -> list[CommentBlock]:
    """Split ``text`` into comment blocks, in source order.

    Args:
        text (str): The full document.
        allow_empty_lines (bool): Treat a bare ``//`` line as a blank line
            inside the block instead of a terminator.

    Returns:
        list[CommentBlock]: Non-empty blocks with their 1-based start lines.
    """
    blocks: list[CommentBlock] = []
    start: int = 1
    contents: list[str] = []

    for line_num, raw in enumerate(_split_lines(text), start=1):
        line: str = raw.lstrip()

        if allow_empty_lines and line == COMMENT_MARKER:
            contents.append("")
            continue

        if line.startswith(COMMENT_PREFIX):
            contents.append(line[len(COMMENT_PREFIX) :])
            continue

        if contents:
            blocks.append(CommentBlock(line=start, contents=tuple(contents)))
            contents = []
        start = line_num + 1

    if contents:
        blocks.append(CommentBlock(line=start, contents=tuple(contents)))

    logger.trace(
        "Scanned %d comment block(s) (allow_empty_lines=%s)", len(blocks), allow_empty_lines
    )
    return blocks
