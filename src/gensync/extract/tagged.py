# topmark:header:start
#
#   project      : GenSync
#   file         : tagged.py
#   file_relpath : src/gensync/extract/tagged.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tagged and untagged comment block extraction.

A tagged block starts with a marker line ``<Tag>: <id>``::

    // Feature: Go to Definition
    //
    // Navigates to the definition of an identifier.
    fn goto_definition() {}

``extract_tagged_blocks("Feature", text)`` yields one
[`TaggedBlock`][gensync.extract.types.TaggedBlock] with id
``"Go to Definition"``. Blank ``//`` lines are allowed inside tagged blocks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gensync.config.logging import get_logger
from gensync.constants import TAG_SEPARATOR
from gensync.extract.scanner import scan_comment_blocks
from gensync.extract.types import TaggedBlock

if TYPE_CHECKING:
    from gensync.config.logging import GensyncLogger
    from gensync.extract.types import CommentBlock

logger: GensyncLogger = get_logger(__name__)


def extract_comment_blocks(text: str) -> list[list[str]]:
    """Return the contents of every comment block, without positions.

    Blank ``//`` lines terminate blocks in this variant.
    """
    return [list(block.contents) for block in scan_comment_blocks(text)]


def extract_tagged_blocks(tag: str, text: str) -> list[TaggedBlock]:
    """Return every block of ``text`` whose first line starts with ``"<tag>:"``.

    Args:
        tag (str): Tag name; must start with an uppercase character.
        text (str): The document to scan.

    Returns:
        list[TaggedBlock]: Matching blocks in source order. Duplicate ids are
        kept; de-duplication is up to the caller.

    Raises:
        ValueError: If ``tag`` does not start with an uppercase character.
    """
    if not tag[:1].isupper():
        raise ValueError(f"Tag must start with an uppercase character: {tag!r}")

    marker: str = f"{tag}{TAG_SEPARATOR}"
    result: list[TaggedBlock] = []

    blocks: list[CommentBlock] = scan_comment_blocks(text, allow_empty_lines=True)
    for block in blocks:
        first, rest = block.contents[0], block.contents[1:]
        if not first.startswith(marker):
            continue
        result.append(
            TaggedBlock(id=first[len(marker) :].strip(), line=block.line, contents=rest)
        )

    logger.debug("Found %d '%s' block(s) out of %d", len(result), tag, len(blocks))
    return result
