# topmark:header:start
#
#   project      : GenSync
#   file         : __init__.py
#   file_relpath : src/gensync/extract/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment block extraction.

- [`scanner`][gensync.extract.scanner] groups contiguous ``// `` comment lines
  into blocks, recording where each block starts.
- [`tagged`][gensync.extract.tagged] keeps the blocks whose first line carries
  a ``Tag:`` marker and exposes a position-free variant for untagged blocks.
"""

from __future__ import annotations

from gensync.extract.scanner import scan_comment_blocks
from gensync.extract.tagged import extract_comment_blocks, extract_tagged_blocks
from gensync.extract.types import CommentBlock, TaggedBlock

__all__: list[str] = [
    "CommentBlock",
    "TaggedBlock",
    "extract_comment_blocks",
    "extract_tagged_blocks",
    "scan_comment_blocks",
]
