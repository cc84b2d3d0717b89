# topmark:header:start
#
#   project      : GenSync
#   file         : __init__.py
#   file_relpath : src/gensync/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync package.

GenSync extracts tagged ``//`` comment blocks from source files and keeps
generated artifacts in sync on disk. Files are only rewritten when their
content changes, and an ``ensure`` mode turns stale artifacts into failures
for CI checks.
"""

from __future__ import annotations

from gensync.errors import ConfigError, FormatterError, GensyncError, StaleFileError
from gensync.extract import (
    CommentBlock,
    TaggedBlock,
    extract_comment_blocks,
    extract_tagged_blocks,
    scan_comment_blocks,
)
from gensync.formatter import ExternalFormatter, IdentityFormatter, reformat
from gensync.location import Location
from gensync.sync import Mode, UpdateResult, update

__all__: list[str] = [
    "CommentBlock",
    "ConfigError",
    "ExternalFormatter",
    "FormatterError",
    "GensyncError",
    "IdentityFormatter",
    "Location",
    "Mode",
    "StaleFileError",
    "TaggedBlock",
    "UpdateResult",
    "extract_comment_blocks",
    "extract_tagged_blocks",
    "reformat",
    "scan_comment_blocks",
    "update",
]
