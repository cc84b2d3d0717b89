# topmark:header:start
#
#   project      : GenSync
#   file         : types.py
#   file_relpath : src/gensync/extract/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types produced by the comment scanner and the tagged block parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CommentBlock:
    """A maximal run of contiguous comment lines.

    Attributes:
        line (int): 1-based line following the preceding non-comment line
            (``1`` for a block opening the document).
        contents (tuple[str, ...]): Comment text with the ``// `` prefix
            stripped. Bare ``//`` continuation lines contribute ``""``.
    """

    line: int
    contents: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {"line": self.line, "contents": list(self.contents)}


@dataclass(frozen=True)
class TaggedBlock:
    """A comment block whose first line was a ``Tag: id`` marker.

    Attributes:
        id (str): Text after the tag separator, whitespace-trimmed.
        line (int): Start line of the originating block.
        contents (tuple[str, ...]): Remaining lines, marker line removed.
    """

    id: str
    line: int
    contents: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {"id": self.id, "line": self.line, "contents": list(self.contents)}
