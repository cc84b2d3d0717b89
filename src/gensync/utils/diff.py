# topmark:header:start
#
#   file         : diff.py
#   file_relpath : src/gensync/utils/diff.py
#   project      : GenSync
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs between on-disk and freshly generated content.

`unified_diff` builds the patch text; `render_patch` formats a colorized
preview for logging and CLI display.
"""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk


def unified_diff(old: str, new: str, *, path: str) -> str:
    """Return a unified diff from ``old`` to ``new`` (empty when equal).

    Args:
        old (str): Existing content (``""`` for a missing file).
        new (str): Generated content.
        path (str): Label used in the ``---``/``+++`` headers.

    Returns:
        str: The patch text, one line per diff line.
    """
    lines = difflib.unified_diff(
        old.splitlines(keepends=True),
        new.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
    )
    return "".join(line if line.endswith("\n") else f"{line}\n" for line in lines)


def render_patch(patch: Sequence[str] | str) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    # Map diff markers to colors and show control characters explicitly.
    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
