# topmark:header:start
#
#   project      : GenSync
#   file         : sync.py
#   file_relpath : src/gensync/sync.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Idempotent synchronization of generated files.

[`update`][gensync.sync.update] compares freshly generated content with what
is on disk and writes only when they differ, so modification times and VCS
state stay untouched for up-to-date artifacts. Line endings are normalized
(``\\r\\n`` to ``\\n``) before comparing.

Modes:
    - ``Mode.OVERWRITE``: regenerate silently.
    - ``Mode.ENSURE``: regenerate, then raise
      [`StaleFileError`][gensync.errors.StaleFileError] if a write was needed.
      Used by CI to enforce that checked-in generated files are current.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from gensync.config.logging import get_logger
from gensync.errors import StaleFileError
from gensync.utils.diff import unified_diff
from gensync.utils.file import display_path

if TYPE_CHECKING:
    from pathlib import Path

    from gensync.config.logging import GensyncLogger

logger: GensyncLogger = get_logger(__name__)


class Mode(Enum):
    """How `update` treats a stale target.

    Attributes:
        OVERWRITE: Write the new content and succeed.
        ENSURE: Write the new content, then fail with `StaleFileError`.
    """

    OVERWRITE = "overwrite"
    ENSURE = "ensure"


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of a successful `update` call.

    Attributes:
        path (Path): The target path.
        changed (bool): Whether the file was (re)written.
        diff (str): Unified diff from the previous content (empty when unchanged).
    """

    path: Path
    changed: bool
    diff: str = ""


def normalize_newlines(text: str) -> str:
    """Collapse CRLF line endings to LF."""
    return text.replace("\r\n", "\n")


def read_existing(path: Path) -> str | None:
    """Return the current text at ``path`` or ``None`` when there is nothing usable.

    A missing file or undecodable content yields ``None``; any other
    ``OSError`` propagates.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        logger.debug("%s does not exist yet", path)
        return None
    except UnicodeDecodeError as exc:
        logger.warning("Cannot decode %s as UTF-8, regenerating: %s", path, exc)
        return None


def update(path: Path, contents: str, mode: Mode, *, root: Path | None = None) -> UpdateResult:
    """Bring the file at ``path`` in line with ``contents``.

    Args:
        path (Path): Target file. Its parent directory must exist.
        contents (str): Freshly generated text, written verbatim.
        mode (Mode): ``OVERWRITE`` or ``ENSURE``.
        root (Path | None): Project root used to render ``path`` in messages.

    Returns:
        UpdateResult: ``changed=False`` when the file was already up to date.

    Raises:
        StaleFileError: In ``ENSURE`` mode when the file had to be rewritten.
        OSError: When reading (other than a missing file) or writing fails.
    """
    existing: str | None = read_existing(path)
    if existing is not None and normalize_newlines(existing) == normalize_newlines(contents):
        logger.debug("%s is up to date", path)
        return UpdateResult(path=path, changed=False)

    shown: Path = display_path(path, root)
    logger.info("updating %s", shown)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(contents)

    diff: str = unified_diff(
        normalize_newlines(existing or ""), normalize_newlines(contents), path=shown.as_posix()
    )
    logger.trace("diff for %s:\n%s", shown, diff)

    if mode is Mode.ENSURE:
        raise StaleFileError(path, shown, diff=diff)
    return UpdateResult(path=path, changed=True, diff=diff)
