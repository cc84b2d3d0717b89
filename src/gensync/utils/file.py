# topmark:header:start
#
#   file         : file.py
#   file_relpath : src/gensync/utils/file.py
#   project      : GenSync
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path helpers."""

from __future__ import annotations

import os
from pathlib import Path


def _lexical_absolute(path: Path) -> Path:
    """Return ``path`` made absolute with ``..`` collapsed, symlinks untouched."""
    return Path(os.path.normpath(path.absolute()))


def relative_to_root(file_path: Path, root_path: Path) -> Path | None:
    """Return ``file_path`` relative to ``root_path``, or ``None`` if outside.

    The paths are first compared as written (made absolute, ``..`` collapsed),
    so a file reached through a symlinked directory inside the root stays
    inside it. Only when that fails are both paths resolved, which covers a
    root given through a symlink.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path): The root path to compute the relative path from.

    Returns:
        Path | None: The relative path, or ``None`` when ``file_path`` is not
        under ``root_path``.
    """
    candidates: tuple[tuple[Path, Path], ...] = (
        (_lexical_absolute(file_path), _lexical_absolute(root_path)),
        (file_path.resolve(), root_path.resolve()),
    )
    for path, root in candidates:
        try:
            return path.relative_to(root)
        except ValueError:
            continue
    return None


def display_path(file_path: Path, root_path: Path | None) -> Path:
    """Return ``file_path`` relative to ``root_path`` when possible, else unchanged."""
    if root_path is None:
        return file_path
    rel: Path | None = relative_to_root(file_path, root_path)
    return rel if rel is not None else file_path
