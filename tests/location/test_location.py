# topmark:header:start
#
#   project      : GenSync
#   file         : test_location.py
#   file_relpath : tests/location/test_location.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Location.render`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gensync.location import Location

if TYPE_CHECKING:
    from pathlib import Path


def test_render_relative_descriptor(tmp_path: Path) -> None:
    """The descriptor combines root-relative path, line and base name."""
    loc = Location(tmp_path / "crates" / "ide" / "hover.rs", 42)

    assert loc.render(tmp_path) == "crates/ide/hover.rs#L42[hover.rs]"


def test_render_with_base_url(tmp_path: Path) -> None:
    """A base URL is joined with a single slash."""
    loc = Location(tmp_path / "src" / "lib.rs", 1)

    rendered: str = loc.render(tmp_path, base_url="https://example.com/acme/blob/main/")

    assert rendered == "https://example.com/acme/blob/main/src/lib.rs#L1[lib.rs]"


def test_render_resolves_dot_segments(tmp_path: Path) -> None:
    """``..`` segments are resolved before relativizing."""
    loc = Location(tmp_path / "a" / ".." / "b.rs", 3)

    assert loc.render(tmp_path) == "b.rs#L3[b.rs]"


def test_render_outside_root_is_rejected(tmp_path: Path) -> None:
    """Rendering a file outside the root is a precondition violation."""
    root: Path = tmp_path / "project"
    root.mkdir()
    loc = Location(tmp_path / "other" / "x.rs", 1)

    with pytest.raises(ValueError, match="not inside the project root"):
        loc.render(root)


def test_render_through_symlinked_directory(tmp_path: Path) -> None:
    """A file under a symlinked directory inside the root is rendered via the link."""
    root: Path = tmp_path / "root"
    root.mkdir()
    (tmp_path / "outside").mkdir()
    try:
        (root / "gen").symlink_to(tmp_path / "outside", target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported here")

    loc = Location(root / "gen" / "x.rs", 3)

    assert loc.render(root) == "gen/x.rs#L3[x.rs]"
