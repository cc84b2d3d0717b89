# topmark:header:start
#
#   project      : GenSync
#   file         : test_update.py
#   file_relpath : tests/sync/test_update.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `update` sync primitive.

Covers the no-op path (including line-ending tolerance), both modes on
missing and stale targets, and error propagation.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from tests.conftest import parametrize, read_bytes_text, write_bytes_text
from gensync.errors import StaleFileError
from gensync.sync import Mode, UpdateResult, update

if TYPE_CHECKING:
    from pathlib import Path

OLD_NS: int = 1_000_000_000_000_000_000


def test_overwrite_creates_missing_file(tmp_path: Path) -> None:
    """OVERWRITE on a nonexistent path succeeds and writes the exact bytes."""
    target: Path = tmp_path / "out.rs"

    result: UpdateResult = update(target, "fn a() {}\r\n", Mode.OVERWRITE)

    assert result.changed is True
    assert target.read_bytes() == b"fn a() {}\r\n"


def test_second_run_is_a_noop(tmp_path: Path) -> None:
    """Running twice with the same content writes once and keeps the mtime."""
    target: Path = tmp_path / "out.rs"
    first = update(target, "a\nb\n", Mode.OVERWRITE)
    os.utime(target, ns=(OLD_NS, OLD_NS))

    second = update(target, "a\nb\n", Mode.OVERWRITE)

    assert (first.changed, second.changed) == (True, False)
    assert second.diff == ""
    assert target.stat().st_mtime_ns == OLD_NS
    assert read_bytes_text(target) == "a\nb\n"


@parametrize(
    "on_disk, generated",
    [
        ("a\r\nb\r\n", "a\nb\n"),
        ("a\nb\n", "a\r\nb\r\n"),
        ("a\r\nb\n", "a\nb\r\n"),
    ],
)
@parametrize("mode", list(Mode))
def test_line_ending_differences_are_up_to_date(
    tmp_path: Path, on_disk: str, generated: str, mode: Mode
) -> None:
    """Files differing only in CRLF vs LF are left untouched in both modes."""
    target: Path = tmp_path / "out.rs"
    write_bytes_text(target, on_disk)

    result = update(target, generated, mode)

    assert result.changed is False
    assert read_bytes_text(target) == on_disk


def test_overwrite_rewrites_stale_file(tmp_path: Path) -> None:
    """A stale file is replaced and the diff describes the change."""
    target: Path = tmp_path / "out.rs"
    target.write_text("old\n", encoding="utf-8")

    result = update(target, "new\n", Mode.OVERWRITE)

    assert result.changed is True
    assert target.read_text(encoding="utf-8") == "new\n"
    assert "-old" in result.diff
    assert "+new" in result.diff


def test_ensure_on_missing_file_fails_but_writes(tmp_path: Path) -> None:
    """ENSURE reports staleness for a missing file and still leaves it correct."""
    (tmp_path / "gen").mkdir()
    target: Path = tmp_path / "gen" / "out.rs"

    with pytest.raises(StaleFileError) as excinfo:
        update(target, "fn a() {}\n", Mode.ENSURE, root=tmp_path)

    assert target.read_text(encoding="utf-8") == "fn a() {}\n"
    assert excinfo.value.path == target
    assert excinfo.value.relpath.as_posix() == "gen/out.rs"
    assert str(excinfo.value) == "`gen/out.rs` was not up-to-date, updating"

    # The corrective write makes the next verification pass.
    assert update(target, "fn a() {}\n", Mode.ENSURE, root=tmp_path).changed is False


def test_ensure_stale_file_carries_diff(tmp_path: Path) -> None:
    """The staleness error exposes the unified diff of the correction."""
    target: Path = tmp_path / "out.rs"
    target.write_text("old\n", encoding="utf-8")

    with pytest.raises(StaleFileError) as excinfo:
        update(target, "new\n", Mode.ENSURE, root=tmp_path)

    assert "--- a/out.rs" in excinfo.value.diff
    assert "+new" in excinfo.value.diff
    assert target.read_text(encoding="utf-8") == "new\n"


def test_ensure_path_outside_root_is_reported_as_given(tmp_path: Path) -> None:
    """When the path is not under the root, the message keeps the path as given."""
    root: Path = tmp_path / "project"
    root.mkdir()
    target: Path = tmp_path / "elsewhere.rs"

    with pytest.raises(StaleFileError) as excinfo:
        update(target, "x\n", Mode.ENSURE, root=root)

    assert excinfo.value.relpath == target


def test_ensure_without_root_uses_path(tmp_path: Path) -> None:
    """Without a root, the error names the path unchanged."""
    target: Path = tmp_path / "out.rs"

    with pytest.raises(StaleFileError) as excinfo:
        update(target, "x\n", Mode.ENSURE)

    assert excinfo.value.relpath == target


def test_undecodable_file_is_regenerated(tmp_path: Path) -> None:
    """Content that is not UTF-8 counts as different."""
    target: Path = tmp_path / "out.rs"
    target.write_bytes(b"\xff\xfe\x00garbage")

    result = update(target, "ok\n", Mode.OVERWRITE)

    assert result.changed is True
    assert target.read_text(encoding="utf-8") == "ok\n"


def test_read_errors_other_than_missing_propagate(tmp_path: Path) -> None:
    """A directory at the target path is a filesystem error, not staleness."""
    target: Path = tmp_path / "out.rs"
    target.mkdir()

    with pytest.raises(OSError):
        update(target, "x\n", Mode.ENSURE)


def test_write_errors_propagate(tmp_path: Path) -> None:
    """A missing parent directory surfaces as the underlying OSError."""
    target: Path = tmp_path / "missing" / "out.rs"

    with pytest.raises(FileNotFoundError):
        update(target, "x\n", Mode.OVERWRITE)


def test_ensure_through_symlinked_directory_is_root_relative(tmp_path: Path) -> None:
    """A target reached through a symlinked directory in the root keeps a relative name."""
    root: Path = tmp_path / "root"
    root.mkdir()
    (tmp_path / "outside").mkdir()
    try:
        (root / "gen").symlink_to(tmp_path / "outside", target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported here")

    with pytest.raises(StaleFileError) as excinfo:
        update(root / "gen" / "x.rs", "x\n", Mode.ENSURE, root=root)

    assert excinfo.value.relpath.as_posix() == "gen/x.rs"
    assert str(excinfo.value) == "`gen/x.rs` was not up-to-date, updating"
    assert (tmp_path / "outside" / "x.rs").read_text(encoding="utf-8") == "x\n"
