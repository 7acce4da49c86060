"""
Tests for the Gio directory scanner (skipped without PyGObject).
"""

import pytest

pytest.importorskip("gi")

from core.errors import DirectoryListError
from core.gio_bridge.scanner import scan_directory


def test_scan_lists_directories_first(tmp_path):
    (tmp_path / "b.txt").write_text("hello")
    (tmp_path / "A.txt").write_text("x")
    (tmp_path / "zdir").mkdir()
    (tmp_path / ".hidden").write_text("")

    entries = scan_directory(str(tmp_path))
    assert [e.name for e in entries] == ["zdir", ".hidden", "A.txt", "b.txt"]
    assert entries[0].is_directory and entries[0].size is None
    assert entries[3].size == 5
    assert entries[3].path == str(tmp_path / "b.txt")


def test_scan_missing_directory_raises(tmp_path):
    with pytest.raises(DirectoryListError) as info:
        scan_directory(str(tmp_path / "missing"))
    assert info.value.path == str(tmp_path / "missing")
