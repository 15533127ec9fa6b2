"""Tests for size statistics."""

from __future__ import annotations

from pathlib import Path

from totem.core.stats import dir_size, largest_entries
from totem.models.backup import SizedEntry


class TestDirSize:
    def test_recursive_sum(self, tmp_path: Path) -> None:
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "x.bin").write_bytes(b"x" * 10)
        (tmp_path / "a" / "y.bin").write_bytes(b"y" * 20)
        (tmp_path / "a" / "b" / "z.bin").write_bytes(b"z" * 30)
        assert dir_size(tmp_path) == 60

    def test_missing_path_is_zero(self, tmp_path: Path) -> None:
        assert dir_size(tmp_path / "missing") == 0

    def test_empty_dir_is_zero(self, tmp_path: Path) -> None:
        assert dir_size(tmp_path) == 0

    def test_single_file(self, tmp_path: Path) -> None:
        f = tmp_path / "options.txt"
        f.write_bytes(b"12345")
        assert dir_size(f) == 5


class TestLargestEntries:
    def test_ranks_files_and_dirs(self, tmp_path: Path) -> None:
        (tmp_path / "small.jar").write_bytes(b"s" * 5)
        (tmp_path / "big.jar").write_bytes(b"b" * 500)
        world = tmp_path / "World"
        (world / "region").mkdir(parents=True)
        (world / "level.dat").write_bytes(b"l" * 100)
        (world / "region" / "r.0.0.mca").write_bytes(b"r" * 200)
        (tmp_path / "tiny.jar").write_bytes(b"t")

        result = largest_entries(tmp_path, 3)
        assert result == [
            SizedEntry("big.jar", 500),
            SizedEntry("World", 300),
            SizedEntry("small.jar", 5),
        ]

    def test_fewer_entries_than_limit(self, tmp_path: Path) -> None:
        (tmp_path / "only.jar").write_bytes(b"o")
        assert largest_entries(tmp_path, 3) == [SizedEntry("only.jar", 1)]

    def test_missing_dir(self, tmp_path: Path) -> None:
        assert largest_entries(tmp_path / "missing", 3) == []
