"""Tests for tree copying and directory listing."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from totem.core.copy_engine import copy_tree, list_entries, write_listing


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    (src / "a" / "b" / "c").mkdir(parents=True)
    (src / "empty").mkdir()
    (src / "top.png").write_bytes(b"\x89PNG top")
    (src / "a" / "one.dat").write_bytes(b"one")
    (src / "a" / "b" / "two.dat").write_bytes(b"two")
    (src / "a" / "b" / "c" / "three.dat").write_bytes(b"three" * 100)
    return src


class TestCopyTree:
    def test_counts_files_at_any_depth(self, nested_tree: Path, tmp_path: Path) -> None:
        count = copy_tree(nested_tree, tmp_path / "dst")
        assert count == 4

    def test_mirrors_relative_paths(self, nested_tree: Path, tmp_path: Path) -> None:
        dst = tmp_path / "dst"
        copy_tree(nested_tree, dst)

        src_files = sorted(p.relative_to(nested_tree) for p in nested_tree.rglob("*") if p.is_file())
        dst_files = sorted(p.relative_to(dst) for p in dst.rglob("*") if p.is_file())
        assert src_files == dst_files
        assert (dst / "a" / "b" / "c" / "three.dat").read_bytes() == b"three" * 100

    def test_empty_directories_recreated(self, nested_tree: Path, tmp_path: Path) -> None:
        dst = tmp_path / "dst"
        copy_tree(nested_tree, dst)
        assert (dst / "empty").is_dir()

    def test_empty_source(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        assert copy_tree(src, tmp_path / "dst") == 0
        assert (tmp_path / "dst").is_dir()

    def test_missing_source_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            copy_tree(tmp_path / "missing", tmp_path / "dst")


class TestListEntries:
    def test_separates_files_and_dirs(self, tmp_path: Path) -> None:
        (tmp_path / "sodium.jar").write_text("x")
        (tmp_path / "lithium.jar").write_text("x")
        (tmp_path / "config-pack").mkdir()
        (tmp_path / "config-pack" / "nested.jar").write_text("x")

        listing = list_entries(tmp_path)
        assert listing.files == ["lithium.jar", "sodium.jar"]
        assert listing.dirs == ["config-pack"]
        assert listing.names == ["lithium.jar", "sodium.jar", "config-pack"]

    def test_not_recursive(self, tmp_path: Path) -> None:
        (tmp_path / "outer").mkdir()
        (tmp_path / "outer" / "inner.zip").write_text("x")
        assert "inner.zip" not in list_entries(tmp_path).names

    def test_empty_directory(self, tmp_path: Path) -> None:
        listing = list_entries(tmp_path)
        assert listing.files == []
        assert listing.dirs == []

    def test_broken_link_not_listed(self, tmp_path: Path) -> None:
        (tmp_path / "sodium.jar").write_text("x")
        try:
            os.symlink(tmp_path / "missing.jar", tmp_path / "dangling.jar")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")

        listing = list_entries(tmp_path)
        assert listing.names == ["sodium.jar"]


def test_write_listing_one_name_per_line(tmp_path: Path) -> None:
    path = tmp_path / "mods.txt"
    write_listing(path, ["a.jar", "b.jar"])
    assert path.read_text(encoding="utf-8").splitlines() == ["a.jar", "b.jar"]


def test_write_listing_keeps_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "mods.txt"
    write_listing(path, ["ok.jar", "bad\udcffname.jar"])
    assert path.read_bytes() == b"ok.jar\nbad\xffname.jar"
