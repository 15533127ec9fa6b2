"""Copy engine — mirror directory trees and catalog directory entries."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger


@dataclass
class DirectoryListing:
    """Immediate children of a directory, split by entry type."""

    files: list[str] = field(default_factory=list)
    dirs: list[str] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        """Files first, then directories."""
        return [*self.files, *self.dirs]


def _raise(error: OSError) -> None:
    raise error


def copy_tree(src: Path, dst: Path) -> int:
    """
    Recursively mirror ``src`` under ``dst`` and return the number of files copied.

    Directories are created as needed and not counted. The first failure
    propagates as ``OSError``; files already copied stay on disk.
    """
    count = 0
    dst.mkdir(parents=True, exist_ok=True)
    for base, dirs, files in os.walk(src, onerror=_raise):
        rel = Path(base).relative_to(src)
        target_dir = dst / rel
        for d in dirs:
            (target_dir / d).mkdir(parents=True, exist_ok=True)
        for f in files:
            shutil.copy2(Path(base) / f, target_dir / f)
            count += 1
    logger.debug(f"Copied {count} file(s): {src} -> {dst}")
    return count


def copy_file(src: Path, dst: Path) -> None:
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dst)


def list_entries(src: Path) -> DirectoryListing:
    """
    Single non-recursive read of ``src``; names sorted within each group.

    Only regular files and directories are listed. Broken links, sockets and
    other special entries are skipped.
    """
    listing = DirectoryListing()
    with os.scandir(src) as it:
        for entry in it:
            if entry.is_dir():
                listing.dirs.append(entry.name)
            elif entry.is_file():
                listing.files.append(entry.name)
    listing.files.sort()
    listing.dirs.sort()
    return listing


def write_listing(path: Path, names: Iterable[str]) -> None:
    """Write one name per line."""
    path.write_text("\n".join(names), encoding="utf-8", errors="surrogateescape")
