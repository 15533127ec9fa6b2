"""Size statistics for manifest reporting. Never raises."""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from totem.models.backup import SizedEntry


def dir_size(path: Path) -> int:
    """Recursive byte sum of all files under ``path``; 0 if absent or unreadable."""
    if not path.exists():
        return 0

    total = 0
    try:
        if path.is_file():
            return path.stat().st_size
        for base, _dirs, files in os.walk(path):
            for f in files:
                try:
                    total += os.path.getsize(os.path.join(base, f))
                except OSError:
                    continue
    except OSError as e:
        logger.debug(f"Size scan failed for {path}: {e}")
        return 0
    return total


def largest_entries(directory: Path, limit: int = 3) -> list[SizedEntry]:
    """The ``limit`` biggest immediate children of ``directory``, largest first."""
    if not directory.is_dir():
        return []

    items: list[SizedEntry] = []
    try:
        for child in directory.iterdir():
            if child.is_dir():
                size = dir_size(child)
            else:
                try:
                    size = child.stat().st_size
                except OSError:
                    size = 0
            items.append(SizedEntry(name=child.name, size=size))
    except OSError as e:
        logger.debug(f"Could not rank entries in {directory}: {e}")
        return []

    items.sort(key=lambda e: (-e.size, e.name))
    return items[:limit]
