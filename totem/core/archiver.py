"""Archiver — pack a finished backup folder into a single ZIP."""

from __future__ import annotations

import os
import zipfile
from pathlib import Path

from loguru import logger


def _entry_name(path: Path, source_dir: Path) -> str:
    """Relative POSIX entry name; undecodable filename bytes become U+FFFD."""
    rel = path.relative_to(source_dir).as_posix()
    return os.fsencode(rel).decode("utf-8", errors="replace")


def create_archive(source_dir: Path, dest_zip: Path) -> int:
    """
    Write every file under ``source_dir`` into ``dest_zip`` at maximum compression.

    Entry names are paths relative to ``source_dir``; directories get no
    entries of their own. Returns the number of files written. On failure the
    partial archive is removed and the error propagates.
    """
    count = 0
    try:
        with zipfile.ZipFile(dest_zip, "w", zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
            for base, dirs, files in os.walk(source_dir):
                dirs.sort()
                for f in sorted(files):
                    path = Path(base) / f
                    zf.write(path, _entry_name(path, source_dir))
                    count += 1
    except (OSError, ValueError):
        dest_zip.unlink(missing_ok=True)
        raise

    logger.debug(f"Archived {count} file(s) into {dest_zip.name}")
    return count
