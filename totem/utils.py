"""Shared utility functions."""

from __future__ import annotations

import os
import platform
import subprocess
from datetime import datetime
from pathlib import Path

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")

_OS_NAMES = {
    "Windows": "Windows",
    "Darwin": "macOS",
    "Linux": "Linux",
}


def format_bytes(size_bytes: int) -> str:
    """Format byte count to human-readable string (1024 ladder, one decimal)."""
    if size_bytes == 0:
        return "0 B"
    value = float(size_bytes)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.1f} {_SIZE_UNITS[unit]}"


def format_duration(seconds: float) -> str:
    """Format seconds as ``N.N seconds`` below a minute, else ``Nm Ns``."""
    if seconds < 60:
        return f"{seconds:.1f} seconds"
    minutes = int(seconds // 60)
    secs = int(seconds) % 60
    return f"{minutes}m {secs}s"


def generate_timestamp(now: datetime | None = None) -> str:
    """Minute-resolution timestamp used in backup folder names."""
    return (now or datetime.now()).strftime("%Y-%m-%d_%H-%M")


def get_os_info() -> str:
    system = platform.system()
    name = _OS_NAMES.get(system, system or "unknown")
    return f"{name} ({platform.machine() or 'unknown'})"


def open_folder(path: str | Path) -> None:
    """Open a folder in the system file manager (the parent, for a file)."""
    path = Path(path)
    target = path if path.is_dir() else path.parent

    system = platform.system()
    if system == "Windows":
        os.startfile(str(target))  # noqa: S606
    elif system == "Darwin":
        subprocess.Popen(["open", str(target)])  # noqa: S603, S607
    else:
        subprocess.Popen(["xdg-open", str(target)])  # noqa: S603, S607
