"""Minecraft installation models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class InstallationLayout:
    """
    Fixed set of locations inside a Minecraft installation.

    Every location is derived from ``root``; none can be set on its own.
    Building a layout never touches the filesystem.
    """

    root: Path

    @property
    def screenshots(self) -> Path:
        return self.root / "screenshots"

    @property
    def mods(self) -> Path:
        return self.root / "mods"

    @property
    def shaderpacks(self) -> Path:
        return self.root / "shaderpacks"

    @property
    def resourcepacks(self) -> Path:
        return self.root / "resourcepacks"

    @property
    def options(self) -> Path:
        return self.root / "options.txt"

    @property
    def saves(self) -> Path:
        return self.root / "saves"

    @property
    def xaero(self) -> Path:
        return self.root / "xaero"

    @property
    def distant_horizons(self) -> Path:
        return self.root / "distant_horizons_server_data"


@dataclass
class InstallationMetadata:
    """Best-effort version/loader info. Never authoritative."""

    version: str = UNKNOWN
    loader: str = UNKNOWN
    loader_version: str = UNKNOWN

    @property
    def loader_display(self) -> str:
        """Loader name, with its version in parentheses when known."""
        if self.loader_version != UNKNOWN:
            return f"{self.loader} ({self.loader_version})"
        return self.loader
