"""Installation inspector — best-effort Minecraft version and mod loader detection.

Three independent metadata sources are consulted in a fixed order:

ModFilenameSource        → loader name from mod jar names
InstanceConfigSource     → game version from ``instance.cfg`` (MultiMC/Prism)
ComponentManifestSource  → game version + loader from ``mmc-pack.json``

Each later source overrides what the earlier ones found. A source that finds
nothing returns ``None``; no source ever raises past the inspector.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from totem.models.installation import UNKNOWN, InstallationMetadata

# Checked per filename in this order
LOADER_SIGNATURES = (
    ("fabric", "Fabric"),
    ("forge", "Forge"),
    ("quilt", "Quilt"),
)

MINECRAFT_UID = "net.minecraft"
LOADER_UIDS = {
    "net.fabricmc.fabric-loader": "Fabric",
    "net.minecraftforge": "Forge",
    "org.quiltmc.quilt-loader": "Quilt",
    "net.neoforged": "NeoForge",
}

INSTANCE_CONFIG_NAME = "instance.cfg"
COMPONENT_MANIFEST_NAME = "mmc-pack.json"
INTENDED_VERSION_KEY = "IntendedVersion"


@dataclass(frozen=True)
class MetadataHint:
    """Partial metadata from one source. ``None`` means the source had no signal."""

    version: str | None = None
    loader: str | None = None
    loader_version: str | None = None


class MetadataSource(ABC):
    """Abstract base for a single metadata source."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def _read(self, root: Path) -> MetadataHint | None: ...

    def read(self, root: Path) -> MetadataHint | None:
        """Read this source, turning any parse or I/O failure into ``None``."""
        try:
            return self._read(root)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.debug(f"Metadata source '{self.name}' ignored: {e}")
            return None


class ModFilenameSource(MetadataSource):
    @property
    def name(self) -> str:
        return "mod-filenames"

    def _read(self, root: Path) -> MetadataHint | None:
        mods = root / "mods"
        if not mods.is_dir():
            return None
        for entry in sorted(p.name for p in mods.iterdir()):
            lowered = entry.lower()
            for needle, loader in LOADER_SIGNATURES:
                if needle in lowered:
                    return MetadataHint(loader=loader)
        return None


class InstanceConfigSource(MetadataSource):
    @property
    def name(self) -> str:
        return "instance-config"

    def _read(self, root: Path) -> MetadataHint | None:
        cfg = root.parent / INSTANCE_CONFIG_NAME
        if not cfg.is_file():
            return None
        for line in cfg.read_text(encoding="utf-8").splitlines():
            key, sep, value = line.partition("=")
            if sep and key.strip() == INTENDED_VERSION_KEY and value.strip():
                return MetadataHint(version=value.strip())
        return None


class ComponentManifestSource(MetadataSource):
    @property
    def name(self) -> str:
        return "component-manifest"

    def _read(self, root: Path) -> MetadataHint | None:
        pack = root.parent / COMPONENT_MANIFEST_NAME
        if not pack.is_file():
            return None
        with open(pack, encoding="utf-8") as f:
            data = json.load(f)

        version = loader = loader_version = None
        for component in data.get("components") or []:
            uid = component.get("uid", "")
            if uid == MINECRAFT_UID and component.get("version"):
                version = component["version"]
            elif uid in LOADER_UIDS:
                loader = LOADER_UIDS[uid]
                loader_version = component.get("version") or UNKNOWN

        if version is None and loader is None:
            return None
        return MetadataHint(version=version, loader=loader, loader_version=loader_version)


DEFAULT_SOURCES: tuple[MetadataSource, ...] = (
    ModFilenameSource(),
    InstanceConfigSource(),
    ComponentManifestSource(),
)


def inspect_installation(
    root: Path, sources: tuple[MetadataSource, ...] = DEFAULT_SOURCES
) -> InstallationMetadata:
    """Combine all sources into one metadata record, later sources winning."""
    meta = InstallationMetadata()
    for source in sources:
        hint = source.read(root)
        if hint is None:
            continue
        if hint.version:
            meta.version = hint.version
        if hint.loader:
            meta.loader = hint.loader
            meta.loader_version = hint.loader_version or UNKNOWN

    logger.debug(f"Detected Minecraft {meta.version}, loader {meta.loader_display}")
    return meta
