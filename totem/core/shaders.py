"""Shader splitter — separate shader packs from their config files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from totem.core.copy_engine import copy_file, list_entries

CONFIG_EXTENSION = ".txt"
CONFIG_DIR_NAME = "shader_configs"


@dataclass
class ShaderSplit:
    """Shader packs to catalog and the number of config files copied."""

    packs: list[str] = field(default_factory=list)
    configs_copied: int = 0


def is_shader_config(name: str) -> bool:
    return name.endswith(CONFIG_EXTENSION)


def split_shaders(shader_dir: Path, backup_dir: Path) -> ShaderSplit:
    """
    Partition a shaderpacks folder.

    Immediate files ending in ``.txt`` are config files and are copied into
    ``<backup_dir>/shader_configs``. Every other file and every subdirectory
    is a shader pack and is only cataloged by name.
    """
    listing = list_entries(shader_dir)
    config_dir = backup_dir / CONFIG_DIR_NAME
    config_dir.mkdir(parents=True, exist_ok=True)

    split = ShaderSplit()
    for name in listing.files:
        if is_shader_config(name):
            copy_file(shader_dir / name, config_dir / name)
            split.configs_copied += 1
        else:
            split.packs.append(name)
    split.packs.extend(listing.dirs)

    logger.debug(f"Shaderpacks: {len(split.packs)} pack(s), {split.configs_copied} config(s)")
    return split
