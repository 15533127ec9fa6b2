"""Manifest generator — the ``info.md`` report written into every backup."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from loguru import logger

from totem.core.stats import dir_size, largest_entries
from totem.models.backup import BackupSelection, RunStatistics, SizedEntry
from totem.models.installation import InstallationLayout, InstallationMetadata
from totem.utils import format_bytes, format_duration, get_os_info
from totem.version import VERSION

MANIFEST_NAME = "info.md"
LARGEST_LIMIT = 3

RESTORATION_GUIDE = """## 🔧 Restoration Guide

### 1. Screenshots
Copy the `screenshots/` folder back to your minecraft folder.

### 2. Mods
Re-download mods listed in `mods.txt` from [Modrinth](https://modrinth.com) or [CurseForge](https://curseforge.com).

### 3. Shaders
- Re-download shaders listed in `shaders.txt`
- Copy `shader_configs/` contents to your `shaderpacks/` folder

### 4. Resource Packs
Re-download packs listed in `resourcepacks.txt`.

### 5. Options
Copy `options.txt` to your minecraft folder.

### 6. Saves (if included)
Copy the `saves/` folder back to your minecraft folder."""

FOOTER = "*Generated by [Totem](https://github.com/vaalley/totem) - Minecraft Backup Utility*"


@dataclass
class ManifestData:
    """Everything the report shows. Rendering it touches nothing else."""

    source_path: Path
    selection: BackupSelection
    stats: RunStatistics
    metadata: InstallationMetadata
    duration: float
    generated_at: datetime
    os_info: str
    backup_size: int = 0
    mods_size: int = 0
    largest_mods: list[SizedEntry] = field(default_factory=list)
    saves_size: int = 0
    largest_saves: list[SizedEntry] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def _entry_lines(entries: list[SizedEntry]) -> list[str]:
    return [f"  - {e.name} ({format_bytes(e.size)})" for e in entries]


def render_manifest(data: ManifestData) -> str:
    """Render the report. Same input, same bytes."""
    s = data.stats
    lines = [
        "# 🗿 Totem Backup",
        "",
        f"> Generated on {data.generated_at:%Y-%m-%d %H:%M:%S}",
        "",
        "---",
        "",
        "## 📋 System Information",
        "",
        "| Property | Value |",
        "|----------|-------|",
        f"| Minecraft Version | {data.metadata.version} |",
        f"| Mod Loader | {data.metadata.loader_display} |",
        f"| Operating System | {data.os_info} |",
        f"| Totem Version | v{VERSION} |",
        "",
        "---",
        "",
        "## 📦 Backup Details",
        "",
        "| Property | Value |",
        "|----------|-------|",
        f"| Source Path | `{data.source_path}` |",
        f"| Backup Duration | {format_duration(data.duration)} |",
        f"| Total Backup Size | {format_bytes(data.backup_size)} |",
        f"| Total Files Copied | {s.total_files} files |",
        "",
        "---",
        "",
        "## 📁 Contents",
        "",
        "| Item | Count |",
        "|------|-------|",
        f"| Screenshots | {s.screenshots_copied} files |",
        f"| Mods | {s.mods_listed} mods ({format_bytes(data.mods_size)} total) |",
        f"| Shaders | {s.shaders_listed} shaders |",
        f"| Shader Configs | {s.shader_configs_copied} files |",
        f"| Resource Packs | {s.resourcepacks_listed} packs |",
        f"| Saves | {s.saves_copied} files |",
        f"| Xaero Maps | {s.xaero_copied} files |",
        f"| Distant Horizons | {s.distant_horizons_copied} files |",
        "",
        "---",
        "",
        "## 📊 Mod Statistics",
        "",
        f"- **Total Mods:** {s.mods_listed}",
        f"- **Total Size:** {format_bytes(data.mods_size)}",
        "- **Largest Mods:**",
    ]
    lines += _entry_lines(data.largest_mods) or ["  - None found"]

    if data.selection.include_saves and data.largest_saves:
        lines += [
            "",
            "## 🌍 Save Statistics",
            "",
            f"- **World count:** {len(data.largest_saves)}+ worlds",
            f"- **Total size:** {format_bytes(data.saves_size)}",
            "- **Largest worlds:**",
        ]
        lines += _entry_lines(data.largest_saves)

    lines += ["", "---", "", RESTORATION_GUIDE, "", "---", ""]

    if data.errors:
        lines += ["## ⚠️ Errors", ""]
        lines += [f"- {e}" for e in data.errors]
    else:
        lines += ["## ✅ Status", "", "Backup completed successfully with no errors."]

    lines += ["", "---", "", FOOTER, ""]
    return "\n".join(lines)


def collect_manifest_data(
    backup_dir: Path,
    layout: InstallationLayout,
    selection: BackupSelection,
    stats: RunStatistics,
    metadata: InstallationMetadata,
    errors: list[str],
    duration: float,
) -> ManifestData:
    """Gather sizes and rankings for the report."""
    data = ManifestData(
        source_path=layout.root,
        selection=selection,
        stats=stats,
        metadata=metadata,
        duration=duration,
        generated_at=datetime.now(),
        os_info=get_os_info(),
        backup_size=dir_size(backup_dir),
        mods_size=dir_size(layout.mods),
        largest_mods=largest_entries(layout.mods, LARGEST_LIMIT),
        errors=list(errors),
    )
    if selection.include_saves:
        data.saves_size = dir_size(layout.saves)
        data.largest_saves = largest_entries(layout.saves, LARGEST_LIMIT)
    return data


def write_manifest(backup_dir: Path, data: ManifestData) -> Path:
    path = backup_dir / MANIFEST_NAME
    path.write_text(render_manifest(data), encoding="utf-8", errors="surrogateescape")
    logger.debug(f"Wrote manifest: {path}")
    return path
