"""Backup orchestrator — runs the fixed backup sequence and collects the result."""

from __future__ import annotations

import dataclasses
import shutil
import time
from collections.abc import Callable
from pathlib import Path

from loguru import logger

from totem.core.archiver import create_archive
from totem.core.copy_engine import copy_file, copy_tree, list_entries, write_listing
from totem.core.inspector import inspect_installation
from totem.core.manifest import collect_manifest_data, write_manifest
from totem.core.path_resolver import build_layout, normalize_path
from totem.core.shaders import split_shaders
from totem.core.validator import validate_installation
from totem.models.backup import BackupResult, BackupSelection, RunStatistics, StepOutcome
from totem.models.installation import InstallationLayout
from totem.utils import generate_timestamp

ProgressCallback = Callable[[str], None]


class BackupOrchestrator:
    """
    Sequential backup pipeline.

    Steps always run in the same order. A failing step records one error and
    the run moves on; only an invalid installation root or an uncreatable
    output folder stops the run before anything is written.
    """

    def __init__(self, progress: ProgressCallback | None = None) -> None:
        self._progress = progress

    def _report(self, message: str) -> None:
        logger.info(message)
        if self._progress:
            self._progress(message)

    # ── Entry point ──

    def run(self, raw_root: str, raw_dest: str, selection: BackupSelection) -> BackupResult:
        start = time.perf_counter()

        layout = build_layout(raw_root)
        validation = validate_installation(layout)
        if not validation.valid:
            for err in validation.errors:
                logger.error(err)
            return BackupResult(
                success=False, output_path=None, errors=tuple(validation.errors), aborted=True
            )

        dest = normalize_path(raw_dest)
        if not dest:
            return self._abort("No backup destination provided")
        try:
            backup_dir = reserve_backup_dir(Path(dest))
        except (OSError, ValueError) as e:
            return self._abort(f"Failed to create backup folder: {e}")

        self._report(f"Creating backup: {backup_dir}")
        metadata = inspect_installation(layout.root)
        stats = RunStatistics()
        errors: list[str] = []

        def merge(outcome: StepOutcome) -> None:
            if outcome.error:
                logger.error(outcome.error)
                errors.append(outcome.error)
                return
            for name, value in outcome.counts.items():
                setattr(stats, name, value)
            stats.total_files += outcome.copied

        merge(self._copy_step("screenshots", layout.screenshots, backup_dir / "screenshots", "screenshots_copied"))
        merge(self._list_step("mods", layout.mods, backup_dir / "mods.txt", "mods_listed"))
        merge(self._shader_step(layout, backup_dir))
        merge(self._list_step(
            "resource packs", layout.resourcepacks, backup_dir / "resourcepacks.txt", "resourcepacks_listed"
        ))
        merge(self._options_step(layout, backup_dir))
        if selection.include_saves:
            merge(self._copy_step("saves", layout.saves, backup_dir / "saves", "saves_copied"))
        if selection.include_xaero:
            merge(self._copy_step("Xaero map data", layout.xaero, backup_dir / "xaero", "xaero_copied"))
        if selection.include_distant_horizons:
            merge(self._copy_step(
                "Distant Horizons data",
                layout.distant_horizons,
                backup_dir / "distant_horizons_server_data",
                "distant_horizons_copied",
            ))

        # Archiving and folder-opening are not part of the reported duration
        duration = time.perf_counter() - start

        self._report("Generating info.md...")
        try:
            data = collect_manifest_data(backup_dir, layout, selection, stats, metadata, errors, duration)
            write_manifest(backup_dir, data)
        except (OSError, ValueError) as e:
            merge(StepOutcome(error=f"Failed to write info.md: {e}"))

        output_path = backup_dir
        if selection.zip_output:
            output_path, outcome = self._archive_step(backup_dir)
            merge(outcome)

        success = not errors
        self._report("Backup complete" if success else f"Backup completed with {len(errors)} error(s)")
        return BackupResult(
            success=success,
            output_path=output_path,
            total_files=stats.total_files,
            stats=dataclasses.replace(stats),
            errors=tuple(errors),
            duration=duration,
        )

    def _abort(self, message: str) -> BackupResult:
        logger.error(message)
        return BackupResult(success=False, output_path=None, errors=(message,), aborted=True)

    # ── Steps ──

    def _copy_step(self, label: str, src: Path, dst: Path, counter: str) -> StepOutcome:
        if not src.exists():
            logger.debug(f"No {label} found, skipping")
            return StepOutcome()
        self._report(f"Copying {label}...")
        try:
            count = copy_tree(src, dst)
        except (OSError, ValueError) as e:
            return StepOutcome(error=f"Failed to copy {label}: {e}")
        self._report(f"  Copied {count} file(s)")
        return StepOutcome(counts={counter: count}, copied=count)

    def _list_step(self, label: str, src: Path, listing_path: Path, counter: str) -> StepOutcome:
        if not src.exists():
            logger.debug(f"No {label} folder found, skipping")
            return StepOutcome()
        self._report(f"Listing {label}...")
        try:
            names = list_entries(src).names
            write_listing(listing_path, names)
        except (OSError, ValueError) as e:
            return StepOutcome(error=f"Failed to list {label}: {e}")
        self._report(f"  Listed {len(names)} {label}")
        return StepOutcome(counts={counter: len(names)})

    def _shader_step(self, layout: InstallationLayout, backup_dir: Path) -> StepOutcome:
        if not layout.shaderpacks.exists():
            logger.debug("No shaderpacks folder found, skipping")
            return StepOutcome()
        self._report("Processing shaderpacks...")
        try:
            split = split_shaders(layout.shaderpacks, backup_dir)
            write_listing(backup_dir / "shaders.txt", split.packs)
        except (OSError, ValueError) as e:
            return StepOutcome(error=f"Failed to process shaderpacks: {e}")
        self._report(f"  Listed {len(split.packs)} shaders, copied {split.configs_copied} config file(s)")
        return StepOutcome(
            counts={"shaders_listed": len(split.packs), "shader_configs_copied": split.configs_copied},
            copied=split.configs_copied,
        )

    def _options_step(self, layout: InstallationLayout, backup_dir: Path) -> StepOutcome:
        if not layout.options.exists():
            logger.debug("No options.txt found, skipping")
            return StepOutcome()
        self._report("Copying options.txt...")
        try:
            copy_file(layout.options, backup_dir / "options.txt")
        except (OSError, ValueError) as e:
            return StepOutcome(error=f"Failed to copy options.txt: {e}")
        return StepOutcome()

    def _archive_step(self, backup_dir: Path) -> tuple[Path, StepOutcome]:
        """Zip the backup folder. Returns the path to report as output and the outcome."""
        zip_path = backup_dir.parent / f"{backup_dir.name}.zip"
        self._report("Creating zip archive...")
        try:
            create_archive(backup_dir, zip_path)
        except (OSError, ValueError) as e:
            return backup_dir, StepOutcome(error=f"Failed to create zip: {e}")

        self._report(f"  Archive created: {zip_path.name}")
        try:
            shutil.rmtree(backup_dir)
        except OSError as e:
            return zip_path, StepOutcome(error=f"Failed to remove uncompressed backup folder: {e}")
        return zip_path, StepOutcome()


def reserve_backup_dir(dest_root: Path, timestamp: str | None = None) -> Path:
    """
    Create ``backup_<timestamp>`` under ``dest_root``.

    When that name (or its ``.zip``) is already taken, ``_2``, ``_3``, …
    is appended.
    """
    stem = f"backup_{timestamp or generate_timestamp()}"
    dest_root.mkdir(parents=True, exist_ok=True)
    n = 1
    while True:
        name = stem if n == 1 else f"{stem}_{n}"
        candidate = dest_root / name
        if not candidate.exists() and not (dest_root / f"{name}.zip").exists():
            candidate.mkdir()
            return candidate
        n += 1


def perform_backup(
    raw_root: str,
    raw_dest: str,
    selection: BackupSelection,
    progress: ProgressCallback | None = None,
) -> BackupResult:
    """Run one backup with a fresh orchestrator."""
    return BackupOrchestrator(progress).run(raw_root, raw_dest, selection)
