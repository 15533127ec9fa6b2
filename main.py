"""Command-line entry point — collects options, runs a backup, maps the exit code.

Usage:
    totem --minecraft-path <dir> --dest <dir> [--zip] [--saves] [--xaero] [--distant-horizons] [--open]

Paths that are not given fall back to the last ones used; toggles that are
not given fall back to the ``defaults`` section of the config file.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys

from loguru import logger

from totem.config import get_config
from totem.core.backup import perform_backup
from totem.logger import setup_logger
from totem.models.backup import BackupSelection
from totem.utils import format_duration, open_folder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="totem",
        description="Back up screenshots, mod/shader/resource pack lists, options and worlds of a Minecraft install.",
    )
    parser.add_argument("--minecraft-path", "-m", help="Minecraft installation folder (.minecraft)")
    parser.add_argument("--dest", "-d", help="Folder that receives backup_<timestamp>")
    parser.add_argument("--zip", action="store_true", default=None, help="Compress the backup into a .zip")
    parser.add_argument("--saves", action="store_true", default=None, help="Include worlds (saves/)")
    parser.add_argument("--xaero", action="store_true", default=None, help="Include Xaero's map data")
    parser.add_argument(
        "--distant-horizons", action="store_true", default=None, help="Include Distant Horizons data"
    )
    parser.add_argument("--open", action="store_true", default=None, help="Open the output location when done")
    return parser


def resolve_selection(args: argparse.Namespace, defaults: BackupSelection) -> BackupSelection:
    """Command-line toggles override the configured defaults."""
    overrides = {
        "zip_output": args.zip,
        "include_saves": args.saves,
        "include_xaero": args.xaero,
        "include_distant_horizons": args.distant_horizons,
        "open_when_done": args.open,
    }
    return dataclasses.replace(defaults, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    """Application entry point."""
    args = build_parser().parse_args(argv)
    config = get_config()
    setup_logger(config.log_dir, level=config.log_level)

    mc_path = args.minecraft_path or config.minecraft_path
    dest = args.dest or config.backup_dest
    if not mc_path:
        logger.error("No Minecraft path provided. Exiting.")
        return 1
    if not dest:
        logger.error("No destination provided. Exiting.")
        return 1

    selection = resolve_selection(args, config.default_selection)
    result = perform_backup(mc_path, dest, selection)

    if result.aborted:
        logger.error("Backup did not start:")
        for err in result.errors:
            logger.error(f"  - {err}")
        return 1

    with config.batch_update():
        config.minecraft_path = mc_path
        config.backup_dest = dest

    if not result.success:
        logger.error("Backup completed with errors:")
        for err in result.errors:
            logger.error(f"  - {err}")
        return 1

    logger.success(
        f"Backup saved to {result.output_path} "
        f"({result.total_files} files in {format_duration(result.duration)})"
    )
    if selection.open_when_done and result.output_path is not None:
        open_folder(result.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
