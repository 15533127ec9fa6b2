"""Backup run models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class BackupSelection:
    """User choices for one run. Immutable once the run starts."""

    zip_output: bool = False
    include_saves: bool = False
    include_xaero: bool = False
    include_distant_horizons: bool = False
    open_when_done: bool = False


@dataclass
class RunStatistics:
    """Per-category counters, filled in step by step."""

    screenshots_copied: int = 0
    mods_listed: int = 0
    shaders_listed: int = 0
    shader_configs_copied: int = 0
    resourcepacks_listed: int = 0
    saves_copied: int = 0
    xaero_copied: int = 0
    distant_horizons_copied: int = 0
    total_files: int = 0  # files actually copied; catalog-only categories excluded


@dataclass(frozen=True)
class SizedEntry:
    """Name and byte size of a directory child."""

    name: str
    size: int


@dataclass
class ValidationResult:
    """Outcome of checking an installation root."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)


@dataclass
class StepOutcome:
    """
    What a single pipeline step produced.

    ``counts`` maps RunStatistics field names to values; ``copied`` is the
    number of files that count toward the run's copied-files total.
    """

    counts: dict[str, int] = field(default_factory=dict)
    copied: int = 0
    error: str | None = None


@dataclass(frozen=True)
class BackupResult:
    """
    Terminal record of a backup run.

    ``output_path`` is the archive when compression succeeded, otherwise the
    backup directory. It is ``None`` when the run was aborted before any
    output was created.
    """

    success: bool
    output_path: Path | None
    total_files: int = 0
    stats: RunStatistics = field(default_factory=RunStatistics)
    errors: tuple[str, ...] = ()
    duration: float = 0.0
    aborted: bool = False

    @property
    def is_archive(self) -> bool:
        return self.output_path is not None and self.output_path.suffix == ".zip"
