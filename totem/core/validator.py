"""Installation validator — reject paths that are not a Minecraft folder."""

from __future__ import annotations

from loguru import logger

from totem.models.backup import ValidationResult
from totem.models.installation import InstallationLayout


def validate_installation(layout: InstallationLayout) -> ValidationResult:
    """
    Check that the root exists and carries at least one known marker.

    Markers are ``options.txt``, ``mods/`` and ``shaderpacks/``. The check is
    advisory: later steps test each location again before using it.
    """
    if not layout.root.exists():
        logger.debug(f"Installation root missing: {layout.root}")
        return ValidationResult(valid=False, errors=[f"Root path does not exist: {layout.root}"])

    markers = (layout.options, layout.mods, layout.shaderpacks)
    if not any(m.exists() for m in markers):
        return ValidationResult(
            valid=False,
            errors=[
                "This doesn't look like a Minecraft installation folder.",
                "Expected to find at least one of: options.txt, mods/, shaderpacks/",
            ],
        )

    return ValidationResult()
