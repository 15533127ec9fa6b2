"""Path resolver — clean up user-supplied paths and derive the installation layout."""

from __future__ import annotations

import os
from pathlib import Path

from totem.models.installation import InstallationLayout

_QUOTES = ("\"", "'")


def normalize_path(raw: str) -> str:
    """
    Clean a pasted or typed path.

    Trims whitespace, strips one matching pair of surrounding quotes and
    canonicalizes separators for the host. Never fails; an empty input
    stays empty.
    """
    cleaned = raw.strip()
    if len(cleaned) >= 2 and cleaned[0] == cleaned[-1] and cleaned[0] in _QUOTES:
        cleaned = cleaned[1:-1].strip()
    if not cleaned:
        return ""
    return os.path.normpath(cleaned)


def build_layout(raw_root: str | Path) -> InstallationLayout:
    """Build the installation layout from a (possibly raw) root path."""
    return InstallationLayout(root=Path(normalize_path(str(raw_root))))
