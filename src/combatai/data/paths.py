"""Locations of the archetype definitions shipped inside the package."""
from __future__ import annotations

from pathlib import Path

DEFINITIONS_DIRNAME = "definitions"


def get_package_data_root() -> Path:
    """Return the ``combatai.data`` package directory."""
    return Path(__file__).resolve().parent


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the definitions directory, or ``base_path`` when one is given."""
    if base_path is not None:
        return Path(base_path)
    return get_package_data_root() / DEFINITIONS_DIRNAME


def get_definition_file(filename: str, base_path: Path | str | None = None) -> Path:
    """Resolve one definition file, e.g. ``archetypes.json``."""
    return get_definitions_path(base_path) / filename
