"""Exceptions raised while reading archetype definitions."""
from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """A definition file could not be read or parsed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = Path(path)
        self.reason = reason


class DataValidationError(DataError):
    """Definition content is structurally invalid."""
