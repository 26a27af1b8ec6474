"""Lazily loaded, read-only repositories over JSON definition files."""
from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Generic, List, Mapping, TypeVar

from combatai.data import paths
from combatai.data.errors import DataValidationError
from combatai.data.json_loader import load_json

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """One definition file, parsed on first access and cached per instance.

    Subclasses implement ``_build`` to turn the top-level JSON object into
    typed definitions keyed by id.
    """

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._file_path = paths.get_definition_file(filename, base_path)
        self._cache: Mapping[str, T] | None = None

    @property
    def file_path(self) -> Path:
        return self._file_path

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        raise NotImplementedError

    def _definitions(self) -> Mapping[str, T]:
        if self._cache is None:
            raw = load_json(self._file_path)
            if not isinstance(raw, dict):
                raise DataValidationError(f"{self._file_path} must hold a JSON object keyed by id.")
            self._cache = MappingProxyType(self._build(raw))
        return self._cache

    def get(self, def_id: str) -> T:
        """Return the definition for ``def_id``; KeyError names the file on a miss."""
        definitions = self._definitions()
        if def_id not in definitions:
            raise KeyError(f"'{def_id}' is not defined in {self._file_path.name}")
        return definitions[def_id]

    def ids(self) -> List[str]:
        return sorted(self._definitions())

    def all(self) -> List[T]:
        """Return every definition, ordered by id."""
        definitions = self._definitions()
        return [definitions[def_id] for def_id in self.ids()]

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_number(value: object, context: str) -> float:
        # bool is an int subclass; a true/false weight is a data bug.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        return float(value)

    @staticmethod
    def _assert_required(payload: dict[str, object], required: set[str], context: str) -> None:
        missing = required - payload.keys()
        if missing:
            raise DataValidationError(f"{context} missing fields: {sorted(missing)}")

    @staticmethod
    def _assert_known_keys(payload: dict[str, object], allowed: set[str], context: str) -> List[str]:
        unknown = sorted(set(payload.keys()) - allowed)
        if unknown:
            raise DataValidationError(f"{context} has unknown keys: {unknown}")
        return sorted(payload.keys())
