"""Archetype profiles repository."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict

from combatai.core.types import ACTION_TYPES, ELEMENTAL_AFFINITIES
from combatai.data.errors import DataValidationError
from combatai.data.repositories.base import RepositoryBase
from combatai.domain.decision_models import ActionScores
from combatai.domain.defs import ArchetypeProfile
from combatai.domain.factors import FACTOR_NAMES


class ArchetypesRepository(RepositoryBase[ArchetypeProfile]):
    """Loads and validates archetype behavior profiles."""

    def __init__(self, base_path=None) -> None:
        super().__init__("archetypes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ArchetypeProfile]:
        profiles: Dict[str, ArchetypeProfile] = {}
        for raw_id, payload in raw.items():
            context = f"archetype '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_required(data, {"name", "base_scores", "factor_weights", "elemental_affinity"}, context)

            profiles[raw_id] = ArchetypeProfile(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                base_scores=self._build_base_scores(data["base_scores"], context),
                factor_weights=self._build_factor_weights(data["factor_weights"], context),
                elemental_affinity=self._require_affinity(data["elemental_affinity"], context),
            )
        return profiles

    def _build_base_scores(self, value: object, context: str) -> ActionScores:
        scores = self._require_mapping(value, f"{context} base_scores")
        self._assert_required(scores, set(ACTION_TYPES), f"{context} base_scores")
        self._assert_known_keys(scores, set(ACTION_TYPES), f"{context} base_scores")
        return ActionScores(
            **{
                action_type: self._require_number(scores[action_type], f"{context} base_scores.{action_type}")
                for action_type in ACTION_TYPES
            }
        )

    def _build_factor_weights(self, value: object, context: str) -> MappingProxyType:
        weights = self._require_mapping(value, f"{context} factor_weights")
        names = self._assert_known_keys(weights, set(FACTOR_NAMES), f"{context} factor_weights")
        return MappingProxyType(
            {name: self._require_number(weights[name], f"{context} factor_weights.{name}") for name in names}
        )

    def _require_affinity(self, value: object, context: str) -> str:
        affinity = self._require_str(value, f"{context} elemental_affinity")
        if affinity not in ELEMENTAL_AFFINITIES:
            raise DataValidationError(
                f"{context} elemental_affinity must be one of {list(ELEMENTAL_AFFINITIES)}, got '{affinity}'."
            )
        return affinity
