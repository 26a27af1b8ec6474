"""Archetype profile definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from combatai.core.types import ElementalAffinity
from combatai.domain.decision_models import ActionScores


@dataclass(frozen=True, slots=True)
class ArchetypeProfile:
    """Combat personality for one character template. Pure data."""

    id: str
    name: str
    base_scores: ActionScores
    factor_weights: Mapping[str, float]
    elemental_affinity: ElementalAffinity

    def weight_for(self, factor_name: str) -> float:
        return self.factor_weights.get(factor_name, 0.0)
