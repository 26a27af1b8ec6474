"""Affinity-based tie-breaking between equally scored candidates."""
from __future__ import annotations

from typing import Dict, Mapping, Sequence, Tuple

from combatai.core.types import ActionType, ElementalAffinity
from combatai.domain.decision_models import ScoredCandidate

# Offensive affinities (fire, shadow, earth) put an attack or special early;
# reactive ones (water, air, light) favour defend and evade.
AFFINITY_TIEBREAK: Dict[ElementalAffinity, Tuple[ActionType, ...]] = {
    "fire": ("attack", "special", "defend", "evade", "group"),
    "shadow": ("special", "attack", "evade", "defend", "group"),
    "earth": ("defend", "attack", "special", "evade", "group"),
    "water": ("defend", "evade", "special", "attack", "group"),
    "air": ("evade", "defend", "special", "attack", "group"),
    "light": ("special", "defend", "evade", "attack", "group"),
}

# A candidate without a target reads as stamina 0.0, so self and team kinds
# never lose the second-stage comparison to a targeted kind.
UNTARGETED_STAMINA_PCT = 0.0


def tiebreak_index(affinity: ElementalAffinity, action_type: ActionType) -> int:
    """Return the priority of ``action_type`` for ``affinity`` (0 is highest)."""
    return AFFINITY_TIEBREAK[affinity].index(action_type)


def tiebreak_key(
    candidate: ScoredCandidate,
    affinity: ElementalAffinity,
    target_stamina: Mapping[str, float],
) -> Tuple[int, float]:
    if candidate.target_id is None:
        stamina = UNTARGETED_STAMINA_PCT
    else:
        stamina = target_stamina.get(candidate.target_id, UNTARGETED_STAMINA_PCT)
    return (tiebreak_index(affinity, candidate.action_type), stamina)


def resolve_tie(
    tied: Sequence[ScoredCandidate],
    affinity: ElementalAffinity,
    target_stamina: Mapping[str, float],
) -> ScoredCandidate:
    """Pick the winner among candidates sharing the top score.

    Order by the affinity's action preference, then by the lowest target
    stamina fraction. Fully equal keys keep input order.
    """
    if not tied:
        raise ValueError("Cannot resolve a tie between zero candidates.")
    if len(tied) == 1:
        return tied[0]
    return min(tied, key=lambda candidate: tiebreak_key(candidate, affinity, target_stamina))
