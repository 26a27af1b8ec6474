"""Resource pressure factor.

Energy is a whole segment count, so brackets map straight onto counts with
no interpolation. A zero-energy actor never sees a special candidate at all;
that gate lives in the decision service, and the special score here is 0.
"""
from __future__ import annotations

from combatai.domain.decision_models import ActionScores, ScoringFactor
from combatai.domain.perception import Perception, TargetPerception

HIGH_ENERGY_SEGMENTS = 3

HIGH_ENERGY_SCORES = ActionScores(attack=-0.1, defend=0.0, evade=-0.2, special=0.7, group=0.0)
SOME_ENERGY_SCORES = ActionScores(attack=0.0, defend=0.0, evade=0.0, special=0.3, group=0.0)
NO_ENERGY_SCORES = ActionScores(attack=0.1, defend=0.0, evade=0.1, special=0.0, group=0.0)


def score_energy_availability(perception: Perception, target: TargetPerception | None) -> ActionScores:
    energy = perception.self_energy
    if energy >= HIGH_ENERGY_SEGMENTS:
        return HIGH_ENERGY_SCORES
    if energy >= 1:
        return SOME_ENERGY_SCORES
    return NO_ENERGY_SCORES


ENERGY_AVAILABILITY = ScoringFactor(name="energy_availability", evaluate=score_energy_availability)
