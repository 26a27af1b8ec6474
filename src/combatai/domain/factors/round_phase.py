"""Pacing factor: build up early, press late. Reads only the round counter."""
from __future__ import annotations

from combatai.domain.decision_models import ActionScores, ScoringFactor
from combatai.domain.perception import Perception, TargetPerception

EARLY_LAST_ROUND = 2
MID_LAST_ROUND = 5

EARLY_SCORES = ActionScores(attack=0.1, defend=0.2, evade=0.3, special=-0.2, group=0.0)
MID_SCORES = ActionScores(attack=0.2, defend=0.0, evade=0.0, special=0.2, group=0.0)
LATE_SCORES = ActionScores(attack=0.3, defend=-0.1, evade=-0.1, special=0.4, group=0.0)


def score_round_phase(perception: Perception, target: TargetPerception | None) -> ActionScores:
    if perception.round <= EARLY_LAST_ROUND:
        return EARLY_SCORES
    if perception.round <= MID_LAST_ROUND:
        return MID_SCORES
    return LATE_SCORES


ROUND_PHASE = ScoringFactor(name="round_phase", evaluate=score_round_phase)
