"""Tempo factor: a much faster actor presses attacks on that target.

``speed_delta`` is ``(self.speed - target.speed) / target.speed``. Between
0.0 and 0.3 the scores ramp from NEUTRAL to FAST. Ally targets are projected
with a zero delta, so defend candidates always read the neutral bracket.
"""
from __future__ import annotations

from combatai.domain.decision_models import ActionScores, ScoringFactor
from combatai.domain.perception import Perception, TargetPerception

FAST_THRESHOLD = 0.3

FAST_SCORES = ActionScores(attack=0.6, defend=-0.1, evade=-0.2, special=0.3, group=0.0)
NEUTRAL_SCORES = ActionScores(attack=0.2, defend=0.0, evade=0.0, special=0.1, group=0.0)
SLOW_SCORES = ActionScores(attack=-0.1, defend=0.1, evade=0.1, special=0.0, group=0.0)


def score_speed_advantage(perception: Perception, target: TargetPerception | None) -> ActionScores:
    if target is None:
        return ActionScores.zeros()
    delta = target.speed_delta
    if delta > FAST_THRESHOLD:
        return FAST_SCORES
    if delta >= 0:
        return NEUTRAL_SCORES.lerp(FAST_SCORES, delta / FAST_THRESHOLD)
    return SLOW_SCORES


SPEED_ADVANTAGE = ScoringFactor(name="speed_advantage", evaluate=score_speed_advantage)
