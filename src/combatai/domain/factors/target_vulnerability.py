"""Target vulnerability factor: weakened targets invite offensive kinds."""
from __future__ import annotations

from combatai.domain.decision_models import ActionScores, ScoringFactor
from combatai.domain.perception import Perception, TargetPerception

CRITICAL_THRESHOLD = 0.25
WEAKENED_THRESHOLD = 0.5

CRITICAL_SCORES = ActionScores(attack=0.8, defend=0.0, evade=-0.2, special=0.6, group=0.0)
WEAKENED_SCORES = ActionScores(attack=0.4, defend=0.0, evade=-0.1, special=0.3, group=0.0)
HEALTHY_SCORES = ActionScores(attack=0.1, defend=0.0, evade=0.0, special=0.1, group=0.0)


def score_target_vulnerability(perception: Perception, target: TargetPerception | None) -> ActionScores:
    if target is None:
        return ActionScores.zeros()
    pct = target.stamina_pct
    if pct < CRITICAL_THRESHOLD:
        return CRITICAL_SCORES
    if pct <= WEAKENED_THRESHOLD:
        return WEAKENED_SCORES
    return HEALTHY_SCORES


TARGET_VULNERABILITY = ScoringFactor(name="target_vulnerability", evaluate=score_target_vulnerability)
