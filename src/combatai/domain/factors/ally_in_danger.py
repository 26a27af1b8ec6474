"""Ally-protection factor keyed on the lowest living ally's stamina."""
from __future__ import annotations

from combatai.domain.decision_models import ActionScores, ScoringFactor
from combatai.domain.perception import Perception, TargetPerception

CRITICAL_THRESHOLD = 0.3
WOUNDED_THRESHOLD = 0.6

CRITICAL_SCORES = ActionScores(attack=-0.2, defend=0.8, evade=-0.1, special=0.4, group=0.2)
WOUNDED_SCORES = ActionScores(attack=0.0, defend=0.3, evade=0.0, special=0.1, group=0.0)
HEALTHY_SCORES = ActionScores.zeros()


def score_ally_in_danger(perception: Perception, target: TargetPerception | None) -> ActionScores:
    # Not target-aware: urgency comes from the weakest ally whatever the candidate.
    if perception.ally_count == 0:
        return HEALTHY_SCORES
    pct = perception.lowest_ally_stamina_pct
    if pct < CRITICAL_THRESHOLD:
        return CRITICAL_SCORES
    if pct <= WOUNDED_THRESHOLD:
        return WOUNDED_SCORES
    return HEALTHY_SCORES


ALLY_IN_DANGER = ScoringFactor(name="ally_in_danger", evaluate=score_ally_in_danger)
