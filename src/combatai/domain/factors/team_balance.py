"""Attrition factor comparing team and enemy average stamina."""
from __future__ import annotations

from combatai.domain.decision_models import ActionScores, ScoringFactor
from combatai.domain.perception import Perception, TargetPerception

# Differences within +/- this margin count as parity and contribute nothing.
PARITY_MARGIN = 0.2

WINNING_SCORES = ActionScores(attack=0.3, defend=-0.1, evade=-0.2, special=0.2, group=0.0)
EVEN_SCORES = ActionScores.zeros()
LOSING_SCORES = ActionScores(attack=-0.2, defend=0.4, evade=0.3, special=0.1, group=0.2)


def score_team_balance(perception: Perception, target: TargetPerception | None) -> ActionScores:
    diff = perception.team_avg_stamina_pct - perception.enemy_avg_stamina_pct
    if diff > PARITY_MARGIN:
        return WINNING_SCORES
    if diff < -PARITY_MARGIN:
        return LOSING_SCORES
    return EVEN_SCORES


TEAM_BALANCE = ScoringFactor(name="team_balance", evaluate=score_team_balance)
