"""Self-preservation factor.

Low stamina pushes towards evading and away from offense; a healthy actor
leans aggressive. Scores interpolate linearly between bracket anchors:
0.0 -> 0.3 runs LOW towards MID, 0.3 -> 0.6 runs MID towards HIGH, and
anything above 0.6 is flat HIGH.
"""
from __future__ import annotations

from combatai.domain.decision_models import ActionScores, ScoringFactor
from combatai.domain.perception import Perception, TargetPerception

LOW_BRACKET_END = 0.3
MID_BRACKET_END = 0.6

LOW_SCORES = ActionScores(attack=-0.5, defend=0.1, evade=0.9, special=-0.3, group=0.0)
MID_SCORES = ActionScores(attack=0.0, defend=0.0, evade=0.2, special=0.0, group=0.0)
HIGH_SCORES = ActionScores(attack=0.2, defend=0.0, evade=-0.3, special=0.1, group=0.0)


def score_own_stamina(perception: Perception, target: TargetPerception | None) -> ActionScores:
    pct = perception.self_stamina_pct
    if pct < LOW_BRACKET_END:
        return LOW_SCORES.lerp(MID_SCORES, pct / LOW_BRACKET_END)
    if pct <= MID_BRACKET_END:
        t = (pct - LOW_BRACKET_END) / (MID_BRACKET_END - LOW_BRACKET_END)
        return MID_SCORES.lerp(HIGH_SCORES, t)
    return HIGH_SCORES


OWN_STAMINA = ScoringFactor(name="own_stamina", evaluate=score_own_stamina)
