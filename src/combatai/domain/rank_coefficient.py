"""Rank-based decision quality scaling.

Low-rank combatants act mostly on instinct (their archetype's base scores);
high-rank combatants apply full tactical reasoning. The coefficient scales the
summed factor contribution only:

    score = base_score + factor_sum * rank_coefficient(rank)
"""
from __future__ import annotations

# Even a rank-1 combatant keeps 20% of the factor influence.
RANK_FLOOR = 0.2
RANK_SCALE_MAX = 10.0


def rank_coefficient(rank: float) -> float:
    """Return ``max(RANK_FLOOR, rank / RANK_SCALE_MAX)``.

    Ranks are continuous and open-ended; only the lower end is clamped.
    """
    return max(RANK_FLOOR, rank / RANK_SCALE_MAX)
