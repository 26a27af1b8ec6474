"""Scoring factor registry.

The decision service iterates ``FACTORS`` uniformly and sums the weighted
results, so evaluation order never affects a score. Factor names key the
weights in archetype profiles.
"""

from .ally_in_danger import ALLY_IN_DANGER
from .energy_availability import ENERGY_AVAILABILITY
from .own_stamina import OWN_STAMINA
from .round_phase import ROUND_PHASE
from .speed_advantage import SPEED_ADVANTAGE
from .target_vulnerability import TARGET_VULNERABILITY
from .team_balance import TEAM_BALANCE

FACTORS = (
    OWN_STAMINA,
    ALLY_IN_DANGER,
    TARGET_VULNERABILITY,
    ENERGY_AVAILABILITY,
    SPEED_ADVANTAGE,
    ROUND_PHASE,
    TEAM_BALANCE,
)

FACTOR_NAMES = tuple(factor.name for factor in FACTORS)

__all__ = [
    "ALLY_IN_DANGER",
    "ENERGY_AVAILABILITY",
    "FACTORS",
    "FACTOR_NAMES",
    "OWN_STAMINA",
    "ROUND_PHASE",
    "SPEED_ADVANTAGE",
    "TARGET_VULNERABILITY",
    "TEAM_BALANCE",
]
