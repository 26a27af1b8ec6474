"""Battle domain models consumed read-only by the decision engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from combatai.core.types import ElementalAffinity, Side

BattleStatus = Literal["active", "victory", "defeat"]


@dataclass(frozen=True, slots=True)
class CombatStats:
    """Live combat pools tracked for a combatant during one encounter."""

    max_stamina: int
    stamina: int
    max_energy: int
    energy: int
    power: int
    speed: int


@dataclass(frozen=True, slots=True)
class Combatant:
    """Represents an individual participant in battle."""

    instance_id: str
    display_name: str
    archetype_id: str
    rank: float
    stats: CombatStats
    elemental_affinity: ElementalAffinity
    ascension_level: int = 0
    is_ko: bool = False


@dataclass(frozen=True, slots=True)
class BattleState:
    """Snapshot of an ongoing battle as handed to the decision phase."""

    battle_id: str
    round: int
    player_party: Tuple[Combatant, ...]
    enemy_party: Tuple[Combatant, ...]
    phase: str = "ai_decision"
    status: BattleStatus = "active"

    def side_of(self, combatant_id: str) -> Side | None:
        """Return the roster containing the combatant, checking the player party first."""
        if any(c.instance_id == combatant_id for c in self.player_party):
            return "player_party"
        if any(c.instance_id == combatant_id for c in self.enemy_party):
            return "enemy_party"
        return None

    def roster(self, side: Side) -> Tuple[Combatant, ...]:
        return self.player_party if side == "player_party" else self.enemy_party
