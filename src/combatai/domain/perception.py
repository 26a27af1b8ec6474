"""Perception snapshot built once per NPC per decision.

The snapshot translates a raw battle state into pre-computed, read-only
values that scoring factors can query without redundant work. It holds only
tuples and frozen records so a factor cannot mutate shared state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from combatai.core.types import ElementalAffinity
from combatai.domain.battle_models import BattleState, Combatant

# Health aggregates over an empty living set read as healthy.
EMPTY_SET_STAMINA_PCT = 1.0


@dataclass(frozen=True, slots=True)
class AllyPerception:
    id: str
    stamina_pct: float
    is_ko: bool


@dataclass(frozen=True, slots=True)
class EnemyPerception:
    id: str
    stamina_pct: float
    is_ko: bool
    speed_delta: float
    rank_delta: float
    power: int


@dataclass(frozen=True, slots=True)
class TargetPerception:
    """What a target-aware factor sees about the candidate's target."""

    id: str
    stamina_pct: float
    speed_delta: float = 0.0
    rank_delta: float = 0.0
    power: int = 0

    @classmethod
    def from_enemy(cls, enemy: EnemyPerception) -> TargetPerception:
        return cls(
            id=enemy.id,
            stamina_pct=enemy.stamina_pct,
            speed_delta=enemy.speed_delta,
            rank_delta=enemy.rank_delta,
            power=enemy.power,
        )

    @classmethod
    def from_ally(cls, ally: AllyPerception) -> TargetPerception:
        # Relative speed, rank and power only mean something against a foe.
        return cls(id=ally.id, stamina_pct=ally.stamina_pct)


@dataclass(frozen=True, slots=True)
class Perception:
    """Read-only view of a battle from one actor's point of view."""

    self_id: str
    self_stamina_pct: float
    self_energy: int
    self_ascension: int
    self_rank: float
    self_affinity: ElementalAffinity

    allies: Tuple[AllyPerception, ...]
    lowest_ally_stamina_pct: float
    team_avg_stamina_pct: float
    ally_count: int

    enemies: Tuple[EnemyPerception, ...]
    weakest_enemy_stamina_pct: float
    enemy_avg_stamina_pct: float
    enemy_count: int

    round: int

    @property
    def living_allies(self) -> Tuple[AllyPerception, ...]:
        return tuple(ally for ally in self.allies if not ally.is_ko)

    @property
    def living_enemies(self) -> Tuple[EnemyPerception, ...]:
        return tuple(enemy for enemy in self.enemies if not enemy.is_ko)

    def stamina_by_id(self) -> dict[str, float]:
        """Map every perceived combatant id to its stamina fraction."""
        stamina = {enemy.id: enemy.stamina_pct for enemy in self.enemies}
        stamina.update({ally.id: ally.stamina_pct for ally in self.allies})
        return stamina


def stamina_fraction(current: int, maximum: int) -> float:
    """Return current/maximum, or 0.0 for a degenerate maximum."""
    if maximum <= 0:
        return 0.0
    return current / maximum


def build_perception(actor: Combatant, battle_state: BattleState) -> Perception:
    """Build the snapshot for ``actor``.

    The actor's own roster is whichever one contains its id (player party
    checked first); the other roster is the opposing side. Allies exclude the
    actor and keep downed members, flagged. Both lists are stably sorted by
    stamina fraction ascending, weakest first.
    """
    side = battle_state.side_of(actor.instance_id)
    if side is None:
        raise ValueError(f"Combatant '{actor.instance_id}' is not part of battle '{battle_state.battle_id}'.")
    opposing_side = "enemy_party" if side == "player_party" else "player_party"
    own_roster = battle_state.roster(side)
    opposing_roster = battle_state.roster(opposing_side)

    self_stamina_pct = stamina_fraction(actor.stats.stamina, actor.stats.max_stamina)

    allies = sorted(
        (
            AllyPerception(
                id=member.instance_id,
                stamina_pct=stamina_fraction(member.stats.stamina, member.stats.max_stamina),
                is_ko=member.is_ko,
            )
            for member in own_roster
            if member.instance_id != actor.instance_id
        ),
        key=lambda ally: ally.stamina_pct,
    )
    living_ally_pcts = [ally.stamina_pct for ally in allies if not ally.is_ko]

    enemies = sorted(
        (_perceive_enemy(actor, enemy) for enemy in opposing_roster),
        key=lambda enemy: enemy.stamina_pct,
    )
    living_enemy_pcts = [enemy.stamina_pct for enemy in enemies if not enemy.is_ko]

    return Perception(
        self_id=actor.instance_id,
        self_stamina_pct=self_stamina_pct,
        self_energy=actor.stats.energy,
        self_ascension=actor.ascension_level,
        self_rank=actor.rank,
        self_affinity=actor.elemental_affinity,
        allies=tuple(allies),
        lowest_ally_stamina_pct=min(living_ally_pcts, default=EMPTY_SET_STAMINA_PCT),
        team_avg_stamina_pct=_average([*living_ally_pcts, self_stamina_pct]),
        ally_count=len(living_ally_pcts),
        enemies=tuple(enemies),
        weakest_enemy_stamina_pct=min(living_enemy_pcts, default=EMPTY_SET_STAMINA_PCT),
        enemy_avg_stamina_pct=_average(living_enemy_pcts),
        enemy_count=len(living_enemy_pcts),
        round=battle_state.round,
    )


def _perceive_enemy(actor: Combatant, enemy: Combatant) -> EnemyPerception:
    if enemy.stats.speed > 0:
        speed_delta = (actor.stats.speed - enemy.stats.speed) / enemy.stats.speed
    else:
        speed_delta = 0.0
    return EnemyPerception(
        id=enemy.instance_id,
        stamina_pct=stamina_fraction(enemy.stats.stamina, enemy.stats.max_stamina),
        is_ko=enemy.is_ko,
        speed_delta=speed_delta,
        rank_delta=actor.rank - enemy.rank,
        power=enemy.stats.power,
    )


def _average(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return EMPTY_SET_STAMINA_PCT
    return sum(values) / len(values)
