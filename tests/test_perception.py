from __future__ import annotations

import pytest

from combatai.domain.perception import (
    EMPTY_SET_STAMINA_PCT,
    TargetPerception,
    build_perception,
    stamina_fraction,
)
from tests.helpers.battle_builders import make_combatant, make_state


def test_allies_exclude_self_and_sort_weakest_first() -> None:
    npc = make_combatant("npc", stamina=90)
    state = make_state(
        [make_combatant("p1")],
        [npc, make_combatant("a1", stamina=70), make_combatant("a2", stamina=30), make_combatant("a3", stamina=70)],
    )

    perception = build_perception(npc, state)

    assert [ally.id for ally in perception.allies] == ["a2", "a1", "a3"]
    assert perception.ally_count == 3
    assert perception.lowest_ally_stamina_pct == pytest.approx(0.3)


def test_team_average_includes_self_and_skips_downed() -> None:
    npc = make_combatant("npc", stamina=100)
    state = make_state(
        [make_combatant("p1")],
        [npc, make_combatant("a1", stamina=50), make_combatant("a2", stamina=0, is_ko=True)],
    )

    perception = build_perception(npc, state)

    assert perception.team_avg_stamina_pct == pytest.approx(0.75)
    assert perception.ally_count == 1
    assert [ally.id for ally in perception.living_allies] == ["a1"]
    assert len(perception.allies) == 2


def test_enemy_aggregates_cover_living_enemies_only() -> None:
    npc = make_combatant("npc")
    state = make_state(
        [make_combatant("p1", stamina=40), make_combatant("p2", stamina=80), make_combatant("p3", stamina=0, is_ko=True)],
        [npc],
    )

    perception = build_perception(npc, state)

    assert perception.enemy_count == 2
    assert perception.weakest_enemy_stamina_pct == pytest.approx(0.4)
    assert perception.enemy_avg_stamina_pct == pytest.approx(0.6)
    assert [enemy.id for enemy in perception.enemies] == ["p3", "p1", "p2"]


def test_empty_sets_read_as_healthy() -> None:
    npc = make_combatant("npc", stamina=20)
    state = make_state([make_combatant("p1", stamina=0, is_ko=True)], [npc])

    perception = build_perception(npc, state)

    assert perception.ally_count == 0
    assert perception.enemy_count == 0
    assert perception.lowest_ally_stamina_pct == EMPTY_SET_STAMINA_PCT
    assert perception.weakest_enemy_stamina_pct == EMPTY_SET_STAMINA_PCT
    assert perception.enemy_avg_stamina_pct == EMPTY_SET_STAMINA_PCT
    assert perception.team_avg_stamina_pct == pytest.approx(0.2)


def test_enemy_relative_stats() -> None:
    npc = make_combatant("npc", speed=13, rank=5.0)
    state = make_state(
        [make_combatant("p1", speed=10, rank=2.0, power=35), make_combatant("p2", speed=0)],
        [npc],
    )

    perception = build_perception(npc, state)
    enemies = {enemy.id: enemy for enemy in perception.enemies}

    assert enemies["p1"].speed_delta == pytest.approx(0.3)
    assert enemies["p1"].rank_delta == pytest.approx(3.0)
    assert enemies["p1"].power == 35
    assert enemies["p2"].speed_delta == 0.0


def test_player_side_actor_sees_enemy_party_as_enemies() -> None:
    companion = make_combatant("companion")
    state = make_state([companion, make_combatant("friend")], [make_combatant("e1")])

    perception = build_perception(companion, state)

    assert [ally.id for ally in perception.allies] == ["friend"]
    assert [enemy.id for enemy in perception.enemies] == ["e1"]


def test_self_fields_and_round() -> None:
    npc = make_combatant("npc", stamina=30, max_stamina=60, energy=2, rank=4.5, ascension_level=1)
    state = make_state([make_combatant("p1")], [npc], round_number=7)

    perception = build_perception(npc, state)

    assert perception.self_stamina_pct == pytest.approx(0.5)
    assert perception.self_energy == 2
    assert perception.self_rank == 4.5
    assert perception.self_ascension == 1
    assert perception.self_affinity == "fire"
    assert perception.round == 7


def test_actor_not_in_battle_raises() -> None:
    state = make_state([make_combatant("p1")], [make_combatant("e1")])

    with pytest.raises(ValueError):
        build_perception(make_combatant("ghost"), state)


def test_stamina_fraction_guards_zero_maximum() -> None:
    assert stamina_fraction(10, 0) == 0.0
    assert stamina_fraction(25, 100) == 0.25


def test_stamina_by_id_covers_both_sides() -> None:
    npc = make_combatant("npc")
    state = make_state([make_combatant("p1", stamina=10)], [npc, make_combatant("a1", stamina=50)])

    stamina = build_perception(npc, state).stamina_by_id()

    assert stamina == {"p1": pytest.approx(0.1), "a1": pytest.approx(0.5)}


def test_ally_target_projection_drops_relative_stats() -> None:
    npc = make_combatant("npc")
    state = make_state([make_combatant("p1", speed=5)], [npc, make_combatant("a1", stamina=50)])
    perception = build_perception(npc, state)

    ally_target = TargetPerception.from_ally(perception.allies[0])
    enemy_target = TargetPerception.from_enemy(perception.enemies[0])

    assert ally_target.speed_delta == 0.0
    assert ally_target.power == 0
    assert enemy_target.speed_delta == pytest.approx(1.0)
