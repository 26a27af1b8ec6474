from __future__ import annotations

import pytest

from combatai.core.types import ACTION_TYPES, ELEMENTAL_AFFINITIES
from combatai.domain.decision_models import ScoredCandidate
from combatai.domain.tie_breaking import AFFINITY_TIEBREAK, resolve_tie, tiebreak_index


def _candidate(action_type: str, target_id: str | None = None) -> ScoredCandidate:
    return ScoredCandidate(action_type=action_type, target_id=target_id, score=1.0)


def test_every_affinity_orders_every_action_once() -> None:
    assert set(AFFINITY_TIEBREAK) == set(ELEMENTAL_AFFINITIES)
    for order in AFFINITY_TIEBREAK.values():
        assert sorted(order) == sorted(ACTION_TYPES)
        assert order[-1] == "group"


def test_affinity_preference_decides_kind() -> None:
    tied = [_candidate("defend", "a1"), _candidate("attack", "p1"), _candidate("evade")]

    assert resolve_tie(tied, "fire", {"a1": 0.5, "p1": 0.5}).action_type == "attack"
    assert resolve_tie(tied, "water", {"a1": 0.5, "p1": 0.5}).action_type == "defend"
    assert resolve_tie(tied, "air", {"a1": 0.5, "p1": 0.5}).action_type == "evade"


def test_same_kind_prefers_lowest_target_stamina() -> None:
    tied = [_candidate("attack", "p1"), _candidate("attack", "p2"), _candidate("attack", "p3")]

    winner = resolve_tie(tied, "shadow", {"p1": 0.7, "p2": 0.2, "p3": 0.4})

    assert winner.target_id == "p2"


def test_full_key_tie_keeps_first_candidate() -> None:
    tied = [_candidate("attack", "p1"), _candidate("attack", "p2")]

    assert resolve_tie(tied, "fire", {"p1": 0.5, "p2": 0.5}).target_id == "p1"


def test_single_candidate_is_returned_unchanged() -> None:
    only = _candidate("special", "p1")

    assert resolve_tie([only], "light", {}) is only


def test_empty_tie_raises() -> None:
    with pytest.raises(ValueError):
        resolve_tie([], "earth", {})


def test_tiebreak_index_reads_table() -> None:
    assert tiebreak_index("light", "special") == 0
    assert tiebreak_index("earth", "evade") == 3
