from __future__ import annotations

import pytest

from combatai.services import DEFAULT_EVALUATOR_CONFIG, EvaluatorConfig


def test_defaults_disable_group_actions() -> None:
    assert DEFAULT_EVALUATOR_CONFIG.group_actions_enabled is False
    assert EvaluatorConfig().to_dict() == {"group_actions_enabled": False}


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ({"group_actions_enabled": True}, True),
        ({"group_actions_enabled": "yes"}, False),
        ({"group_actions_enabled": 1}, False),
        ({}, False),
        (None, False),
        (["group_actions_enabled"], False),
    ],
)
def test_from_mapping_normalizes_flag(raw: object, expected: bool) -> None:
    assert EvaluatorConfig.from_mapping(raw).group_actions_enabled is expected


def test_round_trip_through_dict() -> None:
    config = EvaluatorConfig(group_actions_enabled=True)

    assert EvaluatorConfig.from_mapping(config.to_dict()) == config
