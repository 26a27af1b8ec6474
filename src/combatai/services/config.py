"""Evaluator feature flags passed per call."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class EvaluatorConfig:
    """Runtime toggles for one evaluation.

    Group actions stay off until the team-action mechanic ships.
    """

    group_actions_enabled: bool = False

    @classmethod
    def from_mapping(cls, raw: object) -> EvaluatorConfig:
        """Build a config from loosely typed input, falling back to defaults."""
        if not isinstance(raw, Mapping):
            return cls()
        return cls(group_actions_enabled=_normalize_flag(raw.get("group_actions_enabled")))

    def to_dict(self) -> dict[str, bool]:
        return {"group_actions_enabled": self.group_actions_enabled}


def _normalize_flag(value: object) -> bool:
    return value is True


DEFAULT_EVALUATOR_CONFIG = EvaluatorConfig()
