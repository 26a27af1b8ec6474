"""Decision domain models: per-kind scores, candidates and committed actions."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional

from combatai.core.types import ActionType

if TYPE_CHECKING:
    from combatai.domain.perception import Perception, TargetPerception


@dataclass(frozen=True, slots=True)
class ActionScores:
    """One score per action kind, usually within -1.0..1.0."""

    attack: float = 0.0
    defend: float = 0.0
    evade: float = 0.0
    special: float = 0.0
    group: float = 0.0

    @classmethod
    def zeros(cls) -> ActionScores:
        return cls()

    def for_action(self, action_type: ActionType) -> float:
        return getattr(self, action_type)

    def lerp(self, other: ActionScores, t: float) -> ActionScores:
        """Linearly interpolate towards ``other``; t=0 returns self, t=1 returns other."""
        return ActionScores(
            attack=self.attack + (other.attack - self.attack) * t,
            defend=self.defend + (other.defend - self.defend) * t,
            evade=self.evade + (other.evade - self.evade) * t,
            special=self.special + (other.special - self.special) * t,
            group=self.group + (other.group - self.group) * t,
        )


FactorFn = Callable[["Perception", Optional["TargetPerception"]], ActionScores]


@dataclass(frozen=True, slots=True)
class ScoringFactor:
    """A named, stateless scoring function; the name keys profile weights."""

    name: str
    evaluate: FactorFn


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    """Intermediate result for one (action, target) pair inside an evaluation."""

    action_type: ActionType
    target_id: str | None
    score: float
    breakdown: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True, slots=True)
class CommittedAction:
    """The action an NPC commits to for the round."""

    combatant_id: str
    action_type: ActionType
    target_id: str | None = None
    energy_segments: int | None = None
