"""Deterministic combat decision engine for non-player combatants."""

from combatai.core.types import ACTION_TYPES, ELEMENTAL_AFFINITIES, ActionType, ElementalAffinity
from combatai.domain.battle_models import BattleState, Combatant, CombatStats
from combatai.domain.decision_models import ActionScores, CommittedAction, ScoredCandidate
from combatai.domain.defs import ArchetypeProfile
from combatai.domain.perception import Perception, build_perception
from combatai.domain.rank_coefficient import rank_coefficient
from combatai.services import (
    DecisionError,
    DecisionService,
    EvaluatorConfig,
    ProfileRegistry,
    UnknownArchetypeError,
    evaluate,
)

__all__ = [
    "ACTION_TYPES",
    "ELEMENTAL_AFFINITIES",
    "ActionScores",
    "ActionType",
    "ArchetypeProfile",
    "BattleState",
    "CombatStats",
    "Combatant",
    "CommittedAction",
    "DecisionError",
    "DecisionService",
    "ElementalAffinity",
    "EvaluatorConfig",
    "Perception",
    "ProfileRegistry",
    "ScoredCandidate",
    "UnknownArchetypeError",
    "build_perception",
    "evaluate",
    "rank_coefficient",
]
