"""Decision service choosing one combat action per NPC per round."""
from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Sequence, Tuple

from combatai.core.types import ActionType, Side
from combatai.domain.battle_models import BattleState, Combatant
from combatai.domain.decision_models import CommittedAction, ScoredCandidate, ScoringFactor
from combatai.domain.defs import ArchetypeProfile
from combatai.domain.factors import FACTORS
from combatai.domain.perception import Perception, TargetPerception, build_perception
from combatai.domain.rank_coefficient import rank_coefficient
from combatai.domain.tie_breaking import resolve_tie, tiebreak_key
from combatai.services.config import DEFAULT_EVALUATOR_CONFIG, EvaluatorConfig
from combatai.services.profile_registry import ProfileRegistry

logger = logging.getLogger(__name__)

ALWAYS_LEGAL: Tuple[ActionType, ...] = ("attack", "defend", "evade")
OFFENSIVE_KINDS = frozenset({"attack", "special"})
UNTARGETED_KINDS = frozenset({"evade", "group"})

_Target = Tuple[str | None, TargetPerception | None]


class DecisionService:
    """Utility-scoring evaluator for non-player combatants.

    Every legal (action, target) pair is scored as

        base_score + sum(weight * factor_score) * rank_coefficient

    and the best one is committed. Ties fall to the archetype's elemental
    affinity order, then to the weakest target. The service keeps no state
    between calls beyond its read-only registry.
    """

    def __init__(
        self,
        registry: ProfileRegistry | None = None,
        factors: Sequence[ScoringFactor] = FACTORS,
    ) -> None:
        self._registry = registry if registry is not None else ProfileRegistry.from_repository()
        self._factors: Tuple[ScoringFactor, ...] = tuple(factors)

    @property
    def registry(self) -> ProfileRegistry:
        return self._registry

    # -----------------------
    # Decisions
    # -----------------------
    def evaluate(
        self,
        actor: Combatant,
        battle_state: BattleState,
        config: EvaluatorConfig | None = None,
    ) -> CommittedAction:
        """Return the action ``actor`` commits to this round.

        Raises UnknownArchetypeError when the actor's archetype is not
        registered. The caller must not pass a downed actor.
        """
        profile = self._registry.get(actor.archetype_id)
        perception = build_perception(actor, battle_state)
        candidates = self._score(profile, perception, actor.rank, config or DEFAULT_EVALUATOR_CONFIG)

        if not candidates:
            logger.warning("No candidates for %s; falling back to evade.", actor.instance_id)
            return CommittedAction(combatant_id=actor.instance_id, action_type="evade")

        top_score = max(candidate.score for candidate in candidates)
        tied = [candidate for candidate in candidates if candidate.score == top_score]
        winner = resolve_tie(tied, profile.elemental_affinity, perception.stamina_by_id())

        logger.debug(
            "%s (%s) commits %s -> %s with score %.4f (%d candidates, %d tied)",
            actor.instance_id,
            profile.id,
            winner.action_type,
            winner.target_id,
            winner.score,
            len(candidates),
            len(tied),
        )
        return self._commit(actor, winner)

    def evaluate_party(
        self,
        battle_state: BattleState,
        side: Side = "enemy_party",
        config: EvaluatorConfig | None = None,
    ) -> List[CommittedAction]:
        """Evaluate every non-KO member of one roster, in roster order."""
        return [
            self.evaluate(member, battle_state, config)
            for member in battle_state.roster(side)
            if not member.is_ko
        ]

    # -----------------------
    # Introspection
    # -----------------------
    def score_candidates(
        self,
        actor: Combatant,
        battle_state: BattleState,
        config: EvaluatorConfig | None = None,
    ) -> List[ScoredCandidate]:
        """Return every legal candidate with its score breakdown, in enumeration order."""
        profile = self._registry.get(actor.archetype_id)
        perception = build_perception(actor, battle_state)
        return self._score(profile, perception, actor.rank, config or DEFAULT_EVALUATOR_CONFIG)

    def rank_candidates(
        self,
        actor: Combatant,
        battle_state: BattleState,
        config: EvaluatorConfig | None = None,
    ) -> List[ScoredCandidate]:
        """Return the candidates best-first; the head is what ``evaluate`` commits."""
        profile = self._registry.get(actor.archetype_id)
        perception = build_perception(actor, battle_state)
        candidates = self._score(profile, perception, actor.rank, config or DEFAULT_EVALUATOR_CONFIG)
        stamina = perception.stamina_by_id()
        return sorted(
            candidates,
            key=lambda c: (-c.score, *tiebreak_key(c, profile.elemental_affinity, stamina)),
        )

    # -----------------------
    # Helpers
    # -----------------------
    def _score(
        self,
        profile: ArchetypeProfile,
        perception: Perception,
        rank: float,
        config: EvaluatorConfig,
    ) -> List[ScoredCandidate]:
        coefficient = rank_coefficient(rank)
        candidates: List[ScoredCandidate] = []
        for action_type in self._legal_action_types(perception, config):
            base_score = profile.base_scores.for_action(action_type)
            for target_id, target in self._legal_targets(action_type, perception):
                breakdown: Dict[str, float] = {}
                factor_sum = 0.0
                for factor in self._factors:
                    contribution = profile.weight_for(factor.name) * factor.evaluate(perception, target).for_action(
                        action_type
                    )
                    breakdown[factor.name] = contribution
                    factor_sum += contribution
                candidates.append(
                    ScoredCandidate(
                        action_type=action_type,
                        target_id=target_id,
                        score=base_score + factor_sum * coefficient,
                        breakdown=MappingProxyType(breakdown),
                    )
                )
        return candidates

    @staticmethod
    def _legal_action_types(perception: Perception, config: EvaluatorConfig) -> List[ActionType]:
        action_types: List[ActionType] = list(ALWAYS_LEGAL)
        if perception.self_energy >= 1:
            action_types.append("special")
        if config.group_actions_enabled:
            action_types.append("group")
        return action_types

    @staticmethod
    def _legal_targets(action_type: ActionType, perception: Perception) -> List[_Target]:
        if action_type in OFFENSIVE_KINDS:
            return [(enemy.id, TargetPerception.from_enemy(enemy)) for enemy in perception.living_enemies]
        if action_type == "defend":
            return [(ally.id, TargetPerception.from_ally(ally)) for ally in perception.living_allies]
        if action_type in UNTARGETED_KINDS:
            return [(None, None)]
        return []

    @staticmethod
    def _commit(actor: Combatant, winner: ScoredCandidate) -> CommittedAction:
        # Special always commits the whole energy reserve.
        energy_segments = actor.stats.energy if winner.action_type == "special" else None
        return CommittedAction(
            combatant_id=actor.instance_id,
            action_type=winner.action_type,
            target_id=winner.target_id,
            energy_segments=energy_segments,
        )


@lru_cache(maxsize=1)
def get_default_service() -> DecisionService:
    """Return a shared service backed by the packaged archetype definitions."""
    return DecisionService()


def evaluate(
    actor: Combatant,
    battle_state: BattleState,
    config: EvaluatorConfig | None = None,
) -> CommittedAction:
    """Evaluate ``actor`` with the default service."""
    return get_default_service().evaluate(actor, battle_state, config)
