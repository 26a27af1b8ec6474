"""Service layer exports."""

from .config import DEFAULT_EVALUATOR_CONFIG, EvaluatorConfig
from .decision_service import DecisionService, evaluate, get_default_service
from .errors import DecisionError, UnknownArchetypeError
from .profile_registry import ProfileRegistry

__all__ = [
    "DEFAULT_EVALUATOR_CONFIG",
    "DecisionError",
    "DecisionService",
    "EvaluatorConfig",
    "ProfileRegistry",
    "UnknownArchetypeError",
    "evaluate",
    "get_default_service",
]
