"""Service-layer exceptions."""


class DecisionError(Exception):
    """Base exception for the decision engine."""


class UnknownArchetypeError(DecisionError):
    """Raised when a combatant's archetype has no registered profile."""

    def __init__(self, archetype_id: str) -> None:
        super().__init__(
            f"No archetype profile registered for '{archetype_id}'. "
            "Add it to the archetype definitions before evaluating this combatant."
        )
        self.archetype_id = archetype_id
