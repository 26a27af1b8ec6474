"""Domain definition exports."""

from .archetype_def import ArchetypeProfile

__all__ = ["ArchetypeProfile"]
