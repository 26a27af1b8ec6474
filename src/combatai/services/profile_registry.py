"""Archetype id to profile lookup."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping

from combatai.data.repositories import ArchetypesRepository
from combatai.domain.defs import ArchetypeProfile
from combatai.services.errors import UnknownArchetypeError

logger = logging.getLogger(__name__)


class ProfileRegistry:
    """Plain id -> profile map, populated once and read-only afterwards."""

    def __init__(self, profiles: Mapping[str, ArchetypeProfile]) -> None:
        self._profiles: Dict[str, ArchetypeProfile] = dict(profiles)

    @classmethod
    def from_profiles(cls, profiles: Iterable[ArchetypeProfile]) -> ProfileRegistry:
        return cls({profile.id: profile for profile in profiles})

    @classmethod
    def from_repository(cls, repository: ArchetypesRepository | None = None) -> ProfileRegistry:
        repository = repository or ArchetypesRepository()
        registry = cls.from_profiles(repository.all())
        logger.debug("Registered archetype profiles: %s", ", ".join(registry.ids()))
        return registry

    def get(self, archetype_id: str) -> ArchetypeProfile:
        """Return the profile for ``archetype_id``; never falls back to a default."""
        try:
            return self._profiles[archetype_id]
        except KeyError:
            raise UnknownArchetypeError(archetype_id) from None

    def ids(self) -> List[str]:
        return sorted(self._profiles)

    def __contains__(self, archetype_id: object) -> bool:
        return archetype_id in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)
