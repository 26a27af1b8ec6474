"""Repository exports."""

from .archetypes_repo import ArchetypesRepository
from .base import RepositoryBase

__all__ = ["ArchetypesRepository", "RepositoryBase"]
