"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

ActionType = Literal["attack", "defend", "evade", "special", "group"]
ElementalAffinity = Literal["fire", "water", "air", "earth", "shadow", "light"]
Side = Literal["player_party", "enemy_party"]

ACTION_TYPES: Tuple[ActionType, ...] = ("attack", "defend", "evade", "special", "group")
ELEMENTAL_AFFINITIES: Tuple[ElementalAffinity, ...] = ("fire", "water", "air", "earth", "shadow", "light")

__all__ = ["ActionType", "ElementalAffinity", "Side", "ACTION_TYPES", "ELEMENTAL_AFFINITIES"]
