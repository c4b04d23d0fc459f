"""
Abilities package for the battle engine.

Contains the ability definition model, the player class and boss ability
tables, and the lookup helpers used by the simulator.
"""

from .ability_catalog import (
    find_ability,
    get_abilities_for_class,
    get_ability_by_id,
    get_boss_ability_by_id,
    is_boss_ability,
)
from .base_ability import AbilityDef, StatusSpec, self_buff_stat
from .boss_abilities import BOSS_ABILITIES
from .class_abilities import CLASS_ABILITIES

__all__ = [
    "AbilityDef",
    "StatusSpec",
    "self_buff_stat",
    "BOSS_ABILITIES",
    "CLASS_ABILITIES",
    "find_ability",
    "get_abilities_for_class",
    "get_ability_by_id",
    "get_boss_ability_by_id",
    "is_boss_ability",
]
