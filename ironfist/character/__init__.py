"""
Character module for the battle engine.

Handles stat derivation, origins, the per-battle combatant state and the
builder that assembles a combatant from raw stats and equipment.
"""

from .builder import (
    EquipmentBonuses,
    build_boss_combatant,
    build_combatant_state,
    build_preset_opponent,
    build_training_dummy,
)
from .character_origin import ORIGIN_DEFS, apply_origin_bonuses, has_cheat_death
from .character_stats import BaseStats, DerivedStats, compute_derived_stats
from .combatant import CombatantSnapshot, CombatantState

__all__ = [
    # Import from builder.py
    "EquipmentBonuses",
    "build_boss_combatant",
    "build_combatant_state",
    "build_preset_opponent",
    "build_training_dummy",
    # Import from character_origin.py
    "ORIGIN_DEFS",
    "apply_origin_bonuses",
    "has_cheat_death",
    # Import from character_stats.py
    "BaseStats",
    "DerivedStats",
    "compute_derived_stats",
    # Import from combatant.py
    "CombatantSnapshot",
    "CombatantState",
]
