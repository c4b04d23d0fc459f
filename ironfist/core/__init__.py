"""
Core module for the battle engine.

Contains the balance constants and enumerations, the random source, the
run-time settings, logging setup and the shared console utilities. The
content repository lives in ``core.content``.
"""

from .constants import (
    AbilityType,
    BuffStat,
    CharacterClass,
    CharacterOrigin,
    FallbackReason,
    StatusEffectType,
)
from .rng import CombatRng, make_rng
from .settings import CombatSettings
from .utils import ContentError, GameException, cprint, crule

__all__ = [
    # Import from constants.py
    "AbilityType",
    "BuffStat",
    "CharacterClass",
    "CharacterOrigin",
    "FallbackReason",
    "StatusEffectType",
    # Import from rng.py
    "CombatRng",
    "make_rng",
    # Import from settings.py
    "CombatSettings",
    # Import from utils.py
    "ContentError",
    "GameException",
    "cprint",
    "crule",
]
