"""
Effects package for the battle engine.

Contains the status effect and buff records attached to combatants. The
engine that ticks and applies them lives in ``effects.effect_manager``.
"""

from .base_effect import StatusEffect
from .buff_effect import Buff

__all__ = [
    "StatusEffect",
    "Buff",
]
