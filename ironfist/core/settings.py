"""
Run-time settings for the battle engine.

The balance formulas use the constants in ``core.constants``; the knobs in
this module change how a single battle is driven and can be overridden from
the environment with ``IRONFIST_*`` variables.
"""

import os
from typing import Any

from pydantic import BaseModel, Field

from .constants import (
    BUFF_DURATION,
    ENEMY_SKILL_USE_CHANCE,
    MAX_TURNS,
    PLAYER_AUTO_SKILL_CHANCE,
)

ENV_PREFIX = "IRONFIST_"


class CombatSettings(BaseModel):
    """Knobs controlling how a battle is simulated."""

    max_turns: int = Field(
        MAX_TURNS,
        ge=1,
        description="Hard upper bound on the number of turns in a battle.",
    )
    enemy_skill_use_chance: float = Field(
        ENEMY_SKILL_USE_CHANCE,
        ge=0.0,
        le=1.0,
        description="Chance that the enemy uses an available boss ability.",
    )
    player_auto_skill_chance: float = Field(
        PLAYER_AUTO_SKILL_CHANCE,
        ge=0.0,
        le=1.0,
        description=(
            "Chance that the player side uses an available ability once "
            "the supplied choices are exhausted."
        ),
    )
    buff_duration: int = Field(
        BUFF_DURATION,
        ge=1,
        description="Duration in turns of stat self-buffs.",
    )
    revert_buffs_on_expiry: bool = Field(
        False,
        description=(
            "When True, the stat raised by a self-buff is restored when the "
            "buff expires. When False the raise is kept for the whole battle."
        ),
    )
    verbose: bool = Field(
        False,
        description="Echo every log entry to the console while simulating.",
    )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "CombatSettings":
        """
        Builds settings from ``IRONFIST_<FIELD>`` environment variables.

        Args:
            environ (dict[str, str] | None):
                The mapping to read, defaults to ``os.environ``.

        Returns:
            CombatSettings:
                The validated settings, defaults for missing variables.

        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw
        return cls.model_validate(values)
