"""
Base ability module for the battle engine.

Defines the static definition shared by player class abilities and boss
abilities: the effect shape, the multiplier and the optional modifiers.
"""

from typing import Any

from pydantic import BaseModel, Field

from ironfist.core.constants import AbilityType, BuffStat, StatusEffectType


class StatusSpec(BaseModel):
    """A status effect an ability may inflict on its target."""

    chance: float = Field(ge=0.0, le=1.0, description="Chance to inflict (0-1).")
    duration: int = Field(ge=1, description="Duration in turns.")
    type: StatusEffectType = Field(description="The status effect inflicted.")


class AbilityDef(BaseModel):
    """
    Static definition of an ability. Instances are shared read-only tables
    and must never be mutated.
    """

    id: str = Field(description="Unique ability identifier.")
    name: str = Field(description="Display name.")
    unlock_level: int = Field(0, ge=0, description="Level required (players only).")
    type: AbilityType = Field(description="Physical, magic or buff.")
    multiplier: float = Field(
        0.0,
        ge=0.0,
        description="STR multiplier for physical, INT multiplier for magic.",
    )
    cooldown: int = Field(0, ge=0, description="Turns before it can be reused.")
    hits: int | None = Field(None, ge=1, description="Number of strikes.")
    status: StatusSpec | None = Field(None, description="Status to inflict.")
    self_buff: dict[str, float] = Field(
        default_factory=dict,
        description="Self-buff percentages keyed by stat (str, armor, resist, regen).",
    )
    armor_break: float | None = Field(
        None,
        gt=0.0,
        le=1.0,
        description="Fraction of the target's armor removed on hit.",
    )
    crit_bonus: float = Field(0.0, description="Additive crit chance for this use.")
    dodge_bonus: float = Field(0.0, ge=0.0, description="Self dodge bonus, percent.")
    dodge_bonus_turns: int | None = Field(None, ge=1, description="Dodge buff turns.")
    first_strike_only: bool = Field(
        False,
        description="Usable only as the caster's first action of the battle.",
    )
    execute_threshold: float | None = Field(
        None,
        gt=0.0,
        le=1.0,
        description="Target HP fraction under which bonus damage applies.",
    )

    model_config = {"frozen": True}

    @property
    def is_buff(self) -> bool:
        return self.type == AbilityType.BUFF

    @property
    def is_magic(self) -> bool:
        return self.type == AbilityType.MAGIC

    def model_post_init(self, _: Any) -> None:
        allowed = {"str", "strength", "armor", "resist", "regen"}
        unknown = set(self.self_buff) - allowed
        if unknown:
            raise ValueError(f"Unknown self-buff stats: {sorted(unknown)}")
        if self.type != AbilityType.BUFF and self.multiplier <= 0:
            raise ValueError("Damaging abilities need a positive multiplier.")


def self_buff_stat(key: str) -> BuffStat | None:
    """Maps a ``self_buff`` key to the buffed stat, None for regen."""
    return {
        "str": BuffStat.STRENGTH,
        "strength": BuffStat.STRENGTH,
        "armor": BuffStat.ARMOR,
        "resist": BuffStat.RESIST,
    }.get(key)
