"""
Character origin module for the battle engine.

Defines the origins (races) a character can pick, their percentage stat
modifiers and their optional passive, such as the dogfolk "Cheating Death".
"""

import math

from pydantic import BaseModel, Field

from ironfist.core.constants import CharacterOrigin

from .character_stats import STAT_NAMES, BaseStats

CHEAT_DEATH_PASSIVE = "cheating_death"


class OriginPassive(BaseModel):
    """A non-stat passive granted by an origin."""

    id: str = Field(description="Unique passive identifier.")
    name: str = Field(description="Display name of the passive.")
    chance: float = Field(ge=0.0, le=1.0, description="Trigger chance (0-1).")
    description: str = Field("", description="What the passive does.")


class OriginDef(BaseModel):
    """Static definition of an origin."""

    id: CharacterOrigin = Field(description="The origin this entry defines.")
    label: str = Field(description="Display label.")
    description: str = Field("", description="Flavour description.")
    bonus_description: str = Field("", description="Short bonus summary.")
    stat_modifiers: dict[str, float] = Field(
        default_factory=dict,
        description="Percentage modifiers per stat, e.g. 0.05 for +5%.",
    )
    passive: OriginPassive | None = Field(
        None,
        description="Optional passive ability.",
    )


ORIGIN_DEFS: dict[CharacterOrigin, OriginDef] = {
    CharacterOrigin.HUMAN: OriginDef(
        id=CharacterOrigin.HUMAN,
        label="Human",
        description="Versatile and adaptable, balanced in all aspects",
        bonus_description="+5% to all stats",
        stat_modifiers={stat: 0.05 for stat in STAT_NAMES},
    ),
    CharacterOrigin.ORC: OriginDef(
        id=CharacterOrigin.ORC,
        label="Orc",
        description="Brutal warriors, feared for their raw strength",
        bonus_description="+8% STR, -3% END",
        stat_modifiers={"strength": 0.08, "endurance": -0.03},
    ),
    CharacterOrigin.SKELETON: OriginDef(
        id=CharacterOrigin.SKELETON,
        label="Skeleton",
        description="Undead remnants, swift and eerily lucky",
        bonus_description="+6% AGI, +4% LCK",
        stat_modifiers={"agility": 0.06, "luck": 0.04},
    ),
    CharacterOrigin.DEMON: OriginDef(
        id=CharacterOrigin.DEMON,
        label="Demon",
        description="Infernal beings, armored in hellfire and resilience",
        bonus_description="+8% END, +5% VIT",
        stat_modifiers={"endurance": 0.08, "vitality": 0.05},
    ),
    CharacterOrigin.DOGFOLK: OriginDef(
        id=CharacterOrigin.DOGFOLK,
        label="Dogfolk",
        description="Loyal canine warriors, they refuse to stay down",
        bonus_description="5% chance to cheat death (survive at 1 HP)",
        passive=OriginPassive(
            id=CHEAT_DEATH_PASSIVE,
            name="Cheating Death",
            chance=0.05,
            description="5% chance to survive a killing blow with 1 HP",
        ),
    ),
}


def apply_origin_bonuses(base: BaseStats, origin: CharacterOrigin | None) -> BaseStats:
    """
    Applies an origin's percentage modifiers to a copy of the base stats.

    Each stat is multiplied by ``1 + modifier`` and floored; modifiers never
    compound with each other.

    Args:
        base (BaseStats):
            The raw base stats.
        origin (CharacterOrigin | None):
            The origin, if any.

    Returns:
        BaseStats:
            A new record with the bonuses applied.

    """
    if origin is None or origin not in ORIGIN_DEFS:
        return base.model_copy()
    mods = ORIGIN_DEFS[origin].stat_modifiers
    return BaseStats(
        **{
            stat: math.floor(getattr(base, stat) * (1 + mods.get(stat, 0.0)))
            for stat in STAT_NAMES
        }
    )


def has_cheat_death(origin: CharacterOrigin | None) -> bool:
    """Checks if the origin carries the cheating death passive."""
    if origin is None or origin not in ORIGIN_DEFS:
        return False
    passive = ORIGIN_DEFS[origin].passive
    return passive is not None and passive.id == CHEAT_DEATH_PASSIVE


def get_cheat_death_chance(origin: CharacterOrigin | None) -> float:
    """Returns the cheating death chance (0-1), 0 for other origins."""
    if not has_cheat_death(origin):
        return 0.0
    passive = ORIGIN_DEFS[origin].passive
    return passive.chance if passive else 0.0
