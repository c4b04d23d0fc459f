"""
Character stats module for the battle engine.

Handles the base stat record of a combatant and the pure functions deriving
its combat stats (HP, crit, dodge, armor and magic mitigation).
"""

from pydantic import BaseModel, Field

from ironfist.core.constants import (
    ARMOR_DENOMINATOR,
    ARMOR_REDUCTION_CAP,
    BASE_CRIT_CHANCE,
    BASE_CRIT_DAMAGE,
    BASE_DODGE,
    HP_PER_VIT,
    MAGIC_RESIST_CAP,
    MAGIC_RESIST_DENOM,
    MAX_CRIT_CHANCE,
    MAX_CRIT_DAMAGE_MULT,
    MAX_DODGE,
    MIN_MAX_HP,
)

STAT_NAMES = (
    "strength",
    "agility",
    "vitality",
    "endurance",
    "intelligence",
    "wisdom",
    "luck",
    "charisma",
)


class BaseStats(BaseModel):
    """The eight raw attributes of a combatant."""

    strength: int = Field(ge=0, description="Drives physical damage and crit damage.")
    agility: int = Field(ge=0, description="Drives crit, dodge and turn order.")
    vitality: int = Field(ge=0, description="Drives maximum HP.")
    endurance: int = Field(ge=0, description="Reduces physical damage, adds resist.")
    intelligence: int = Field(ge=0, description="Drives magic damage.")
    wisdom: int = Field(ge=0, description="Reduces magic damage, adds resist.")
    luck: int = Field(ge=0, description="Adds crit chance.")
    charisma: int = Field(ge=0, description="Not used in combat.")


class DerivedStats(BaseModel):
    """Combat stats computed once at battle start."""

    max_hp: int = Field(description="Maximum hit points.")
    crit_chance: float = Field(description="Critical hit chance, in percent.")
    crit_damage_mult: float = Field(description="Damage multiplier on a crit.")
    dodge_chance: float = Field(description="Dodge chance, in percent.")
    armor: int = Field(description="Flat armor value.")
    magic_resist: float = Field(description="Magic damage reduction, in percent.")


# ============================================================================
# DERIVATION FORMULAS
# ============================================================================


def get_max_hp(vitality: float) -> int:
    """Max HP is ten per vitality point, never below 100."""
    return int(max(MIN_MAX_HP, vitality * HP_PER_VIT))


def get_armor_reduction(armor: float) -> float:
    """
    Returns the fraction of physical damage absorbed by armor.

    Args:
        armor (float): The flat armor value.

    Returns:
        float: ``armor / (armor + 100)``, capped at 0.75, 0 for no armor.

    """
    if armor <= 0:
        return 0.0
    return min(ARMOR_REDUCTION_CAP, armor / (armor + ARMOR_DENOMINATOR))


def get_magic_resist_percent(wisdom: float) -> float:
    """
    Returns the fraction of magic damage resisted.

    Args:
        wisdom (float): The defender's wisdom.

    Returns:
        float: ``wisdom / (wisdom + 150)``, capped at 0.70, 0 for no wisdom.

    """
    if wisdom <= 0:
        return 0.0
    return min(MAGIC_RESIST_CAP, wisdom / (wisdom + MAGIC_RESIST_DENOM))


def get_crit_chance(agility: float, luck: float, equipment_bonus: float = 0) -> float:
    """Crit chance in percent: ``5 + AGI/10 + LCK/15 + equipment``, 0 to 50."""
    total = BASE_CRIT_CHANCE + agility / 10 + luck / 15 + equipment_bonus
    return min(MAX_CRIT_CHANCE, max(0.0, total))


def get_crit_damage_mult(strength: float, equipment_percent: float = 0) -> float:
    """Crit damage multiplier: ``1.5 + STR/500 + equipment%/100``, at most 2.8."""
    total = BASE_CRIT_DAMAGE + strength / 500 + equipment_percent / 100
    return min(MAX_CRIT_DAMAGE_MULT, total)


def get_dodge_chance(agility: float, equipment_bonus: float = 0) -> float:
    """Dodge chance in percent: ``3 + AGI/8 + equipment``, 0 to 40."""
    total = BASE_DODGE + agility / 8 + equipment_bonus
    return min(MAX_DODGE, max(0.0, total))


def compute_derived_stats(
    base: BaseStats,
    armor: int = 0,
    crit_equipment_bonus: float = 0,
    crit_damage_equipment_percent: float = 0,
    dodge_equipment_bonus: float = 0,
) -> DerivedStats:
    """
    Computes every derived combat stat from the base stats.

    Args:
        base (BaseStats):
            The (origin-adjusted) base stats.
        armor (int):
            Flat armor, already including equipment.
        crit_equipment_bonus (float):
            Additive crit chance from equipment, in percent.
        crit_damage_equipment_percent (float):
            Additive crit damage from equipment, in percent.
        dodge_equipment_bonus (float):
            Additive dodge chance from equipment, in percent.

    Returns:
        DerivedStats:
            The derived stats; ``magic_resist`` is expressed in percent.

    """
    return DerivedStats(
        max_hp=get_max_hp(base.vitality),
        crit_chance=get_crit_chance(base.agility, base.luck, crit_equipment_bonus),
        crit_damage_mult=get_crit_damage_mult(
            base.strength, crit_damage_equipment_percent
        ),
        dodge_chance=get_dodge_chance(base.agility, dodge_equipment_bonus),
        armor=armor,
        magic_resist=get_magic_resist_percent(base.wisdom) * 100,
    )
