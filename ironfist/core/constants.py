"""
Constants and enumerations for the battle engine.

Defines the balance numbers used by the combat formulas, together with the
enumerations for character classes, origins, status effects, ability types
and buff stats used throughout the engine.
"""

from enum import Enum

# ============================================================================
# COMBAT BALANCE
# ============================================================================

# Critical hits.
BASE_CRIT_CHANCE = 5
MAX_CRIT_CHANCE = 50
BASE_CRIT_DAMAGE = 1.5
MAX_CRIT_DAMAGE_MULT = 2.8

# Dodge.
BASE_DODGE = 3
MAX_DODGE = 40

# Armor and magic resist.
ARMOR_REDUCTION_CAP = 0.75
ARMOR_DENOMINATOR = 100
MAGIC_RESIST_CAP = 0.7
MAGIC_RESIST_DENOM = 150

# Hit points.
HP_PER_VIT = 10
MIN_MAX_HP = 100

# Defence factors in the damage formulas.
END_DEFENSE_FACTOR = 0.5
WIS_DEFENSE_FACTOR = 0.4

# Random damage variance.
DAMAGE_VARIANCE_MIN = 0.95
DAMAGE_VARIANCE_MAX = 1.05

# Turn limit.
MAX_TURNS = 15

# Armor break leaves this fraction of the armor while the status is active.
ARMOR_BREAK_MULT = 0.6
ARMOR_BREAK_DURATION = 2

# Resist chance cap, in percent.
RESIST_CHANCE_CAP = 60

# AI: probability of using an ability when one is available.
ENEMY_SKILL_USE_CHANCE = 0.6
PLAYER_AUTO_SKILL_CHANCE = 0.5

# Default duration of self-buffs, and of dodge buffs without explicit turns.
BUFF_DURATION = 3
DODGE_BUFF_DURATION = 2

# Reserved action labels.
BASIC_ACTION = "basic"
STATUS_TICK_ACTION = "status_tick"
STUN_ACTION = "stun"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").capitalize()


class CharacterClass(NiceEnum):
    """Defines the playable character classes."""

    WARRIOR = "warrior"
    ROGUE = "rogue"
    MAGE = "mage"
    TANK = "tank"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this class."""
        return {
            CharacterClass.WARRIOR: "⚔️",
            CharacterClass.ROGUE: "🗡️",
            CharacterClass.MAGE: "🔮",
            CharacterClass.TANK: "🛡️",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this class."""
        return {
            CharacterClass.WARRIOR: "bold red",
            CharacterClass.ROGUE: "bold green",
            CharacterClass.MAGE: "bold blue",
            CharacterClass.TANK: "bold yellow",
        }.get(self, "dim white")


class CharacterOrigin(NiceEnum):
    """Defines the character origins (races)."""

    HUMAN = "human"
    ORC = "orc"
    SKELETON = "skeleton"
    DEMON = "demon"
    DOGFOLK = "dogfolk"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this origin."""
        return {
            CharacterOrigin.HUMAN: "🧑",
            CharacterOrigin.ORC: "👹",
            CharacterOrigin.SKELETON: "💀",
            CharacterOrigin.DEMON: "😈",
            CharacterOrigin.DOGFOLK: "🐕",
        }.get(self, "❔")


class StatusEffectType(NiceEnum):
    """Defines the timed status effects that can be attached to a combatant."""

    BLEED = "bleed"
    POISON = "poison"
    STUN = "stun"
    BURN = "burn"
    SLOW = "slow"
    WEAKEN = "weaken"
    ARMOR_BREAK = "armor_break"
    BLIND = "blind"
    REGEN = "regen"
    BERSERK = "berserk"

    @property
    def tick_percent(self) -> float:
        """Fraction of max HP lost (or healed, for regen) on every tick."""
        return STATUS_TICK_PCT.get(self, 0.0)

    @property
    def is_damage_over_time(self) -> bool:
        return self in (
            StatusEffectType.BLEED,
            StatusEffectType.POISON,
            StatusEffectType.BURN,
        )

    @property
    def is_heal_over_time(self) -> bool:
        return self == StatusEffectType.REGEN

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this status effect."""
        return {
            StatusEffectType.BLEED: "🩸",
            StatusEffectType.POISON: "☠️",
            StatusEffectType.STUN: "💫",
            StatusEffectType.BURN: "🔥",
            StatusEffectType.SLOW: "🐌",
            StatusEffectType.WEAKEN: "🥀",
            StatusEffectType.ARMOR_BREAK: "🔨",
            StatusEffectType.BLIND: "🌫️",
            StatusEffectType.REGEN: "💚",
            StatusEffectType.BERSERK: "😤",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this status effect."""
        if self.is_damage_over_time:
            return "bold magenta"
        if self.is_heal_over_time:
            return "bold green"
        return "bold yellow"

    @property
    def colored_name(self) -> str:
        return f"[{self.color}]{self.display_name}[/]"


# Status effect damage (or healing) per tick, as a fraction of max HP.
STATUS_TICK_PCT: dict[StatusEffectType, float] = {
    StatusEffectType.BLEED: 0.05,
    StatusEffectType.POISON: 0.03,
    StatusEffectType.BURN: 0.04,
    StatusEffectType.REGEN: 0.05,
}


class AbilityType(NiceEnum):
    """Defines the effect shape of an ability."""

    PHYSICAL = "physical"
    MAGIC = "magic"
    BUFF = "buff"


class BuffStat(NiceEnum):
    """Defines the stats a self-buff can raise."""

    STRENGTH = "strength"
    ARMOR = "armor"
    RESIST = "resist"
    DODGE = "dodge"

    @property
    def short_name(self) -> str:
        return {
            BuffStat.STRENGTH: "STR",
            BuffStat.ARMOR: "Armor",
            BuffStat.RESIST: "Resistance",
            BuffStat.DODGE: "Dodge",
        }[self]


class FallbackReason(NiceEnum):
    """Why a requested ability was replaced by a basic attack."""

    UNKNOWN_ABILITY = "unknown_ability"
    ON_COOLDOWN = "on_cooldown"
    NOT_FIRST_STRIKE = "not_first_strike"
