"""
Damage module for the battle engine.

Handles the physical and magic damage formulas, the crit and dodge rolls,
and the application of damage to a combatant, including the cheat death
passive.
"""

import math

from catchery import log_debug

from ironfist.character.character_origin import get_cheat_death_chance, has_cheat_death
from ironfist.character.character_stats import (
    get_armor_reduction,
    get_magic_resist_percent,
)
from ironfist.character.combatant import CombatantState
from ironfist.core.constants import (
    DAMAGE_VARIANCE_MAX,
    DAMAGE_VARIANCE_MIN,
    END_DEFENSE_FACTOR,
    WIS_DEFENSE_FACTOR,
)
from ironfist.core.rng import CombatRng, roll_fraction, roll_percent


def random_variance(rng: CombatRng) -> float:
    """Returns a damage variance factor in [0.95, 1.05)."""
    return DAMAGE_VARIANCE_MIN + rng.random() * (DAMAGE_VARIANCE_MAX - DAMAGE_VARIANCE_MIN)


def calc_physical_damage(
    rng: CombatRng,
    *,
    attacker_str: float,
    defender_end: float,
    defender_armor: float,
    skill_multiplier: float,
    is_crit: bool,
    crit_damage_mult: float,
) -> int:
    """
    Computes the damage of one physical strike.

    Args:
        rng (CombatRng):
            Source of the variance roll.
        attacker_str (float):
            The attacker's strength.
        defender_end (float):
            The defender's endurance.
        defender_armor (float):
            The defender's effective armor.
        skill_multiplier (float):
            Strength multiplier, 1 for a basic attack.
        is_crit (bool):
            Whether the crit roll succeeded.
        crit_damage_mult (float):
            The attacker's crit damage multiplier.

    Returns:
        int:
            The damage dealt, at least 1.

    """
    base = max(1.0, attacker_str * skill_multiplier - defender_end * END_DEFENSE_FACTOR)
    armor_reduction = get_armor_reduction(defender_armor)
    crit_mult = crit_damage_mult if is_crit else 1.0
    variance = random_variance(rng)
    return max(1, math.floor(base * (1 - armor_reduction) * crit_mult * variance))


def calc_magic_damage(
    rng: CombatRng,
    *,
    attacker_int: float,
    defender_wis: float,
    spell_multiplier: float,
    is_crit: bool,
    crit_damage_mult: float,
) -> int:
    """
    Computes the damage of one magic strike. Armor plays no part; the
    defender's wisdom both lowers the base and sets the resist percent.

    Returns:
        int:
            The damage dealt, at least 1.

    """
    base = max(1.0, attacker_int * spell_multiplier - defender_wis * WIS_DEFENSE_FACTOR)
    magic_resist = get_magic_resist_percent(defender_wis)
    crit_mult = crit_damage_mult if is_crit else 1.0
    variance = random_variance(rng)
    return max(1, math.floor(base * (1 - magic_resist) * crit_mult * variance))


def roll_crit(rng: CombatRng, crit_chance: float) -> bool:
    return roll_percent(rng, crit_chance)


def roll_dodge(rng: CombatRng, dodge_chance: float) -> bool:
    return roll_percent(rng, dodge_chance)


def apply_damage(
    state: CombatantState,
    amount: int,
    rng: CombatRng,
) -> tuple[int, bool]:
    """
    Applies damage to a combatant, flooring its HP at 0.

    A lethal hit on a combatant whose origin grants cheating death, and
    which has more than 1 HP left, rolls the passive; on success the
    combatant is left at exactly 1 HP.

    Args:
        state (CombatantState):
            The combatant taking the hit.
        amount (int):
            The raw damage; amounts of 0 or less do nothing.
        rng (CombatRng):
            Source of the cheat death roll.

    Returns:
        tuple[int, bool]:
            The damage dealt and whether death was cheated.

    """
    if amount <= 0:
        return 0, False
    actual = max(1, math.floor(amount))
    if (
        state.current_hp - actual <= 0
        and has_cheat_death(state.origin)
        and state.current_hp > 1
        and roll_fraction(rng, get_cheat_death_chance(state.origin))
    ):
        log_debug(f"{state.name} cheated death.", {"damage": actual})
        state.current_hp = 1
        return actual, True
    state.lose_hp(actual)
    return actual, False
