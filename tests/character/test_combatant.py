"""
Tests for the per-battle combatant state.
"""

import pytest

from ironfist.core.constants import BuffStat, StatusEffectType
from ironfist.effects.base_effect import StatusEffect
from ironfist.effects.buff_effect import Buff


def test_hp_changes_stay_in_bounds(make_combatant):
    """
    Test that losing and healing HP never leaves the 0..max range.
    """
    state = make_combatant()
    state.lose_hp(30)
    assert state.current_hp == 70
    state.heal(500)
    assert state.current_hp == state.max_hp
    state.lose_hp(1_000)
    assert state.current_hp == 0
    assert state.is_dead()


def test_current_hp_cannot_exceed_max(make_combatant):
    """
    Test that a state with more HP than its maximum is rejected.
    """
    state = make_combatant()
    data = state.model_dump()
    data["current_hp"] = state.max_hp + 1
    with pytest.raises(ValueError):
        type(state).model_validate(data)


def test_effective_armor_with_armor_break(make_combatant):
    """
    Test that armor break cuts the effective armor to 60%.
    """
    state = make_combatant(armor=55)
    assert state.effective_armor == 55
    state.status_effects.append(StatusEffect(type=StatusEffectType.ARMOR_BREAK, duration=2))
    assert state.effective_armor == 33


def test_effective_crit_and_dodge_are_capped(make_combatant):
    """
    Test that crit bonuses and dodge buffs respect their caps.
    """
    state = make_combatant(agility=400, luck=0)
    assert state.effective_crit(0) == 45
    assert state.effective_crit(20) == 50
    state.derived.dodge_chance = 75
    assert state.effective_dodge == 40


def test_cooldowns(make_combatant):
    """
    Test starting and decrementing cooldowns.
    """
    state = make_combatant()
    assert not state.is_on_cooldown("heavy_strike")
    state.start_cooldown("heavy_strike", 2)
    assert state.is_on_cooldown("heavy_strike")
    state.decrement_cooldowns()
    state.decrement_cooldowns()
    state.decrement_cooldowns()
    assert state.cooldown_of("heavy_strike") == 0
    assert not state.is_on_cooldown("heavy_strike")


def test_buff_total(make_combatant):
    """
    Test summing the active buffs of one stat.
    """
    state = make_combatant()
    state.buffs.append(Buff(stat=BuffStat.RESIST, amount=30, duration=3))
    state.buffs.append(Buff(stat=BuffStat.RESIST, amount=20, duration=1))
    state.buffs.append(Buff(stat=BuffStat.ARMOR, amount=5, duration=1))
    assert state.buff_total(BuffStat.RESIST) == 50


def test_snapshot_is_detached(make_combatant):
    """
    Test that the snapshot does not follow later changes to the state.
    """
    state = make_combatant(origin="dogfolk")
    snapshot = state.to_snapshot()
    state.base_stats.strength = 99
    state.lose_hp(10)
    assert snapshot.base_stats.strength == 10
    assert snapshot.current_hp == state.max_hp
    assert snapshot.origin == state.origin
