"""
Tests for the self-buffs granted by buff abilities, with and without
reversal on expiry.
"""

import pytest

from ironfist.actions.abilities import get_ability_by_id, get_boss_ability_by_id
from ironfist.combat.combat_manager import CombatSimulator
from ironfist.core.constants import BuffStat, CharacterClass, StatusEffectType
from ironfist.core.settings import CombatSettings
from ironfist.effects.buff_effect import Buff
from ironfist.effects.effect_manager import StatusEffectEngine


@pytest.fixture
def keep_engine(scripted_rng):
    return StatusEffectEngine(scripted_rng(), CombatSettings())


@pytest.fixture
def revert_engine(scripted_rng):
    return StatusEffectEngine(
        scripted_rng(), CombatSettings(revert_buffs_on_expiry=True)
    )


@pytest.fixture
def battle_cry():
    return get_ability_by_id(CharacterClass.WARRIOR, "battle_cry")


def tick_turns(engine, state, turns):
    for turn in range(1, turns + 1):
        engine.tick(state, turn)


def test_strength_buff_raises_live_strength(keep_engine, make_combatant, battle_cry):
    """
    Test that Battle Cry adds 30% strength and tracks a separate buff.
    """
    warrior = make_combatant(strength=100)
    messages = keep_engine.apply_self_buff(warrior, battle_cry)
    assert messages == ["+30% STR"]
    assert warrior.base_stats.strength == 130
    assert warrior.status_effects == []
    assert [(b.stat, b.amount, b.duration) for b in warrior.buffs] == [
        (BuffStat.STRENGTH, 30, 3)
    ]


def test_strength_buff_is_kept_after_expiry(keep_engine, make_combatant, battle_cry):
    """
    Test the default behaviour: the raise outlives the buff entry.
    """
    warrior = make_combatant(strength=100)
    keep_engine.apply_self_buff(warrior, battle_cry)
    tick_turns(keep_engine, warrior, 3)
    assert warrior.buffs == []
    assert warrior.base_stats.strength == 130


def test_strength_buff_is_reverted_after_expiry(revert_engine, make_combatant, battle_cry):
    """
    Test that with reversal enabled the raise ends with the buff.
    """
    warrior = make_combatant(strength=100)
    revert_engine.apply_self_buff(warrior, battle_cry)
    tick_turns(revert_engine, warrior, 2)
    assert warrior.base_stats.strength == 130
    tick_turns(revert_engine, warrior, 1)
    assert warrior.buffs == []
    assert warrior.base_stats.strength == 100


def test_armor_buff(revert_engine, make_combatant):
    """
    Test that Iron Wall raises live armor by 80% and reverts it.
    """
    tank = make_combatant(character_class="tank", armor=50)
    messages = revert_engine.apply_self_buff(
        tank, get_ability_by_id(CharacterClass.TANK, "iron_wall")
    )
    assert messages == ["+80% Armor"]
    assert tank.armor == 90
    tick_turns(revert_engine, tank, 3)
    assert tank.armor == 50


def test_armor_buff_reverted_after_armor_break(scripted_rng, make_combatant):
    """
    Test that an armor break during Iron Wall keeps its share on expiry:
    the tank ends where the break alone would have left its armor.
    """
    warrior = make_combatant(id="warrior", level=20, strength=100)
    tank = make_combatant(
        id="tank", character_class="tank", level=10, armor=100, vitality=100
    )
    simulator = CombatSimulator(
        warrior,
        tank,
        rng=scripted_rng(),
        settings=CombatSettings(revert_buffs_on_expiry=True),
    )
    simulator.turn = 1
    simulator.resolve_attack(tank, warrior, "iron_wall")
    assert tank.armor == 180
    simulator.resolve_attack(warrior, tank, "titan_slam")
    assert tank.armor == 90
    tick_turns(simulator.effects, tank, 3)
    assert tank.buffs == []
    assert tank.armor == 50


def test_buff_remaining_amount():
    """
    Test the share of a raise left after the stat was cut by a fraction.
    """
    buff = Buff(stat=BuffStat.ARMOR, amount=80, duration=0, raised_to=180)
    assert buff.remaining_amount(180) == 80
    assert buff.remaining_amount(90) == 40
    assert Buff(stat=BuffStat.ARMOR, amount=5, duration=0).remaining_amount(3) == 5


def test_resist_buff_raises_resist_chance(keep_engine, make_combatant):
    """
    Test that Immovable Object adds 60 points of resist chance for 3 turns.
    """
    tank = make_combatant(character_class="tank", endurance=100, wisdom=150)
    assert keep_engine.resist_chance_of(tank) == pytest.approx(20)
    messages = keep_engine.apply_self_buff(
        tank, get_ability_by_id(CharacterClass.TANK, "immovable_object")
    )
    assert messages == ["+60% Resistance"]
    assert keep_engine.resist_chance_of(tank) == pytest.approx(80)
    tick_turns(keep_engine, tank, 3)
    assert keep_engine.resist_chance_of(tank) == pytest.approx(20)


def test_dodge_buff_is_capped_and_expires(revert_engine, make_combatant):
    """
    Test that Shadow Step raises dodge up to 40 for two turns.
    """
    rogue = make_combatant(character_class="rogue", agility=40)
    assert rogue.effective_dodge == pytest.approx(8)
    messages = revert_engine.apply_self_buff(
        rogue, get_ability_by_id(CharacterClass.ROGUE, "shadow_step")
    )
    assert messages == ["+50% Dodge for 2 turns"]
    assert rogue.effective_dodge == 40
    assert rogue.buffs[0].duration == 2
    tick_turns(revert_engine, rogue, 2)
    assert rogue.effective_dodge == pytest.approx(8)


def test_dodge_buff_without_reversal_stays(keep_engine, make_combatant):
    """
    Test the default behaviour for dodge: the raise is kept.
    """
    rogue = make_combatant(character_class="rogue", agility=40)
    keep_engine.apply_self_buff(rogue, get_ability_by_id(CharacterClass.ROGUE, "shadow_step"))
    tick_turns(keep_engine, rogue, 2)
    assert rogue.buffs == []
    assert rogue.effective_dodge == 40


def test_regeneration_buff_grants_regen(keep_engine, make_combatant):
    """
    Test that the boss regeneration buff grants a real regen effect.
    """
    boss = make_combatant(id="boss", vitality=50)
    boss.lose_hp(200)
    messages = keep_engine.apply_self_buff(boss, get_boss_ability_by_id("boss_regeneration"))
    assert messages == ["Regeneration 8% for 3 turns"]
    regen = boss.get_status(StatusEffectType.REGEN)
    assert (regen.duration, regen.value) == (3, 8)
    entry = keep_engine.tick(boss, turn=1)
    assert entry.status_ticks[0].healed == 40
    assert boss.current_hp == 340
