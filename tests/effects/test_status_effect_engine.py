"""
Tests for the status effect engine: ticking, applying and resisting.
"""

import pytest

from ironfist.core.constants import STATUS_TICK_ACTION, StatusEffectType
from ironfist.effects.base_effect import StatusEffect
from ironfist.effects.effect_manager import StatusEffectEngine, get_resist_chance


@pytest.fixture
def engine(scripted_rng, settings):
    return StatusEffectEngine(scripted_rng(), settings)


@pytest.fixture
def target(make_combatant):
    """A 400 HP combatant."""
    return make_combatant(id="target", vitality=40)


def test_tick_amounts():
    """
    Test the per-turn amounts of over-time effects.
    """
    assert StatusEffect(type=StatusEffectType.BLEED, duration=1).tick_amount(400) == 20
    assert StatusEffect(type=StatusEffectType.POISON, duration=1).tick_amount(400) == 12
    assert StatusEffect(type=StatusEffectType.BURN, duration=1).tick_amount(400) == 16
    assert StatusEffect(type=StatusEffectType.REGEN, duration=1).tick_amount(400) == 20
    assert StatusEffect(type=StatusEffectType.BLEED, duration=1).tick_amount(10) == 1
    assert StatusEffect(type=StatusEffectType.SLOW, duration=1).tick_amount(400) == 0


def test_tick_damage_and_heal_over_time(engine, target):
    """
    Test that one tick applies every over-time effect in a single entry.
    """
    target.lose_hp(100)
    target.status_effects = [
        StatusEffect(type=StatusEffectType.POISON, duration=2),
        StatusEffect(type=StatusEffectType.REGEN, duration=1),
        StatusEffect(type=StatusEffectType.SLOW, duration=3),
    ]
    entry = engine.tick(target, turn=4)
    assert entry is not None
    assert entry.action == STATUS_TICK_ACTION
    assert entry.turn == 4
    assert entry.actor_id == entry.target_id == "target"
    assert [(t.type, t.damage, t.healed) for t in entry.status_ticks] == [
        (StatusEffectType.POISON, 12, None),
        (StatusEffectType.REGEN, None, 20),
    ]
    assert entry.message == "Effects: -12, +20"
    assert target.current_hp == 300 - 12 + 20
    assert [(e.type, e.duration) for e in target.status_effects] == [
        (StatusEffectType.POISON, 1),
        (StatusEffectType.SLOW, 2),
    ]


def test_tick_without_over_time_effects_logs_nothing(engine, target):
    """
    Test that marker effects only lose duration.
    """
    target.status_effects = [StatusEffect(type=StatusEffectType.WEAKEN, duration=1)]
    assert engine.tick(target, turn=1) is None
    assert target.status_effects == []


def test_tick_that_kills_logs_nothing(engine, make_combatant):
    """
    Test that no entry is produced when the tick kills the combatant.
    """
    state = make_combatant()
    state.current_hp = 3
    state.status_effects = [StatusEffect(type=StatusEffectType.BLEED, duration=3)]
    assert engine.tick(state, turn=2) is None
    assert state.current_hp == 0


def test_regen_never_overheals(engine, target):
    """
    Test that healing is capped at max HP.
    """
    target.lose_hp(5)
    target.status_effects = [StatusEffect(type=StatusEffectType.REGEN, duration=2)]
    entry = engine.tick(target, turn=1)
    assert target.current_hp == target.max_hp
    assert entry.status_ticks[0].healed == 20


def test_resist_chance():
    """
    Test the resist formula, its cap and the resist buff bonus.
    """
    assert get_resist_chance(100, 150) == pytest.approx(20)
    assert get_resist_chance(1_000, 1_000) == 60
    assert get_resist_chance(1_000, 1_000, bonus=30) == 90
    assert get_resist_chance(1_000, 1_000, bonus=60) == 100
    assert get_resist_chance(0, 0, bonus=-10) == 0


def test_try_apply_resisted(scripted_rng, settings, target):
    """
    Test that a successful resist roll keeps the effect off.
    """
    engine = StatusEffectEngine(scripted_rng([0.0]), settings)
    assert not engine.try_apply(target, StatusEffectType.BLEED, 3)
    assert target.status_effects == []


def test_try_apply_extends_to_the_longer_duration(engine, target):
    """
    Test that re-applying a type keeps one entry with the max duration.
    """
    assert engine.try_apply(target, StatusEffectType.BURN, 3)
    assert engine.try_apply(target, StatusEffectType.BURN, 2)
    assert [(e.type, e.duration) for e in target.status_effects] == [
        (StatusEffectType.BURN, 3)
    ]
    assert engine.try_apply(target, StatusEffectType.BURN, 5)
    assert target.get_status(StatusEffectType.BURN).duration == 5
    assert len(target.status_effects) == 1


def test_try_apply_explicit_resist_chance(scripted_rng, settings, target):
    """
    Test that an explicit resist chance overrides the target's own.
    """
    engine = StatusEffectEngine(scripted_rng([0.5, 0.5]), settings)
    assert not engine.try_apply(target, StatusEffectType.STUN, 1, resist_chance=51)
    assert engine.try_apply(target, StatusEffectType.STUN, 1, resist_chance=50)


def test_stun_consumption(engine, target):
    """
    Test that a stun is removed once its last turn is spent.
    """
    target.status_effects = [StatusEffect(type=StatusEffectType.STUN, duration=2)]
    assert engine.is_stunned(target)
    engine.consume_stun(target)
    assert engine.is_stunned(target)
    target.status_effects[0].duration = 1
    engine.consume_stun(target)
    assert not engine.is_stunned(target)
