"""
Tests for the command line entry point and the console rendering.
"""

from ironfist.character.builder import build_preset_opponent
from ironfist.combat.combat_log import CombatLogEntry, StatusTick
from ironfist.combat.combat_manager import simulate_combat
from ironfist.core.constants import FallbackReason, StatusEffectType
from ironfist.core.rng import make_rng
from ironfist.core.utils import ccapture
from ironfist.main import main
from ironfist.ui.combat_log_view import (
    format_hp,
    format_log_entry,
    format_snapshot,
    print_combat_result,
)


def test_main_single_battle():
    """
    Test running one seeded battle between two presets.
    """
    assert main(["warrior", "mage", "--seed", "7"]) == 0


def test_main_with_choices_and_dummy():
    """
    Test fighting a training dummy with scripted choices.
    """
    assert main(["rogue", "--dummy", "tank", "--choices", "backstab", "basic"]) == 0


def test_main_boss_batch():
    """
    Test the batch mode against a catalog boss.
    """
    assert main(["tank", "--boss", "training_camp", "2", "--batch", "5", "--seed", "1"]) == 0


def test_main_rejects_unknown_preset():
    """
    Test that an unknown preset or a missing enemy is reported, not raised.
    """
    assert main(["paladin", "mage"]) == 1
    assert main(["warrior"]) == 1


def test_format_log_entry():
    """
    Test the formatting of the different entry kinds.
    """
    tick = CombatLogEntry(
        turn=1,
        actor_id="a",
        target_id="a",
        action="status_tick",
        status_ticks=[StatusTick(type=StatusEffectType.BURN, damage=4)],
        message="Effects: -4",
    )
    assert "-4" in format_log_entry(tick)
    stun = CombatLogEntry(turn=1, actor_id="a", target_id="a", action="stun", message="A is stunned.")
    assert "A is stunned." in format_log_entry(stun)
    fallback = CombatLogEntry(
        turn=2,
        actor_id="a",
        target_id="b",
        action="basic",
        damage=5,
        crit=False,
        fallback_reason=FallbackReason.ON_COOLDOWN,
        message="A attacks: 5 damage.",
    )
    assert "On cooldown" in format_log_entry(fallback)


def test_format_hp():
    """
    Test the HP bar text.
    """
    assert format_hp(None, 100) == ""
    assert format_hp(50, 100).endswith("50/100")


def test_print_combat_result():
    """
    Test that a whole battle renders without errors.
    """
    result = simulate_combat(
        build_preset_opponent("warrior", id="player"),
        build_preset_opponent("tank", id="enemy"),
        rng=make_rng(5),
    )
    print_combat_result(result)
    assert "Test Warrior" in ccapture(format_snapshot(result.player_snapshot))
