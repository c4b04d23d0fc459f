"""
Tests for the derived stat formulas.
"""

import pytest

from ironfist.character.character_stats import (
    compute_derived_stats,
    get_armor_reduction,
    get_crit_chance,
    get_crit_damage_mult,
    get_dodge_chance,
    get_magic_resist_percent,
    get_max_hp,
)


def test_max_hp_has_a_floor():
    """
    Test that max HP is ten per vitality point but never below 100.
    """
    assert get_max_hp(5) == 100
    assert get_max_hp(10) == 100
    assert get_max_hp(40) == 400


def test_armor_reduction():
    """
    Test the armor reduction curve, its cap and the no-armor case.
    """
    assert get_armor_reduction(0) == 0.0
    assert get_armor_reduction(-50) == 0.0
    assert get_armor_reduction(50) == pytest.approx(1 / 3)
    assert get_armor_reduction(100) == pytest.approx(0.5)
    assert get_armor_reduction(10_000) == 0.75


def test_magic_resist_percent():
    """
    Test the magic resist curve, its cap and the no-wisdom case.
    """
    assert get_magic_resist_percent(0) == 0.0
    assert get_magic_resist_percent(-10) == 0.0
    assert get_magic_resist_percent(150) == pytest.approx(0.5)
    assert get_magic_resist_percent(1_000_000) == 0.7


def test_crit_chance_is_clamped():
    """
    Test the crit chance formula and its 0-50 clamp.
    """
    assert get_crit_chance(10, 15) == pytest.approx(5 + 1 + 1)
    assert get_crit_chance(10, 15, equipment_bonus=3) == pytest.approx(10)
    assert get_crit_chance(10_000, 10_000) == 50
    assert get_crit_chance(-1_000, -1_000) == 0


def test_crit_damage_mult_is_capped():
    """
    Test the crit damage multiplier formula and its cap.
    """
    assert get_crit_damage_mult(0) == pytest.approx(1.5)
    assert get_crit_damage_mult(100) == pytest.approx(1.7)
    assert get_crit_damage_mult(100, equipment_percent=10) == pytest.approx(1.8)
    assert get_crit_damage_mult(100_000) == 2.8


def test_dodge_chance_is_clamped():
    """
    Test the dodge chance formula and its 0-40 clamp.
    """
    assert get_dodge_chance(16) == pytest.approx(5)
    assert get_dodge_chance(16, equipment_bonus=2) == pytest.approx(7)
    assert get_dodge_chance(10_000) == 40
    assert get_dodge_chance(-1_000) == 0


def test_compute_derived_stats(stats_factory):
    """
    Test that every derived stat is computed from the base stats.
    """
    derived = compute_derived_stats(
        stats_factory(vitality=30, agility=40, luck=30, strength=50, wisdom=150),
        armor=25,
        crit_equipment_bonus=2,
    )
    assert derived.max_hp == 300
    assert derived.crit_chance == pytest.approx(5 + 4 + 2 + 2)
    assert derived.crit_damage_mult == pytest.approx(1.6)
    assert derived.dodge_chance == pytest.approx(8)
    assert derived.armor == 25
    assert derived.magic_resist == pytest.approx(50)
