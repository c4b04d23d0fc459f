"""
Tests for character origins.
"""

import pytest

from ironfist.character.character_origin import (
    apply_origin_bonuses,
    get_cheat_death_chance,
    has_cheat_death,
)
from ironfist.core.constants import CharacterOrigin


def test_no_origin_returns_a_copy(stats_factory):
    """
    Test that without an origin the stats are copied unchanged.
    """
    base = stats_factory(strength=50)
    result = apply_origin_bonuses(base, None)
    assert result == base
    assert result is not base


def test_human_bonus_applies_to_every_stat(stats_factory):
    """
    Test that humans get +5% to all stats, floored.
    """
    result = apply_origin_bonuses(stats_factory(strength=100, agility=19), CharacterOrigin.HUMAN)
    assert result.strength == 105
    assert result.agility == 19
    assert result.charisma == 10


def test_orc_bonus_and_malus(stats_factory):
    """
    Test that orcs get +8% STR and -3% END.
    """
    result = apply_origin_bonuses(
        stats_factory(strength=100, endurance=100), CharacterOrigin.ORC
    )
    assert result.strength == 108
    assert result.endurance == 97
    assert result.agility == 10


@pytest.mark.parametrize(
    "origin, stat, expected",
    [
        (CharacterOrigin.SKELETON, "agility", 106),
        (CharacterOrigin.SKELETON, "luck", 104),
        (CharacterOrigin.DEMON, "endurance", 108),
        (CharacterOrigin.DEMON, "vitality", 105),
        (CharacterOrigin.DOGFOLK, "strength", 100),
    ],
)
def test_origin_stat_modifiers(stats_factory, origin, stat, expected):
    """
    Test the stat modifiers of the remaining origins.
    """
    base = stats_factory(**{stat: 100})
    assert getattr(apply_origin_bonuses(base, origin), stat) == expected


def test_only_dogfolk_cheat_death():
    """
    Test that the cheating death passive belongs to dogfolk only.
    """
    assert has_cheat_death(CharacterOrigin.DOGFOLK)
    assert get_cheat_death_chance(CharacterOrigin.DOGFOLK) == 0.05
    for origin in (CharacterOrigin.HUMAN, CharacterOrigin.ORC, None):
        assert not has_cheat_death(origin)
        assert get_cheat_death_chance(origin) == 0.0
