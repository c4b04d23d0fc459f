"""
Shared fixtures for the battle engine tests.
"""

import pytest

from ironfist.character.builder import build_combatant_state
from ironfist.character.character_stats import BaseStats
from ironfist.core.settings import CombatSettings


class ScriptedRng:
    """
    Random source returning queued values in order, then ``default``.

    The default of 0.99 makes every roll fail: no dodge, no crit, no resist,
    no status, no cheat death and no AI ability use.
    """

    def __init__(self, values: list[float] | None = None, default: float = 0.99):
        self.values: list[float] = list(values or [])
        self.default: float = default
        self.calls: int = 0

    def random(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


def make_stats(**overrides: int) -> BaseStats:
    stats = dict(
        strength=10,
        agility=10,
        vitality=10,
        endurance=10,
        intelligence=10,
        wisdom=10,
        luck=10,
        charisma=10,
    )
    stats.update(overrides)
    return BaseStats(**stats)


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""

    def _factory(values: list[float] | None = None, default: float = 0.99):
        return ScriptedRng(values, default)

    return _factory


@pytest.fixture
def make_combatant():
    """Factory building full-health combatants with 10 in every stat."""

    def _factory(
        id: str = "fighter",
        character_class: str = "warrior",
        level: int = 1,
        origin: str | None = None,
        armor: int = 0,
        boss_ability_ids: list[str] | None = None,
        **stats: int,
    ):
        return build_combatant_state(
            id=id,
            name=id.capitalize(),
            character_class=character_class,
            level=level,
            stats=make_stats(**stats),
            origin=origin,
            armor=armor,
            boss_ability_ids=boss_ability_ids,
        )

    return _factory


@pytest.fixture
def settings():
    return CombatSettings()


@pytest.fixture
def stats_factory():
    """Factory for base stats with 10 in every stat unless overridden."""
    return make_stats
