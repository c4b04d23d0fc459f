"""
Random number source for the battle engine.

Every roll in a battle (dodge, crit, damage variance, resist, status chance,
AI choice, cheat death) is drawn from an injected generator so that a seed
replays a battle exactly.
"""

import random
from typing import Protocol, Sequence, TypeVar

_T = TypeVar("_T")


class CombatRng(Protocol):
    """Anything exposing ``random()`` returning a float in [0, 1)."""

    def random(self) -> float: ...


def make_rng(seed: int | None = None) -> random.Random:
    """Returns a seedable generator; ``None`` seeds from system entropy."""
    return random.Random(seed)


def roll_percent(rng: CombatRng, chance: float) -> bool:
    """Rolls against a chance expressed in percent (0-100)."""
    return rng.random() * 100 < chance


def roll_fraction(rng: CombatRng, chance: float) -> bool:
    """Rolls against a chance expressed as a fraction (0-1)."""
    return rng.random() < chance


def pick(rng: CombatRng, items: Sequence[_T]) -> _T:
    """Picks one element uniformly using a single draw."""
    return items[int(rng.random() * len(items))]
