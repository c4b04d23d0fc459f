"""
Action selection for both sides of a battle.

The player side replays caller-supplied choices and falls back to a simple
heuristic once they run out; the enemy side picks among its boss abilities.
"""

from typing import Iterable, Iterator

from ironfist.actions.abilities.ability_catalog import get_abilities_for_class
from ironfist.character.combatant import CombatantState
from ironfist.core.constants import BASIC_ACTION
from ironfist.core.rng import CombatRng, pick, roll_fraction


class PlayerActionChooser:
    """
    Chooses the player's action each time it is asked.

    Attributes:
        choices (Iterator[str]):
            The remaining caller-supplied choices, consumed in order.
        rng (CombatRng):
            Source of the heuristic rolls.
        auto_skill_chance (float):
            Chance to use an available ability once the choices run out.

    """

    def __init__(
        self,
        choices: Iterable[str] | None,
        rng: CombatRng,
        auto_skill_chance: float,
    ) -> None:
        self.choices: Iterator[str] = iter(choices or ())
        self.rng: CombatRng = rng
        self.auto_skill_chance: float = auto_skill_chance

    def choose(self, player: CombatantState) -> str:
        """Returns the next supplied choice, or a heuristic pick."""
        choice = next(self.choices, None)
        if choice is not None:
            return choice
        return choose_player_action(player, self.rng, self.auto_skill_chance)


def choose_player_action(
    player: CombatantState,
    rng: CombatRng,
    auto_skill_chance: float,
) -> str:
    """
    Picks a random unlocked, off-cooldown class ability with probability
    ``auto_skill_chance``; otherwise a basic attack. No roll is made when
    no ability is available.
    """
    available = [
        ability.id
        for ability in get_abilities_for_class(player.character_class, player.level)
        if not player.is_on_cooldown(ability.id)
    ]
    if available and roll_fraction(rng, auto_skill_chance):
        return pick(rng, available)
    return BASIC_ACTION


def choose_enemy_action(
    enemy: CombatantState,
    rng: CombatRng,
    skill_use_chance: float,
) -> str:
    """
    Picks a random off-cooldown boss ability with probability
    ``skill_use_chance``. Enemies without boss abilities always attack.
    """
    if not enemy.boss_ability_ids:
        return BASIC_ACTION
    available = [
        ability_id
        for ability_id in enemy.boss_ability_ids
        if not enemy.is_on_cooldown(ability_id)
    ]
    if available and roll_fraction(rng, skill_use_chance):
        return pick(rng, available)
    return BASIC_ACTION
