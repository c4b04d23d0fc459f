"""
Action resolution for the battle engine.

Turns a requested action id into the ability that will actually be used,
degrading invalid requests to a basic attack instead of failing.
"""

from pydantic import BaseModel, Field

from ironfist.actions.abilities.ability_catalog import find_ability
from ironfist.actions.abilities.base_ability import AbilityDef
from ironfist.character.combatant import CombatantState
from ironfist.core.constants import BASIC_ACTION, FallbackReason


class AbilityResolution(BaseModel):
    """The outcome of resolving a requested action."""

    requested: str = Field(description="The action id that was requested.")
    ability: AbilityDef | None = Field(
        None,
        description="The ability to use, None for a basic attack.",
    )
    fallback: FallbackReason | None = Field(
        None,
        description="Why the request was degraded to a basic attack.",
    )

    @property
    def action_id(self) -> str:
        """The id recorded in the log: the ability id or 'basic'."""
        return self.ability.id if self.ability else BASIC_ACTION

    @property
    def is_basic(self) -> bool:
        return self.ability is None


def resolve_action(attacker: CombatantState, action_id: str) -> AbilityResolution:
    """
    Resolves ``action_id`` for ``attacker``.

    The class table is searched first, then the boss table. An unknown id,
    an ability still on cooldown, or a first-strike-only ability requested
    after the attacker's first action all resolve to a basic attack.

    Args:
        attacker (CombatantState):
            The combatant about to act.
        action_id (str):
            The requested ability id, or 'basic'.

    Returns:
        AbilityResolution:
            The ability to use and the fallback reason, if any.

    """
    if action_id == BASIC_ACTION:
        return AbilityResolution(requested=action_id)
    ability = find_ability(attacker.character_class, action_id)
    if ability is None:
        return AbilityResolution(
            requested=action_id,
            fallback=FallbackReason.UNKNOWN_ABILITY,
        )
    if attacker.is_on_cooldown(ability.id):
        return AbilityResolution(
            requested=action_id,
            fallback=FallbackReason.ON_COOLDOWN,
        )
    if ability.first_strike_only and not attacker.is_first_strike:
        return AbilityResolution(
            requested=action_id,
            fallback=FallbackReason.NOT_FIRST_STRIKE,
        )
    return AbilityResolution(requested=action_id, ability=ability)
