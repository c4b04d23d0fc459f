"""
Combat log module for the battle engine.

Defines the replayable log entries produced by a battle and the final
result handed to the reward and presentation layers.
"""

from typing import Any

from pydantic import BaseModel, Field

from ironfist.character.combatant import CombatantState, CombatantSnapshot
from ironfist.core.constants import (
    STATUS_TICK_ACTION,
    STUN_ACTION,
    FallbackReason,
    StatusEffectType,
)


class StatusTick(BaseModel):
    """HP change caused by one over-time effect in one turn."""

    type: StatusEffectType
    damage: int | None = None
    healed: int | None = None


class CombatLogEntry(BaseModel):
    """
    One line of the battle log. Each entry carries enough information to
    drive a frame of animation without recomputing anything.
    """

    turn: int = Field(description="Turn number, starting at 1.")
    actor_id: str = Field(description="Who acted (or whose effects ticked).")
    target_id: str = Field(description="Who was targeted; self for ticks and stuns.")
    action: str = Field(
        description="Ability id, or 'basic', 'status_tick' or 'stun'.",
    )
    damage: int | None = Field(None, description="Damage dealt by the action.")
    healed: int | None = Field(None, description="HP restored by the action.")
    dodge: bool | None = Field(None, description="True if the target dodged.")
    crit: bool | None = Field(None, description="True on a critical hit.")
    status_applied: StatusEffectType | None = Field(
        None,
        description="Status effect inflicted by this action, if any.",
    )
    status_ticks: list[StatusTick] | None = Field(
        None,
        description="Over-time effects resolved on a 'status_tick' entry.",
    )
    fallback_reason: FallbackReason | None = Field(
        None,
        description="Why a requested ability became a basic attack.",
    )
    message: str = Field(description="Human-readable description.")
    actor_hp_after: int | None = Field(
        None,
        description="HP of the actor after the entry.",
    )
    target_hp_after: int | None = Field(
        None,
        description="HP of the actor's opponent after the entry.",
    )

    def stamp_hp(self, actor: CombatantState, opponent: CombatantState) -> None:
        """Records the HP of both combatants after this entry."""
        self.actor_hp_after = actor.current_hp
        self.target_hp_after = opponent.current_hp


class CombatResult(BaseModel):
    """Outcome of a battle plus its full log."""

    winner_id: str | None = Field(None, description="Id of the winner, None on draw.")
    loser_id: str | None = Field(None, description="Id of the loser, None on draw.")
    draw: bool = Field(False, description="True when nobody won.")
    turns: int = Field(ge=0, description="Number of turns actually executed.")
    log: list[CombatLogEntry] = Field(default_factory=list)
    player_snapshot: CombatantSnapshot
    enemy_snapshot: CombatantSnapshot

    def entries_for(self, actor_id: str) -> list[CombatLogEntry]:
        """Returns the entries where ``actor_id`` acted."""
        return [entry for entry in self.log if entry.actor_id == actor_id]

    def actions_of(self, actor_id: str) -> list[CombatLogEntry]:
        """Like ``entries_for`` but without status ticks and stuns."""
        return [
            entry
            for entry in self.entries_for(actor_id)
            if entry.action not in (STATUS_TICK_ACTION, STUN_ACTION)
        ]

    def to_dict(self) -> dict[str, Any]:
        """Serialises the result to plain JSON types; unset log fields are omitted."""
        data = self.model_dump(mode="json", exclude={"log"})
        data["log"] = [
            entry.model_dump(mode="json", exclude_none=True) for entry in self.log
        ]
        return data
