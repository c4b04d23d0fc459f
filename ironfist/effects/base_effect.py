"""
Base effect module for the battle engine.

Defines the timed status effect attached to a combatant: damage over time
(bleed, poison, burn), healing over time (regen), stun, and the markers
(slow, weaken, blind, armor break, berserk) that only track a duration.
"""

from typing import Any

from pydantic import BaseModel, Field

from ironfist.core.constants import StatusEffectType


class StatusEffect(BaseModel):
    """
    A status effect active on a combatant.

    At most one entry per type is kept; re-applying a type extends the
    duration of the existing entry instead of stacking.
    """

    type: StatusEffectType = Field(
        description="The kind of status effect.",
    )
    duration: int = Field(
        ge=0,
        description="Turns remaining; the entry is removed when it reaches 0.",
    )
    value: int | None = Field(
        default=None,
        description="Optional magnitude carried by the effect.",
    )

    @property
    def display_name(self) -> str:
        return self.type.display_name

    @property
    def color(self) -> str:
        """Returns the color string associated with this effect type."""
        return self.type.color

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this effect type."""
        return self.type.emoji

    @property
    def colored_name(self) -> str:
        """Returns the effect name with color formatting applied."""
        return f"[{self.color}]{self.display_name}[/]"

    def tick_amount(self, max_hp: int) -> int:
        """
        Returns the HP lost (or healed) by one tick of this effect.

        Args:
            max_hp (int):
                The maximum HP of the combatant carrying the effect.

        Returns:
            int:
                ``max(1, floor(pct * max_hp))`` for over-time effects, 0 for
                every other type. ``value``, when set, overrides the default
                percentage of the type.

        """
        pct = self.type.tick_percent
        if pct <= 0:
            return 0
        if self.value is not None:
            pct = self.value / 100
        return max(1, int(max_hp * pct))

    def model_post_init(self, _: Any) -> None:
        if self.value is not None and self.value < 0:
            raise ValueError("Status effect value must be non-negative.")
