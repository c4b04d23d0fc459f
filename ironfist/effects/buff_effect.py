"""
Buff effect module for the battle engine.

Self-buffs are tracked separately from status effects so that a strength or
armor buff can never be mistaken for a real poison, regen or blind.
"""

from pydantic import BaseModel, Field

from ironfist.core.constants import BuffStat


class Buff(BaseModel):
    """A temporary raise of one of the caster's stats."""

    stat: BuffStat = Field(
        description="The stat raised by the buff.",
    )
    amount: float = Field(
        ge=0,
        description=(
            "How much the stat was raised. For resist this is a percentage "
            "added to the resist chance."
        ),
    )
    duration: int = Field(
        ge=0,
        description="Turns remaining; the buff is removed when it reaches 0.",
    )
    source: str = Field(
        "",
        description="Id of the ability that granted the buff.",
    )
    raised_to: float | None = Field(
        None,
        description=(
            "Value of the stat right after the buff was applied. Reversal "
            "takes back the buff in proportion to what is left of it."
        ),
    )

    def remaining_amount(self, current: float) -> float:
        """
        Returns how much of the raise a stat now at ``current`` still holds.

        A stat cut by a fraction after the buff (armor break) keeps the same
        fraction of the raise, so reverting never drops it below what the
        cut alone would have left.
        """
        if not self.raised_to:
            return self.amount
        return self.amount * current / self.raised_to

    @property
    def description(self) -> str:
        if self.stat == BuffStat.RESIST or self.stat == BuffStat.DODGE:
            return f"+{self.amount:g}% {self.stat.short_name}"
        return f"+{self.amount:g} {self.stat.short_name}"
