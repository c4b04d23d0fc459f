"""
Combatant module for the battle engine.

Defines the mutable per-battle record of a combatant and the immutable
snapshot it is reduced to once the battle is over.
"""

import math
from typing import Any

from pydantic import BaseModel, Field

from ironfist.core.constants import (
    ARMOR_BREAK_MULT,
    MAX_CRIT_CHANCE,
    MAX_DODGE,
    BuffStat,
    CharacterClass,
    CharacterOrigin,
    StatusEffectType,
)
from ironfist.effects.base_effect import StatusEffect
from ironfist.effects.buff_effect import Buff

from .character_stats import BaseStats, DerivedStats


class CombatantSnapshot(BaseModel):
    """State of a combatant at the end of a battle."""

    id: str
    name: str
    character_class: CharacterClass
    origin: CharacterOrigin | None = None
    level: int
    current_hp: int
    max_hp: int
    base_stats: BaseStats


class CombatantState(BaseModel):
    """
    The state of one side of a battle.

    Built once per battle from the derived stats, mutated in place turn by
    turn by the simulator and finally reduced to a ``CombatantSnapshot``.
    A state must never be shared by two battles running at the same time.
    """

    id: str = Field(description="Unique identifier of the combatant.")
    name: str = Field(description="Display name.")
    character_class: CharacterClass = Field(description="The combatant's class.")
    origin: CharacterOrigin | None = Field(None, description="Optional origin.")
    level: int = Field(ge=1, description="Character level, gates abilities.")
    base_stats: BaseStats = Field(description="Origin and equipment adjusted stats.")
    derived: DerivedStats = Field(description="Stats derived at battle start.")
    current_hp: int = Field(ge=0, description="Current hit points.")
    max_hp: int = Field(ge=1, description="Maximum hit points.")
    armor: int = Field(ge=0, description="Live flat armor value.")
    magic_resist: float = Field(0.0, description="Magic resist, in percent.")
    status_effects: list[StatusEffect] = Field(
        default_factory=list,
        description="Active status effects, at most one per type.",
    )
    buffs: list[Buff] = Field(
        default_factory=list,
        description="Active self-buffs.",
    )
    ability_cooldowns: dict[str, int] = Field(
        default_factory=dict,
        description="Turns remaining before each ability can be used again.",
    )
    is_first_strike: bool = Field(
        True,
        description="True until the combatant's first resolved action.",
    )
    boss_ability_ids: list[str] | None = Field(
        None,
        description="Boss ability ids assigned to this combatant, if any.",
    )

    def model_post_init(self, _: Any) -> None:
        if self.current_hp > self.max_hp:
            raise ValueError("current_hp cannot exceed max_hp.")

    # ============================================================================
    # HIT POINTS
    # ============================================================================

    def is_alive(self) -> bool:
        return self.current_hp > 0

    def is_dead(self) -> bool:
        return self.current_hp <= 0

    @property
    def hp_fraction(self) -> float:
        """Current HP as a fraction of max HP."""
        return self.current_hp / self.max_hp

    def lose_hp(self, amount: int) -> None:
        """Removes HP, flooring at 0."""
        self.current_hp = max(0, self.current_hp - amount)

    def heal(self, amount: int) -> None:
        """Restores HP, capped at max HP."""
        self.current_hp = min(self.max_hp, self.current_hp + amount)

    # ============================================================================
    # STATUS EFFECTS AND BUFFS
    # ============================================================================

    def get_status(self, effect_type: StatusEffectType) -> StatusEffect | None:
        for effect in self.status_effects:
            if effect.type == effect_type:
                return effect
        return None

    def has_status(self, effect_type: StatusEffectType) -> bool:
        return self.get_status(effect_type) is not None

    def buff_total(self, stat: BuffStat) -> int:
        """Sum of the active buffs raising ``stat``."""
        return sum(buff.amount for buff in self.buffs if buff.stat == stat)

    # ============================================================================
    # EFFECTIVE COMBAT STATS
    # ============================================================================

    @property
    def effective_armor(self) -> int:
        """Live armor, reduced further while armor break is active."""
        if self.has_status(StatusEffectType.ARMOR_BREAK):
            return math.floor(self.armor * ARMOR_BREAK_MULT)
        return self.armor

    @property
    def effective_dodge(self) -> float:
        """Dodge chance including dodge buffs, capped."""
        return min(MAX_DODGE, self.derived.dodge_chance)

    def effective_crit(self, crit_bonus: float = 0) -> float:
        """Crit chance including a per-ability bonus, capped."""
        return min(MAX_CRIT_CHANCE, self.derived.crit_chance + crit_bonus)

    # ============================================================================
    # COOLDOWNS
    # ============================================================================

    def cooldown_of(self, ability_id: str) -> int:
        return self.ability_cooldowns.get(ability_id, 0)

    def is_on_cooldown(self, ability_id: str) -> bool:
        return self.cooldown_of(ability_id) > 0

    def start_cooldown(self, ability_id: str, turns: int) -> None:
        self.ability_cooldowns[ability_id] = max(0, turns)

    def decrement_cooldowns(self) -> None:
        """Ticks every cooldown down by one, flooring at 0."""
        for ability_id, turns in self.ability_cooldowns.items():
            self.ability_cooldowns[ability_id] = max(0, turns - 1)

    # ============================================================================
    # SNAPSHOT
    # ============================================================================

    def to_snapshot(self) -> CombatantSnapshot:
        return CombatantSnapshot(
            id=self.id,
            name=self.name,
            character_class=self.character_class,
            origin=self.origin,
            level=self.level,
            current_hp=self.current_hp,
            max_hp=self.max_hp,
            base_stats=self.base_stats.model_copy(),
        )
