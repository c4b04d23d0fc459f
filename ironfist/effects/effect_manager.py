"""
Status effect engine for the battle engine.

Applies, resists, ticks and expires the timed effects of a combatant, and
applies the self-buffs granted by buff abilities.
"""

import math

from catchery import log_debug

from ironfist.actions.abilities.base_ability import AbilityDef, self_buff_stat
from ironfist.character.combatant import CombatantState
from ironfist.combat.combat_log import CombatLogEntry, StatusTick
from ironfist.core.constants import (
    DODGE_BUFF_DURATION,
    MAX_DODGE,
    RESIST_CHANCE_CAP,
    STATUS_TICK_ACTION,
    BuffStat,
    StatusEffectType,
)
from ironfist.core.rng import CombatRng, roll_percent
from ironfist.core.settings import CombatSettings

from .base_effect import StatusEffect
from .buff_effect import Buff


def get_resist_chance(endurance: float, wisdom: float, bonus: float = 0) -> float:
    """
    Returns the chance, in percent, to resist an incoming status effect.

    Args:
        endurance (float): The target's endurance.
        wisdom (float): The target's wisdom.
        bonus (float): Percent added by active resist buffs.

    Returns:
        float: ``min(60, END/10 + WIS/15) + bonus``, clamped to 0-100.

    """
    base = min(RESIST_CHANCE_CAP, endurance / 10 + wisdom / 15)
    return min(100.0, max(0.0, base + bonus))


class StatusEffectEngine:
    """
    Runs the status effects of the combatants in one battle.

    Attributes:
        rng (CombatRng):
            The random source used for resist rolls.
        settings (CombatSettings):
            The battle settings (buff duration, buff reversal).

    """

    def __init__(self, rng: CombatRng, settings: CombatSettings) -> None:
        self.rng: CombatRng = rng
        self.settings: CombatSettings = settings

    # ============================================================================
    # TICK
    # ============================================================================

    def tick(self, state: CombatantState, turn: int) -> CombatLogEntry | None:
        """
        Advances every status effect and buff of ``state`` by one turn.

        Each effect loses one turn of duration; damage and heal over time
        effects then change the HP. Effects whose duration reached 0 are
        removed after ticking. Expired buffs are reverted when the settings
        ask for it.

        Args:
            state (CombatantState):
                The combatant whose effects tick.
            turn (int):
                The current turn number.

        Returns:
            CombatLogEntry | None:
                One entry aggregating all HP changes, or None if nothing
                changed the HP or the combatant died.

        """
        ticks: list[StatusTick] = []
        remaining: list[StatusEffect] = []
        for effect in state.status_effects:
            effect.duration -= 1
            amount = effect.tick_amount(state.max_hp)
            if effect.type.is_damage_over_time:
                state.lose_hp(amount)
                ticks.append(StatusTick(type=effect.type, damage=amount))
            elif effect.type.is_heal_over_time:
                state.heal(amount)
                ticks.append(StatusTick(type=effect.type, healed=amount))
            if effect.duration > 0:
                remaining.append(effect)
        state.status_effects = remaining

        self._tick_buffs(state)

        if not ticks or state.is_dead():
            return None
        parts = [
            f"-{tick.damage}" if tick.damage is not None else f"+{tick.healed}"
            for tick in ticks
        ]
        return CombatLogEntry(
            turn=turn,
            actor_id=state.id,
            target_id=state.id,
            action=STATUS_TICK_ACTION,
            status_ticks=ticks,
            message=f"Effects: {', '.join(parts)}",
        )

    def _tick_buffs(self, state: CombatantState) -> None:
        remaining: list[Buff] = []
        for buff in state.buffs:
            buff.duration -= 1
            if buff.duration > 0:
                remaining.append(buff)
            elif self.settings.revert_buffs_on_expiry:
                self.revert_buff(state, buff)
        state.buffs = remaining

    @staticmethod
    def revert_buff(state: CombatantState, buff: Buff) -> None:
        """Takes back the stat raise of an expired buff."""
        if buff.stat == BuffStat.STRENGTH:
            strength = state.base_stats.strength
            state.base_stats.strength = max(0, strength - round(buff.remaining_amount(strength)))
        elif buff.stat == BuffStat.ARMOR:
            state.armor = max(0, state.armor - round(buff.remaining_amount(state.armor)))
        elif buff.stat == BuffStat.DODGE:
            state.derived.dodge_chance = max(0.0, state.derived.dodge_chance - buff.amount)
        log_debug(
            f"{state.name}'s {buff.description} from {buff.source} expired and was reverted."
        )

    # ============================================================================
    # APPLY
    # ============================================================================

    def resist_chance_of(self, target: CombatantState) -> float:
        return get_resist_chance(
            target.base_stats.endurance,
            target.base_stats.wisdom,
            target.buff_total(BuffStat.RESIST),
        )

    def try_apply(
        self,
        target: CombatantState,
        effect_type: StatusEffectType,
        duration: int,
        resist_chance: float | None = None,
    ) -> bool:
        """
        Attempts to put a status effect on ``target``.

        The target first rolls to resist. If the effect lands and the target
        already carries that type, the duration becomes the larger of the
        two; durations never add up.

        Args:
            target (CombatantState):
                The combatant receiving the effect.
            effect_type (StatusEffectType):
                The effect to apply.
            duration (int):
                Duration in turns.
            resist_chance (float | None):
                Resist chance in percent, computed from the target when None.

        Returns:
            bool:
                True if the effect was applied or extended, False if resisted.

        """
        if resist_chance is None:
            resist_chance = self.resist_chance_of(target)
        if roll_percent(self.rng, resist_chance):
            log_debug(f"{target.name} resisted {effect_type}.")
            return False
        self.add_effect(target, effect_type, duration)
        return True

    @staticmethod
    def add_effect(
        target: CombatantState,
        effect_type: StatusEffectType,
        duration: int,
        value: int | None = None,
    ) -> None:
        """Adds an effect without a resist roll, extending an existing one."""
        existing = target.get_status(effect_type)
        if existing is not None:
            existing.duration = max(existing.duration, duration)
            if value is not None:
                existing.value = max(existing.value or 0, value)
            return
        target.status_effects.append(
            StatusEffect(type=effect_type, duration=duration, value=value)
        )

    # ============================================================================
    # STUN
    # ============================================================================

    @staticmethod
    def is_stunned(state: CombatantState) -> bool:
        return state.has_status(StatusEffectType.STUN)

    @staticmethod
    def consume_stun(state: CombatantState) -> None:
        """Spends one turn of stun; the last turn removes it."""
        state.status_effects = [
            effect
            for effect in state.status_effects
            if effect.type != StatusEffectType.STUN or effect.duration > 1
        ]

    # ============================================================================
    # SELF-BUFFS
    # ============================================================================

    def apply_self_buff(self, caster: CombatantState, ability: AbilityDef) -> list[str]:
        """
        Applies the self-buff of a buff ability to its caster.

        Strength and armor are raised on the live state right away; resist
        is kept as a buff read by ``resist_chance_of``; dodge raises the
        live dodge chance up to its cap; regen grants a regen effect.

        Args:
            caster (CombatantState):
                The combatant using the ability.
            ability (AbilityDef):
                The buff ability.

        Returns:
            list[str]:
                One short description per buff granted.

        """
        duration = self.settings.buff_duration
        messages: list[str] = []

        for key, pct in ability.self_buff.items():
            stat = self_buff_stat(key)
            raised_to: float | None = None
            if stat == BuffStat.STRENGTH:
                amount = math.floor(caster.base_stats.strength * pct)
                caster.base_stats.strength += amount
                raised_to = caster.base_stats.strength
            elif stat == BuffStat.ARMOR:
                amount = math.floor(caster.armor * pct)
                caster.armor += amount
                raised_to = caster.armor
            elif stat == BuffStat.RESIST:
                amount = math.floor(pct * 100)
            else:
                heal_pct = round(pct * 100)
                self.add_effect(caster, StatusEffectType.REGEN, duration, value=heal_pct)
                messages.append(f"Regeneration {heal_pct}% for {duration} turns")
                continue
            caster.buffs.append(
                Buff(
                    stat=stat,
                    amount=amount,
                    duration=duration,
                    source=ability.id,
                    raised_to=raised_to,
                )
            )
            messages.append(f"+{round(pct * 100)}% {stat.short_name}")

        if ability.dodge_bonus:
            turns = ability.dodge_bonus_turns or DODGE_BUFF_DURATION
            before = caster.derived.dodge_chance
            caster.derived.dodge_chance = min(MAX_DODGE, before + ability.dodge_bonus)
            caster.buffs.append(
                Buff(
                    stat=BuffStat.DODGE,
                    amount=caster.derived.dodge_chance - before,
                    duration=turns,
                    source=ability.id,
                )
            )
            messages.append(f"+{ability.dodge_bonus:g}% Dodge for {turns} turns")

        return messages
