"""
Combat manager for the battle engine.

Drives a one-on-one battle turn by turn: ticks status effects, orders the
two combatants by agility, resolves their actions and records everything
in a replayable log.
"""

import math
from typing import Iterable

from catchery import log_debug

from ironfist.character.combatant import CombatantState
from ironfist.combat.combat_log import CombatLogEntry, CombatResult
from ironfist.core.constants import (
    ARMOR_BREAK_DURATION,
    STUN_ACTION,
    StatusEffectType,
)
from ironfist.core.rng import CombatRng, make_rng, roll_fraction
from ironfist.core.settings import CombatSettings
from ironfist.core.utils import cprint, crule
from ironfist.effects.effect_manager import StatusEffectEngine

from .action_resolution import AbilityResolution, resolve_action
from .damage import (
    apply_damage,
    calc_magic_damage,
    calc_physical_damage,
    roll_crit,
    roll_dodge,
)
from .npc_ai import PlayerActionChooser, choose_enemy_action
from .outcome import resolve_outcome


class CombatSimulator:
    """
    Runs one battle between a player and an enemy.

    The two states are mutated in place; use ``simulate_combat`` to keep the
    caller's states untouched.

    Attributes:
        player (CombatantState):
            The player side.
        enemy (CombatantState):
            The enemy side.
        rng (CombatRng):
            Source of every random roll of the battle.
        settings (CombatSettings):
            Knobs controlling the battle.
        effects (StatusEffectEngine):
            Applies and ticks status effects and buffs.
        log (list[CombatLogEntry]):
            The entries produced so far.
        turn (int):
            The current turn number, 0 before the first turn.

    """

    def __init__(
        self,
        player: CombatantState,
        enemy: CombatantState,
        player_choices: Iterable[str] | None = None,
        rng: CombatRng | None = None,
        settings: CombatSettings | None = None,
    ) -> None:
        self.player: CombatantState = player
        self.enemy: CombatantState = enemy
        self.rng: CombatRng = rng if rng is not None else make_rng()
        self.settings: CombatSettings = settings or CombatSettings()
        self.effects: StatusEffectEngine = StatusEffectEngine(self.rng, self.settings)
        self.player_chooser: PlayerActionChooser = PlayerActionChooser(
            player_choices,
            self.rng,
            self.settings.player_auto_skill_chance,
        )
        self.log: list[CombatLogEntry] = []
        self.turn: int = 0

    # ============================================================================
    # BATTLE LOOP
    # ============================================================================

    def is_over(self) -> bool:
        return (
            self.turn >= self.settings.max_turns
            or self.player.is_dead()
            or self.enemy.is_dead()
        )

    def run(self) -> CombatResult:
        """
        Runs turns until one side drops or the turn limit is reached.

        Returns:
            CombatResult:
                The outcome, the log and the final snapshots.

        """
        self.player.is_first_strike = True
        self.enemy.is_first_strike = True
        log_debug(
            "Battle started",
            {"player": self.player.id, "enemy": self.enemy.id},
        )
        if self.settings.verbose:
            crule(f"{self.player.name} vs {self.enemy.name}", style="bold red")
        while not self.is_over():
            self.run_turn()
        result = resolve_outcome(self.player, self.enemy, self.turn, self.log)
        log_debug(
            "Battle over",
            {"turns": result.turns, "winner": result.winner_id or "draw"},
        )
        if self.settings.verbose:
            crule("Battle over", style="bold red")
        return result

    def run_turn(self) -> None:
        """Plays one full turn: effect ticks, then up to two actions."""
        self.turn += 1
        self._tick(self.player, self.enemy)
        self._tick(self.enemy, self.player)
        if self.player.is_dead() or self.enemy.is_dead():
            return

        first, second = self.turn_order()
        self.player.decrement_cooldowns()
        self.enemy.decrement_cooldowns()

        self._take_action(first, second)
        if second.is_dead():
            return
        self._take_action(second, first)

    def turn_order(self) -> tuple[CombatantState, CombatantState]:
        """The player acts first unless the enemy is strictly faster."""
        if self.player.base_stats.agility >= self.enemy.base_stats.agility:
            return self.player, self.enemy
        return self.enemy, self.player

    def _tick(self, state: CombatantState, opponent: CombatantState) -> None:
        entry = self.effects.tick(state, self.turn)
        if entry is not None:
            entry.stamp_hp(state, opponent)
            self._record(entry)

    def _take_action(self, actor: CombatantState, opponent: CombatantState) -> None:
        if self.effects.is_stunned(actor):
            self.effects.consume_stun(actor)
            entry = CombatLogEntry(
                turn=self.turn,
                actor_id=actor.id,
                target_id=actor.id,
                action=STUN_ACTION,
                message=f"{actor.name} is stunned.",
            )
            entry.stamp_hp(actor, opponent)
            self._record(entry)
            return
        self.resolve_attack(actor, opponent, self.choose_action(actor))

    def choose_action(self, actor: CombatantState) -> str:
        if actor is self.player:
            return self.player_chooser.choose(actor)
        return choose_enemy_action(
            actor,
            self.rng,
            self.settings.enemy_skill_use_chance,
        )

    def _record(self, entry: CombatLogEntry) -> None:
        self.log.append(entry)
        if self.settings.verbose:
            cprint(f"[dim]T{entry.turn:>2}[/] {entry.message}")

    # ============================================================================
    # ACTION RESOLUTION
    # ============================================================================

    def resolve_attack(
        self,
        attacker: CombatantState,
        target: CombatantState,
        action_id: str,
    ) -> CombatLogEntry:
        """
        Resolves one action of ``attacker`` against ``target``.

        Buff abilities only affect the caster. Any other action can be
        dodged; a hit deals damage, then may break armor and inflict a
        status effect, both subject to the target's resist chance.

        Args:
            attacker (CombatantState):
                The acting combatant.
            target (CombatantState):
                Its opponent.
            action_id (str):
                The requested ability id, or 'basic'.

        Returns:
            CombatLogEntry:
                The entry recorded for the action.

        """
        resolution = resolve_action(attacker, action_id)
        if resolution.fallback is not None:
            log_debug(
                f"{attacker.name} falls back to a basic attack",
                {
                    "actor": attacker.id,
                    "requested": action_id,
                    "reason": str(resolution.fallback),
                },
            )
        ability = resolution.ability

        if ability is not None and ability.is_buff:
            return self._resolve_buff(attacker, target, resolution)

        if ability is not None:
            attacker.start_cooldown(ability.id, ability.cooldown)

        if roll_dodge(self.rng, target.effective_dodge):
            entry = CombatLogEntry(
                turn=self.turn,
                actor_id=attacker.id,
                target_id=target.id,
                action=resolution.action_id,
                dodge=True,
                fallback_reason=resolution.fallback,
                message="DODGE!",
            )
            entry.stamp_hp(attacker, target)
            self._record(entry)
            attacker.is_first_strike = False
            return entry

        crit_bonus = ability.crit_bonus if ability else 0.0
        is_crit = roll_crit(self.rng, attacker.effective_crit(crit_bonus))
        damage = self._roll_damage(attacker, target, resolution, is_crit)

        if (
            ability is not None
            and ability.execute_threshold is not None
            and target.hp_fraction < ability.execute_threshold
            and not is_crit
        ):
            damage = math.floor(damage * attacker.derived.crit_damage_mult)

        actual, cheated_death = apply_damage(target, damage, self.rng)

        verb = f"uses {ability.name}" if ability else "attacks"
        message = f"{attacker.name} {verb}: {actual} damage{' (crit)' if is_crit else ''}."
        if cheated_death:
            message += f" {target.name} cheated death! (1 HP)"

        entry = CombatLogEntry(
            turn=self.turn,
            actor_id=attacker.id,
            target_id=target.id,
            action=resolution.action_id,
            damage=actual,
            crit=is_crit,
            fallback_reason=resolution.fallback,
            message=message,
        )
        entry.stamp_hp(attacker, target)
        self._record(entry)
        attacker.is_first_strike = False

        if ability is None:
            return entry

        if ability.armor_break:
            target.armor = max(0, math.floor(target.armor - target.armor * ability.armor_break))
            if self.effects.try_apply(
                target,
                StatusEffectType.ARMOR_BREAK,
                ARMOR_BREAK_DURATION,
            ):
                entry.status_applied = StatusEffectType.ARMOR_BREAK

        if ability.status is not None and roll_fraction(self.rng, ability.status.chance):
            if self.effects.try_apply(target, ability.status.type, ability.status.duration):
                entry.status_applied = ability.status.type

        return entry

    def _roll_damage(
        self,
        attacker: CombatantState,
        target: CombatantState,
        resolution: AbilityResolution,
        is_crit: bool,
    ) -> int:
        ability = resolution.ability
        if ability is not None and ability.is_magic:
            damage = calc_magic_damage(
                self.rng,
                attacker_int=attacker.base_stats.intelligence,
                defender_wis=target.base_stats.wisdom,
                spell_multiplier=ability.multiplier,
                is_crit=is_crit,
                crit_damage_mult=attacker.derived.crit_damage_mult,
            )
        else:
            damage = calc_physical_damage(
                self.rng,
                attacker_str=attacker.base_stats.strength,
                defender_end=target.base_stats.endurance,
                defender_armor=target.effective_armor,
                skill_multiplier=ability.multiplier if ability else 1.0,
                is_crit=is_crit,
                crit_damage_mult=attacker.derived.crit_damage_mult,
            )
        if ability is not None and ability.hits:
            damage *= ability.hits
        return damage

    def _resolve_buff(
        self,
        caster: CombatantState,
        opponent: CombatantState,
        resolution: AbilityResolution,
    ) -> CombatLogEntry:
        ability = resolution.ability
        assert ability is not None, "Buff resolution needs an ability"
        caster.start_cooldown(ability.id, ability.cooldown)
        messages = self.effects.apply_self_buff(caster, ability)
        entry = CombatLogEntry(
            turn=self.turn,
            actor_id=caster.id,
            target_id=caster.id,
            action=ability.id,
            message=f"{caster.name} uses {ability.name}: {', '.join(messages)}.",
        )
        entry.stamp_hp(caster, opponent)
        self._record(entry)
        return entry


def simulate_combat(
    player: CombatantState,
    enemy: CombatantState,
    player_choices: Iterable[str] | None = None,
    *,
    rng: CombatRng | None = None,
    settings: CombatSettings | None = None,
) -> CombatResult:
    """
    Simulates a full battle on copies of the given states.

    Args:
        player (CombatantState):
            The player side; left untouched.
        enemy (CombatantState):
            The enemy side; left untouched.
        player_choices (Iterable[str] | None):
            Ordered per-action choices for the player ('basic' or an ability
            id); the AI takes over once they run out.
        rng (CombatRng | None):
            Source of every roll; a fresh unseeded generator when None.
        settings (CombatSettings | None):
            Battle settings, defaults when None.

    Returns:
        CombatResult:
            The outcome of the battle.

    """
    simulator = CombatSimulator(
        player.model_copy(deep=True),
        enemy.model_copy(deep=True),
        player_choices,
        rng=rng,
        settings=settings,
    )
    return simulator.run()
