"""
Console rendering of a finished battle.

Reads a ``CombatResult`` and prints it turn by turn with rich markup. It
never recomputes anything: every number comes from the log entries.
"""

from ironfist.character.combatant import CombatantSnapshot
from ironfist.combat.combat_log import CombatLogEntry, CombatResult
from ironfist.core.constants import STATUS_TICK_ACTION, STUN_ACTION
from ironfist.core.utils import cprint, crule, make_bar


def format_hp(current: int | None, maximum: int, length: int = 20) -> str:
    """Returns an HP bar followed by ``current/maximum``."""
    if current is None:
        return ""
    ratio = current / maximum if maximum > 0 else 0.0
    color = "green" if ratio > 0.5 else "yellow" if ratio > 0.25 else "red"
    return f"{make_bar(current, maximum, length, color)} {current}/{maximum}"


def format_snapshot(snapshot: CombatantSnapshot) -> str:
    cls = snapshot.character_class
    origin = f" {snapshot.origin.emoji}" if snapshot.origin else ""
    return (
        f"{cls.emoji}{origin} [{cls.color}]{snapshot.name}[/] "
        f"(Lv {snapshot.level} {cls.display_name})"
    )


def format_log_entry(entry: CombatLogEntry) -> str:
    """
    Formats one log entry as a single rich markup line.

    Args:
        entry (CombatLogEntry):
            The entry to format.

    Returns:
        str:
            The formatted line.

    """
    if entry.action == STATUS_TICK_ACTION:
        ticks = " ".join(
            f"{tick.type.emoji} [{tick.type.color}]"
            f"{'-' + str(tick.damage) if tick.damage is not None else '+' + str(tick.healed)}[/]"
            for tick in entry.status_ticks or []
        )
        return f"[dim]{entry.actor_id}[/] {ticks}"
    if entry.action == STUN_ACTION:
        return f"💫 [yellow]{entry.message}[/]"
    if entry.dodge:
        return f"💨 [cyan]{entry.actor_id} -> {entry.target_id}: {entry.message}[/]"

    line = entry.message
    if entry.crit:
        line = f"[bold red]{line}[/]"
    if entry.status_applied is not None:
        line += f" {entry.status_applied.emoji} {entry.status_applied.colored_name}"
    if entry.fallback_reason is not None:
        line += f" [dim](fell back: {entry.fallback_reason.display_name})[/]"
    return line


def print_combat_result(result: CombatResult) -> None:
    """Prints the whole battle, one rule per turn, then the outcome."""
    player = result.player_snapshot
    enemy = result.enemy_snapshot
    max_hp = {player.id: player.max_hp, enemy.id: enemy.max_hp}

    crule(f"{format_snapshot(player)}  vs  {format_snapshot(enemy)}", style="bold")
    turn = 0
    for entry in result.log:
        if entry.turn != turn:
            turn = entry.turn
            crule(f"Turn {turn}", style="dim")
        cprint(f"  {format_log_entry(entry)}")
        if entry.actor_hp_after is not None:
            opponent_id = enemy.id if entry.actor_id == player.id else player.id
            cprint(
                f"      {entry.actor_id}: "
                f"{format_hp(entry.actor_hp_after, max_hp[entry.actor_id])}  "
                f"{opponent_id}: "
                f"{format_hp(entry.target_hp_after, max_hp[opponent_id])}"
            )

    crule("Result", style="bold")
    if result.draw:
        cprint(f"[bold yellow]Draw after {result.turns} turns.[/]")
    else:
        winner = player if result.winner_id == player.id else enemy
        cprint(f"[bold green]{winner.name} wins in {result.turns} turns![/]")
    cprint(f"  {format_snapshot(player)} {format_hp(player.current_hp, player.max_hp)}")
    cprint(f"  {format_snapshot(enemy)} {format_hp(enemy.current_hp, enemy.max_hp)}")
