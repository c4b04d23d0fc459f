"""
Outcome resolution for the battle engine.
"""

from ironfist.character.combatant import CombatantState

from .combat_log import CombatLogEntry, CombatResult


def resolve_outcome(
    player: CombatantState,
    enemy: CombatantState,
    turns: int,
    log: list[CombatLogEntry],
) -> CombatResult:
    """
    Decides the winner once the battle loop has stopped.

    A combatant at 0 HP loses; both at 0 HP is a draw. When the turn limit
    ends the battle with both alive, the higher HP fraction wins and equal
    fractions are a draw.

    Args:
        player (CombatantState):
            The player side, in its final state.
        enemy (CombatantState):
            The enemy side, in its final state.
        turns (int):
            Number of turns executed.
        log (list[CombatLogEntry]):
            The complete battle log.

    Returns:
        CombatResult:
            The result with both final snapshots.

    """
    winner: CombatantState | None = None
    loser: CombatantState | None = None
    if player.is_dead() and enemy.is_dead():
        pass
    elif player.is_dead():
        winner, loser = enemy, player
    elif enemy.is_dead():
        winner, loser = player, enemy
    elif player.hp_fraction > enemy.hp_fraction:
        winner, loser = player, enemy
    elif enemy.hp_fraction > player.hp_fraction:
        winner, loser = enemy, player

    return CombatResult(
        winner_id=winner.id if winner else None,
        loser_id=loser.id if loser else None,
        draw=winner is None,
        turns=turns,
        log=log,
        player_snapshot=player.to_snapshot(),
        enemy_snapshot=enemy.to_snapshot(),
    )
