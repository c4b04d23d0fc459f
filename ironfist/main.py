"""
Command line entry point for the battle engine.

Builds two combatants from the preset opponents (or a training dummy, or a
dungeon boss), runs one battle and prints the log. Batch mode runs many
seeded battles and reports the win rates.

Examples:
    ironfist warrior mage --seed 7
    ironfist rogue tank --choices backstab basic quick_strike
    ironfist mage --dummy tank
    ironfist warrior --boss training_camp 3
    ironfist warrior rogue --batch 500
"""

import argparse
import logging
from collections import Counter

from ironfist.character.builder import (
    build_boss_combatant,
    build_preset_opponent,
    build_training_dummy,
)
from ironfist.character.combatant import CombatantState
from ironfist.combat.combat_manager import simulate_combat
from ironfist.core.logging import setup_logging
from ironfist.core.rng import make_rng
from ironfist.core.settings import CombatSettings
from ironfist.core.utils import GameException, cprint, crule
from ironfist.ui.combat_log_view import print_combat_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ironfist",
        description="Simulate a one-on-one battle between two combatants.",
    )
    parser.add_argument("player", help="Preset used for the player side.")
    parser.add_argument(
        "enemy",
        nargs="?",
        default=None,
        help="Preset used for the enemy side.",
    )
    parser.add_argument(
        "--dummy",
        metavar="CLASS",
        help="Fight a training dummy scaled from the player.",
    )
    parser.add_argument(
        "--boss",
        nargs=2,
        metavar=("DUNGEON", "INDEX"),
        help="Fight a boss from the catalog, with the enemy preset's stats.",
    )
    parser.add_argument(
        "--choices",
        nargs="*",
        default=[],
        help="Ordered player actions ('basic' or an ability id).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "--batch",
        type=int,
        default=0,
        help="Run N seeded battles and print the win rates.",
    )
    parser.add_argument(
        "--revert-buffs",
        action="store_true",
        help="Restore buffed stats when the buff expires.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def build_enemy(args: argparse.Namespace, player: CombatantState) -> CombatantState:
    if args.dummy:
        return build_training_dummy(args.dummy, player)
    if args.boss:
        dungeon_id, boss_index = args.boss[0], int(args.boss[1])
        stats_source = build_preset_opponent(args.enemy or "warrior", id="enemy")
        return build_boss_combatant(
            dungeon_id,
            boss_index,
            level=player.level,
            stats=stats_source.base_stats,
            armor=stats_source.armor,
        )
    if args.enemy is None:
        raise GameException("An enemy preset, --dummy or --boss is required.")
    return build_preset_opponent(args.enemy, id="enemy")


def run_batch(
    player: CombatantState,
    enemy: CombatantState,
    battles: int,
    settings: CombatSettings,
    seed: int | None,
) -> None:
    outcomes: Counter[str] = Counter()
    total_turns = 0
    for index in range(battles):
        rng = make_rng(None if seed is None else seed + index)
        result = simulate_combat(player, enemy, rng=rng, settings=settings)
        outcomes[result.winner_id or "draw"] += 1
        total_turns += result.turns
    crule(f"{battles} battles", style="bold green")
    for name, key in ((player.name, player.id), (enemy.name, enemy.id), ("Draw", "draw")):
        cprint(f"  {name:<30} {outcomes[key] / battles:6.1%}")
    cprint(f"  Average turns: {total_turns / battles:.2f}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    settings = CombatSettings.from_env()
    if args.revert_buffs:
        settings = settings.model_copy(update={"revert_buffs_on_expiry": True})
    try:
        player = build_preset_opponent(args.player, id="player")
        enemy = build_enemy(args, player)
    except GameException as e:
        cprint(f"[bold red]{e}[/]")
        return 1

    if args.batch > 0:
        run_batch(player, enemy, args.batch, settings, args.seed)
        return 0

    result = simulate_combat(
        player,
        enemy,
        args.choices,
        rng=make_rng(args.seed),
        settings=settings,
    )
    print_combat_result(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
