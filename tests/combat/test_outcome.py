"""
Tests for the outcome resolution.
"""

import pytest

from ironfist.combat.outcome import resolve_outcome


@pytest.fixture
def player(make_combatant):
    return make_combatant(id="player", vitality=20)


@pytest.fixture
def enemy(make_combatant):
    return make_combatant(id="enemy", vitality=40)


def test_enemy_wins_when_player_drops(player, enemy):
    """
    Test that a player at 0 HP loses.
    """
    player.current_hp = 0
    result = resolve_outcome(player, enemy, 3, [])
    assert (result.winner_id, result.loser_id, result.draw) == ("enemy", "player", False)
    assert result.turns == 3


def test_player_wins_when_enemy_drops(player, enemy):
    """
    Test that an enemy at 0 HP loses even if the player is nearly dead.
    """
    player.current_hp = 1
    enemy.current_hp = 0
    result = resolve_outcome(player, enemy, 7, [])
    assert (result.winner_id, result.loser_id, result.draw) == ("player", "enemy", False)


def test_both_dropping_is_a_draw(player, enemy):
    """
    Test that both at 0 HP is a draw.
    """
    player.current_hp = 0
    enemy.current_hp = 0
    result = resolve_outcome(player, enemy, 2, [])
    assert result.draw
    assert result.winner_id is None
    assert result.loser_id is None


def test_turn_limit_higher_fraction_wins(player, enemy):
    """
    Test that the higher HP fraction wins, not the higher HP.
    """
    player.current_hp = 100
    enemy.current_hp = 150
    result = resolve_outcome(player, enemy, 15, [])
    assert result.winner_id == "player"
    assert result.loser_id == "enemy"


def test_turn_limit_equal_fraction_is_a_draw(player, enemy):
    """
    Test that equal HP fractions are a draw.
    """
    player.current_hp = 100
    enemy.current_hp = 200
    result = resolve_outcome(player, enemy, 15, [])
    assert result.draw
    assert result.winner_id is None


def test_snapshots(player, enemy):
    """
    Test that the result carries the final snapshots of both sides.
    """
    enemy.current_hp = 42
    result = resolve_outcome(player, enemy, 1, [])
    assert result.player_snapshot.id == "player"
    assert result.enemy_snapshot.current_hp == 42
    assert result.enemy_snapshot.max_hp == 400
