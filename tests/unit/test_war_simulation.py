"""Tests for War game simulation."""

import pytest
from framewar.game.cards import Card, Suit
from framewar.game.resolver import FAREWELL_MESSAGE, Action, exit_game
from framewar.game.simulate import next_action, play_war_game
from framewar.game.state import GameState, GameStatus


def make_state(player: list[int], computer: list[int]) -> GameState:
    return GameState(
        player_deck=[Card(v, Suit.CLUBS) for v in player],
        computer_deck=[Card(v, Suit.HEARTS) for v in computer],
        status=GameStatus.PLAYING,
    )


def test_play_full_game() -> None:
    """Test a full game runs to completion or the round cap."""
    result = play_war_game(seed=42, max_rounds=1000)

    assert result.winner in ("Player", "Computer", "Tie")
    assert 0 < result.rounds <= 1000
    assert result.player_cards + result.computer_cards <= 52


def test_same_seed_same_game() -> None:
    a = play_war_game(seed=7, max_rounds=2000)
    b = play_war_game(seed=7, max_rounds=2000)

    assert a.to_dict() == b.to_dict()


def test_player_sweeps_small_deck() -> None:
    result = play_war_game(state=make_state([13, 12], [1, 2]))

    assert result.finished is True
    assert result.winner == "Player"
    assert result.rounds == 2
    assert result.wars == 0
    assert result.player_cards == 4
    assert result.message == "Game Over! Player Wins!"


def test_counts_wars() -> None:
    result = play_war_game(state=make_state([5, 1, 1, 1, 9], [5, 2, 2, 2, 3]))

    assert result.finished is True
    assert result.winner == "Player"
    assert result.wars == 1
    assert result.rounds == 2


def test_war_default_win() -> None:
    result = play_war_game(state=make_state([5, 1], [5, 2, 2, 2, 3, 4]))

    assert result.finished is True
    assert result.winner == "Computer"
    assert result.message == "Computer wins the war by default!"


def test_round_cap_stops_game() -> None:
    result = play_war_game(seed=42, max_rounds=1)

    assert result.rounds == 1
    assert result.finished is False
    assert result.winner in ("Player", "Computer", "Tie")


def test_exited_game_is_unfinished() -> None:
    state = make_state([1, 2, 3], [4])
    exit_game(state)

    result = play_war_game(state=state)

    assert result.finished is False
    assert result.winner == "Player"
    assert result.rounds == 0
    assert result.message == FAREWELL_MESSAGE


def test_exited_even_game_is_a_tie() -> None:
    state = make_state([1, 2], [3, 4])
    exit_game(state)

    result = play_war_game(state=state)

    assert result.finished is False
    assert result.winner == "Tie"


@pytest.mark.parametrize(
    "status,expected",
    [
        (GameStatus.INITIAL, Action.DRAW),
        (GameStatus.PLAYING, Action.DRAW),
        (GameStatus.WAR, Action.CONTINUE_WAR),
        (GameStatus.ENDED, None),
    ],
)
def test_next_action(status, expected) -> None:
    assert next_action(GameState(status=status)) is expected
