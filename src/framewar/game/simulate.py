"""Autoplay a game of War to completion."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Optional

from framewar.game.resolver import Action, apply_action
from framewar.game.state import GameState, GameStatus, new_game


@dataclass
class SimulationResult:
    """Outcome of an automatic game."""

    winner: str  # "Player", "Computer", or "Tie" for an unfinished even game
    rounds: int
    wars: int
    finished: bool
    message: str
    player_cards: int
    computer_cards: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "winner": self.winner,
            "rounds": self.rounds,
            "wars": self.wars,
            "finished": self.finished,
            "message": self.message,
            "player_cards": self.player_cards,
            "computer_cards": self.computer_cards,
        }


def next_action(state: GameState) -> Optional[Action]:
    """The action that advances ``state``, or None once the game is over."""
    if state.status is GameStatus.WAR:
        return Action.CONTINUE_WAR
    if state.status is GameStatus.ENDED:
        return None
    return Action.DRAW


def play_war_game(
    seed: Optional[int] = None,
    max_rounds: int = 5000,
    state: Optional[GameState] = None,
) -> SimulationResult:
    """Play a game by always taking the only progressing action.

    War between two fixed decks can cycle forever, so the game stops after
    ``max_rounds`` resolved rounds. A game stopped there, or one that was
    exited before a deck ran out, is unfinished and credited to the
    side holding more cards.

    Args:
        seed: Seed for the shuffle (ignored when ``state`` is given)
        max_rounds: Round cap
        state: Start from this state instead of dealing a new game

    Returns:
        SimulationResult
    """
    if state is None:
        state = new_game(random.Random(seed))

    wars = 0
    while state.round_number < max_rounds:
        action = next_action(state)
        if action is None:
            break
        state = apply_action(state, action).state
        if action is Action.DRAW and state.status is GameStatus.WAR:
            wars += 1

    # A side left without cards only shows up on the next draw
    if not state.is_over and (not state.player_deck or not state.computer_deck):
        state = apply_action(state, Action.DRAW).state

    # A game ended by exit has no winner and counts as unfinished
    finished = state.is_over and state.winner is not None
    winner = state.winner if finished else state.leader()

    return SimulationResult(
        winner=winner,
        rounds=state.round_number,
        wars=wars,
        finished=finished,
        message=state.message,
        player_cards=len(state.player_deck),
        computer_cards=len(state.computer_deck),
    )
