"""Round resolution: advances a GameState by one player action.

Every action is total. Game-ending conditions (an empty deck on draw, too
few cards to fight a war) are normal transitions to ``ENDED``. Actions that
make no sense for the current status are declined and leave the state
untouched; callers get that back as ``ActionResult.accepted``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from framewar.game.state import GameState, GameStatus, new_game

RULES_MESSAGE = "Each player draws a card. Higher card wins! If cards match, WAR begins!"
FAREWELL_MESSAGE = "Thanks for playing! Come back soon!"

# Face-down cards each side adds to the pile before the battle card
WAR_FACE_DOWN = 3
WAR_CARDS_NEEDED = WAR_FACE_DOWN + 1


class UnknownActionError(ValueError):
    """Raised when a name does not map to any action."""

    pass


class Action(Enum):
    """The five actions a caller can request."""

    DRAW = "draw"
    CONTINUE_WAR = "continue_war"
    RESET = "reset"
    VIEW_RULES = "view_rules"
    EXIT = "exit"

    @classmethod
    def parse(cls, name: str) -> "Action":
        """Map a wire or command name to an action.

        Raises:
            UnknownActionError: If the name matches no action
        """
        key = name.strip().strip("/").lower()
        action = _ALIASES.get(key)
        if action is None:
            raise UnknownActionError(f"Unknown action: {name!r}")
        return action


_ALIASES = {
    "draw": Action.DRAW,
    "draw_card": Action.DRAW,
    "continue_war": Action.CONTINUE_WAR,
    "continuewar": Action.CONTINUE_WAR,
    "war": Action.CONTINUE_WAR,
    "reset": Action.RESET,
    "reset_game": Action.RESET,
    "view_rules": Action.VIEW_RULES,
    "viewrules": Action.VIEW_RULES,
    "rules": Action.VIEW_RULES,
    "exit": Action.EXIT,
    "exit_game": Action.EXIT,
}


@dataclass
class ActionResult:
    """Outcome of applying an action."""

    state: GameState
    action: Action
    accepted: bool = True
    reason: Optional[str] = None


def available_actions(status: GameStatus) -> list[Action]:
    """Actions a caller should offer the player for ``status``."""
    actions: list[Action] = []
    if status in (GameStatus.INITIAL, GameStatus.PLAYING):
        actions.append(Action.DRAW)
    if status is GameStatus.WAR:
        actions.append(Action.CONTINUE_WAR)
    actions.append(Action.RESET)
    actions.append(Action.VIEW_RULES)
    if status is GameStatus.ENDED:
        actions.append(Action.EXIT)
    return actions


def draw(state: GameState) -> ActionResult:
    """Both sides reveal their top card; higher value takes both."""
    if state.status not in (GameStatus.INITIAL, GameStatus.PLAYING):
        return _decline(state, Action.DRAW, _draw_refusal(state.status))

    if not state.player_deck or not state.computer_deck:
        winner = "Player" if state.player_deck else "Computer"
        state.status = GameStatus.ENDED
        state.winner = winner
        state.message = f"Game Over! {winner} Wins!"
        return ActionResult(state=state, action=Action.DRAW)

    player_card = state.player_deck.pop(0)
    computer_card = state.computer_deck.pop(0)
    state.player_card = player_card
    state.computer_card = computer_card
    state.round_number += 1

    if player_card.value == computer_card.value:
        state.status = GameStatus.WAR
        state.war_pile = [player_card, computer_card]
        state.message = "It's a tie! War begins!"
    elif player_card.value > computer_card.value:
        state.player_deck.extend((player_card, computer_card))
        state.status = GameStatus.PLAYING
        state.message = f"You win with {player_card.label}!"
    else:
        state.computer_deck.extend((computer_card, player_card))
        state.status = GameStatus.PLAYING
        state.message = f"Computer wins with {computer_card.label}!"

    return ActionResult(state=state, action=Action.DRAW)


def continue_war(state: GameState) -> ActionResult:
    """Fight one round of war: three cards face down, one battle card up."""
    if state.status is not GameStatus.WAR:
        return _decline(state, Action.CONTINUE_WAR, "There is no war to continue.")

    player_deck = state.player_deck
    computer_deck = state.computer_deck

    if len(player_deck) < WAR_CARDS_NEEDED or len(computer_deck) < WAR_CARDS_NEEDED:
        # Equal deck sizes go to the computer
        winner = "Player" if len(player_deck) > len(computer_deck) else "Computer"
        state.status = GameStatus.ENDED
        state.winner = winner
        state.message = f"{winner} wins the war by default!"
        return ActionResult(state=state, action=Action.CONTINUE_WAR)

    for _ in range(WAR_FACE_DOWN):
        state.war_pile.append(player_deck.pop(0))
        state.war_pile.append(computer_deck.pop(0))

    player_card = player_deck.pop(0)
    computer_card = computer_deck.pop(0)
    state.war_pile.extend((player_card, computer_card))
    state.player_card = player_card
    state.computer_card = computer_card
    state.round_number += 1

    if player_card.value == computer_card.value:
        state.message = "Another tie! The war continues!"
        return ActionResult(state=state, action=Action.CONTINUE_WAR)

    if player_card.value > computer_card.value:
        player_deck.extend(state.war_pile)
        state.message = f"You win the war with {player_card.label}!"
    else:
        computer_deck.extend(state.war_pile)
        state.message = f"Computer wins the war with {computer_card.label}!"

    state.war_pile = []
    state.status = GameStatus.PLAYING
    return ActionResult(state=state, action=Action.CONTINUE_WAR)


def reset(state: GameState, rng: Optional[random.Random] = None) -> ActionResult:
    """Discard ``state`` and deal a fresh game."""
    return ActionResult(state=new_game(rng), action=Action.RESET)


def view_rules(state: GameState) -> ActionResult:
    state.message = RULES_MESSAGE
    return ActionResult(state=state, action=Action.VIEW_RULES)


def exit_game(state: GameState) -> ActionResult:
    """End the game where it stands; decks are kept for display."""
    state.status = GameStatus.ENDED
    state.message = FAREWELL_MESSAGE
    return ActionResult(state=state, action=Action.EXIT)


def apply_action(
    state: GameState,
    action: Action | str,
    rng: Optional[random.Random] = None,
) -> ActionResult:
    """Apply ``action`` to ``state``.

    Args:
        state: Current game state (mutated in place unless reset)
        action: Action or its wire name
        rng: Random source used when the action deals a new game

    Returns:
        ActionResult holding the state to render next

    Raises:
        UnknownActionError: If ``action`` is a name that maps to no action
    """
    if isinstance(action, str):
        action = Action.parse(action)

    if action is Action.DRAW:
        return draw(state)
    if action is Action.CONTINUE_WAR:
        return continue_war(state)
    if action is Action.RESET:
        return reset(state, rng)
    if action is Action.VIEW_RULES:
        return view_rules(state)
    return exit_game(state)


def _draw_refusal(status: GameStatus) -> str:
    if status is GameStatus.WAR:
        return "A war is in progress. Continue the war first."
    return "The game is over. Reset to play again."


def _decline(state: GameState, action: Action, reason: str) -> ActionResult:
    return ActionResult(state=state, action=action, accepted=False, reason=reason)
