"""Core War engine: deck factory, game state and round resolver."""

from framewar.game.cards import Card, Suit, build_deck, card_label, deal, shuffle
from framewar.game.state import GameState, GameStatus, new_game
from framewar.game.resolver import (
    Action,
    ActionResult,
    UnknownActionError,
    apply_action,
    available_actions,
)
from framewar.game.table import GameTable

__all__ = [
    "Card",
    "Suit",
    "build_deck",
    "card_label",
    "deal",
    "shuffle",
    "GameState",
    "GameStatus",
    "new_game",
    "Action",
    "ActionResult",
    "UnknownActionError",
    "apply_action",
    "available_actions",
    "GameTable",
]
