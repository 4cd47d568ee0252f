"""Mutable War game state."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from framewar.game.cards import Card, build_deck, deal, shuffle

WELCOME_MESSAGE = "Welcome to War! Draw a card to begin."
DECK_SIZE = 52


class GameStatus(Enum):
    """Where the game is in its lifecycle."""

    INITIAL = "initial"
    PLAYING = "playing"
    WAR = "war"
    ENDED = "ended"


@dataclass
class GameState:
    """State of a single game of War.

    Transitions in ``framewar.game.resolver`` mutate this in place. The
    revealed ``player_card``/``computer_card`` always also live in one of
    the decks or in ``war_pile``; they are a view, not a separate zone.
    """

    player_deck: list[Card] = field(default_factory=list)
    computer_deck: list[Card] = field(default_factory=list)
    player_card: Optional[Card] = None
    computer_card: Optional[Card] = None
    war_pile: list[Card] = field(default_factory=list)
    status: GameStatus = GameStatus.INITIAL
    message: str = WELCOME_MESSAGE
    round_number: int = 0
    winner: Optional[str] = None  # "Player" or "Computer" once decided

    @property
    def is_war(self) -> bool:
        return self.status is GameStatus.WAR

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.ENDED

    def total_cards(self) -> int:
        """Cards held across both decks and the war pile."""
        return len(self.player_deck) + len(self.computer_deck) + len(self.war_pile)

    def leader(self) -> str:
        """Name of the side with more cards ("Player", "Computer" or "Tie")."""
        if len(self.player_deck) > len(self.computer_deck):
            return "Player"
        if len(self.computer_deck) > len(self.player_deck):
            return "Computer"
        return "Tie"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for rendering; decks are reported as counts."""

        def card_dict(card: Optional[Card]) -> Optional[dict[str, Any]]:
            if card is None:
                return None
            return {
                "value": card.value,
                "suit": card.suit.value,
                "label": card.label,
                "image_ref": card.image_ref,
            }

        return {
            "player_deck_size": len(self.player_deck),
            "computer_deck_size": len(self.computer_deck),
            "player_card": card_dict(self.player_card),
            "computer_card": card_dict(self.computer_card),
            "war_pile_size": len(self.war_pile),
            "status": self.status.value,
            "is_war": self.is_war,
            "message": self.message,
            "round_number": self.round_number,
            "winner": self.winner,
        }


def new_game(rng: Optional[random.Random] = None) -> GameState:
    """Shuffle a fresh deck and deal it into a new game."""
    player_deck, computer_deck = deal(shuffle(build_deck(), rng))
    return GameState(player_deck=player_deck, computer_deck=computer_deck)
