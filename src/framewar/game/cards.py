"""Card types and the deck factory."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

# Face card names; other values display as the number itself
FACE_LABELS = {1: "Ace", 11: "Jack", 12: "Queen", 13: "King"}

MIN_VALUE = 1
MAX_VALUE = 13


class Suit(Enum):
    """Playing card suits, in deck build order."""

    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"


def card_label(value: int) -> str:
    """Display name for a card value (1=Ace, 11=Jack, ..., else the number)."""
    return FACE_LABELS.get(value, str(value))


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    value: int
    suit: Suit

    @property
    def label(self) -> str:
        return f"{card_label(self.value)} of {self.suit.value}"

    @property
    def image_ref(self) -> str:
        return f"{self.value}_of_{self.suit.value}.png"

    def __str__(self) -> str:
        return self.label


def build_deck() -> list[Card]:
    """Build the standard 52-card deck, 13 values for each suit."""
    return [
        Card(value=value, suit=suit)
        for suit in Suit
        for value in range(MIN_VALUE, MAX_VALUE + 1)
    ]


def shuffle(deck: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """Return a uniformly shuffled copy of ``deck``.

    Fisher-Yates: scanning from the end, each position is swapped with a
    uniformly chosen position at or before it. The input is left untouched.

    Args:
        deck: Cards to shuffle
        rng: Random source (defaults to a fresh unseeded ``random.Random``)

    Returns:
        New list holding a permutation of ``deck``
    """
    if rng is None:
        rng = random.Random()

    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def deal(deck: Sequence[T]) -> tuple[list[T], list[T]]:
    """Split a deck at its midpoint into (player, computer) halves.

    The first half holds ``len(deck) // 2`` cards, so on odd lengths the
    second half is the larger one.
    """
    midpoint = len(deck) // 2
    return list(deck[:midpoint]), list(deck[midpoint:])
