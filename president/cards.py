"""Card abstractions and deck assembly for President."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Iterator

__all__ = [
    "Suit",
    "Card",
    "RANKS",
    "ACE",
    "TWO",
    "DECK_SIZE",
    "iter_full_deck",
    "build_deck",
    "build_shuffled_deck",
    "format_cards",
]


class Suit(str, Enum):
    """Enumeration of the four suits in a standard deck."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


_SUIT_SYMBOLS: Final[dict[Suit, str]] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

# Two ranks above Ace in this variant.
ACE: Final[int] = 14
TWO: Final[int] = 15
RANKS: Final[tuple[int, ...]] = tuple(range(3, TWO + 1))
DECK_SIZE: Final[int] = len(RANKS) * len(Suit)

_RANK_LABELS: Final[dict[int, str]] = {11: "J", 12: "Q", 13: "K", ACE: "A", TWO: "2"}


@dataclass(frozen=True, slots=True, eq=False)
class Card:
    """Value object describing a physical card.

    Equality is by identity: two cards of the same rank and suit are still
    different physical cards while a game is in progress.
    """

    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"rank {self.rank} outside {RANKS[0]}..{RANKS[-1]}")

    @property
    def rank_label(self) -> str:
        return _RANK_LABELS.get(self.rank, str(self.rank))

    @property
    def color(self) -> str:
        """Return ``"red"`` for hearts and diamonds, ``"black"`` otherwise."""

        return "red" if self.suit.is_red else "black"

    def label(self) -> str:
        """Create a display label suitable for CLI representations."""

        return f"{self.rank_label}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.label()})"


def iter_full_deck() -> Iterator[Card]:
    """Yield every card of a fresh deck, suit by suit in ascending rank."""

    for suit in Suit:
        for rank in RANKS:
            yield Card(rank=rank, suit=suit)


def build_deck() -> list[Card]:
    """Return a deterministic ordering of all 52 cards."""

    return list(iter_full_deck())


def build_shuffled_deck(rng: random.Random | None = None) -> list[Card]:
    """Return a freshly built deck in uniformly random order."""

    if rng is None:
        rng = random.Random()
    deck = build_deck()
    rng.shuffle(deck)
    return deck


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(card.label() for card in cards)
