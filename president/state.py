"""Core game state data structures for President."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, overload

from .cards import Card

__all__ = [
    "GameConfig",
    "Hand",
    "TableState",
    "deal",
]


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Runtime configuration for a single game."""

    num_seats: int = 4
    human_seat: int | None = 0

    def __post_init__(self) -> None:
        if self.num_seats < 2:
            raise ValueError("num_seats must be at least 2")
        if self.human_seat is not None and not 0 <= self.human_seat < self.num_seats:
            raise ValueError("human_seat must be a valid seat index or None")

    @property
    def pass_threshold(self) -> int:
        """Consecutive passes that clear the table: everyone but the last player."""

        return self.num_seats - 1

    def is_automated(self, seat: int) -> bool:
        return seat != self.human_seat


class Hand(Sequence[Card]):
    """Ordered collection of cards held by one seat.

    Membership and removal use card identity, never rank/suit equality.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: List[Card] = list(cards)

    @overload
    def __getitem__(self, index: int) -> Card: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Card]: ...

    def __getitem__(self, index):
        return self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return any(held is card for held in self._cards)

    def __repr__(self) -> str:
        return f"Hand({' '.join(card.label() for card in self._cards)})"

    def index_of(self, card: Card) -> int:
        for idx, held in enumerate(self._cards):
            if held is card:
                return idx
        raise ValueError(f"{card.label()} is not in hand")

    def add(self, card: Card) -> None:
        self._cards.append(card)

    def remove(self, card: Card) -> None:
        """Remove ``card`` by identity, raising ``ValueError`` when absent."""

        del self._cards[self.index_of(card)]

    def sort_by_rank(self) -> None:
        self._cards.sort(key=lambda card: card.rank)

    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)


@dataclass(slots=True)
class TableState:
    """Shared table state visible to every seat."""

    last_played: tuple[Card, ...] = ()
    consecutive_passes: int = 0
    active_seat: int = 0

    @property
    def is_clear(self) -> bool:
        return not self.last_played

    @property
    def rank(self) -> int | None:
        """Return the rank of the set on the table, or ``None`` when clear."""

        if not self.last_played:
            return None
        return self.last_played[0].rank

    @property
    def arity(self) -> int:
        return len(self.last_played)

    def clear(self) -> None:
        self.last_played = ()
        self.consecutive_passes = 0

    def copy(self) -> "TableState":
        return TableState(
            last_played=self.last_played,
            consecutive_passes=self.consecutive_passes,
            active_seat=self.active_seat,
        )


def deal(deck: Sequence[Card], num_seats: int = 4) -> list[Hand]:
    """Deal ``deck`` round-robin into ``num_seats`` rank-sorted hands.

    Cards come off the end of the deck, one per seat in turn, until the deck
    is exhausted. ``deck`` itself is left untouched.
    """

    if num_seats < 2:
        raise ValueError("num_seats must be at least 2")
    if len({id(card) for card in deck}) != len(deck):
        raise ValueError("deck contains the same card more than once")

    draw_pile = list(deck)
    hands = [Hand() for _ in range(num_seats)]
    seat = 0
    while draw_pile:
        hands[seat].add(draw_pile.pop())
        seat = (seat + 1) % num_seats

    for hand in hands:
        hand.sort_by_rank()
    return hands
