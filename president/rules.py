"""Rule utilities and error types for President."""

from __future__ import annotations

from typing import Iterable, Sequence

from .cards import Card
from .state import TableState

__all__ = [
    "GameError",
    "InvalidPlayError",
    "OutOfTurnError",
    "ContractViolationError",
    "MAX_SET_SIZE",
    "is_same_rank",
    "is_valid_play",
    "group_by_rank",
    "legal_plays",
]

MAX_SET_SIZE = 4


class GameError(RuntimeError):
    """Base class for errors raised by the turn engine."""


class InvalidPlayError(GameError):
    """Raised when a proposed set may not follow the current table."""


class OutOfTurnError(GameError):
    """Raised when a seat acts while another seat is active."""


class ContractViolationError(GameError):
    """Raised when a caller breaks the engine contract.

    Examples are playing a card the seat does not hold or acting after the
    game has finished. These indicate a bug in the caller.
    """


def is_same_rank(cards: Sequence[Card]) -> bool:
    if not cards:
        return False
    first_rank = cards[0].rank
    return all(card.rank == first_rank for card in cards)


def is_valid_play(proposed_cards: Sequence[Card], table: TableState) -> bool:
    """Return ``True`` when ``proposed_cards`` may legally follow ``table``."""

    if not proposed_cards:
        return False
    if not is_same_rank(proposed_cards):
        return False
    if table.is_clear:
        return True
    if len(proposed_cards) != table.arity:
        return False
    return proposed_cards[0].rank > table.last_played[0].rank


def group_by_rank(cards: Iterable[Card]) -> dict[int, list[Card]]:
    """Group ``cards`` by rank in ascending rank order, keeping hand order per group."""

    groups: dict[int, list[Card]] = {}
    for card in cards:
        groups.setdefault(card.rank, []).append(card)
    return {rank: groups[rank] for rank in sorted(groups)}


def legal_plays(cards: Iterable[Card], table: TableState) -> list[tuple[Card, ...]]:
    """Return every distinct legal set ``cards`` can form against ``table``.

    Sets take the first cards of each rank group, so a pair of sevens is
    offered once rather than once per combination of suits.
    """

    plays: list[tuple[Card, ...]] = []
    for rank, group in group_by_rank(cards).items():
        if table.is_clear:
            sizes: Iterable[int] = range(1, min(len(group), MAX_SET_SIZE) + 1)
        else:
            sizes = (table.arity,)
        for size in sizes:
            if size > len(group):
                continue
            candidate = tuple(group[:size])
            if is_valid_play(candidate, table):
                plays.append(candidate)
    return plays
