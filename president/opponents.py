"""Automated opponent strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from .actions import Action, PassAction, PlayAction
from .cards import Card
from .rules import group_by_rank
from .state import TableState

__all__ = ["Opponent", "LowestBeatOpponent", "choose_move"]


class Opponent(Protocol):
    """Anything able to pick a move for a seat."""

    def choose_move(self, hand: Sequence[Card], table: TableState) -> Action: ...


def choose_move(hand: Sequence[Card], table: TableState) -> Action:
    """Return the cheapest legal play for ``hand`` or a pass.

    On a clear table the lowest single card is led. Otherwise the lowest rank
    that beats the table with enough cards to match its arity is played,
    splitting a larger group when needed so high cards are kept back.
    """

    if not hand:
        return PassAction()

    if table.is_clear:
        lowest = min(hand, key=lambda card: card.rank)
        return PlayAction(cards=(lowest,))

    arity = table.arity
    table_rank = table.rank
    assert table_rank is not None
    for rank, group in group_by_rank(hand).items():
        if rank > table_rank and len(group) >= arity:
            return PlayAction(cards=tuple(group[:arity]))
    return PassAction()


@dataclass(slots=True)
class LowestBeatOpponent:
    """Default opponent: always plays the cheapest legal beat."""

    name: str = "Lowest beat"

    def choose_move(self, hand: Sequence[Card], table: TableState) -> Action:
        return choose_move(hand, table)
