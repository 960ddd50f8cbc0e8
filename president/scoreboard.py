"""Helpers for tracking results across several games."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

__all__ = ["GameSummary", "SeatTotal", "MatchHistory"]


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Summary statistics captured after a single game."""

    game_number: int
    winner_seat: int
    turns: int
    cards_left: Sequence[int]


@dataclass(frozen=True, slots=True)
class SeatTotal:
    """Aggregate totals accumulated for one seat across recorded games."""

    seat: int
    wins: int
    cards_left: int


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates game summaries for a match."""

    num_seats: int
    games: list[GameSummary] = field(default_factory=list)
    _wins: list[int] = field(init=False, repr=False)
    _cards_left: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.num_seats <= 0:
            raise ValueError("num_seats must be positive")
        self._wins = [0 for _ in range(self.num_seats)]
        self._cards_left = [0 for _ in range(self.num_seats)]

    def record(self, summary: GameSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if len(summary.cards_left) != self.num_seats:
            raise ValueError("cards_left count does not match number of seats")
        if not 0 <= summary.winner_seat < self.num_seats:
            raise ValueError("winner seat out of range")
        self.games.append(summary)
        self._wins[summary.winner_seat] += 1
        for seat, remaining in enumerate(summary.cards_left):
            self._cards_left[seat] += remaining

    def totals(self) -> list[SeatTotal]:
        """Return the cumulative totals for each seat in seating order."""

        return [
            SeatTotal(seat=idx, wins=self._wins[idx], cards_left=self._cards_left[idx])
            for idx in range(self.num_seats)
        ]
