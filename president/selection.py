"""Presentation-side card selection for the human seat."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .cards import Card

__all__ = ["HandSelection"]


@dataclass(slots=True)
class HandSelection:
    """Indices of hand cards the player has marked for the next play.

    Selection never touches the engine; it is resolved into cards only when
    the player commits.
    """

    _indices: list[int] = field(default_factory=list)

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __contains__(self, index: object) -> bool:
        return index in self._indices

    def toggle(self, index: int) -> bool:
        """Flip ``index`` in or out of the selection; return whether it is now selected."""

        if index < 0:
            raise ValueError("selection index must be non-negative")
        if index in self._indices:
            self._indices.remove(index)
            return False
        self._indices.append(index)
        return True

    def clear(self) -> None:
        self._indices.clear()

    def prune(self, hand_size: int) -> None:
        """Drop indices that no longer point into a hand of ``hand_size`` cards."""

        self._indices = [idx for idx in self._indices if idx < hand_size]

    def cards(self, hand: Sequence[Card]) -> tuple[Card, ...]:
        return tuple(hand[idx] for idx in self._indices if idx < len(hand))
