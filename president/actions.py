"""Move values exchanged between players and the turn engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .cards import Card, format_cards

__all__ = ["PlayAction", "PassAction", "Action"]


@dataclass(frozen=True)
class PlayAction:
    """Action describing a set of equal-rank cards laid on the table."""

    cards: tuple[Card, ...]

    def describe(self) -> str:
        return f"Play {format_cards(self.cards)}"


@dataclass(frozen=True)
class PassAction:
    """Action describing a pass."""

    def describe(self) -> str:
        return "Pass"


Action = Union[PlayAction, PassAction]
