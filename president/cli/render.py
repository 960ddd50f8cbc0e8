"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card
from ..engine import GameEngine
from .views import StateSummaryView

_COLOR_STYLES = {
    "red": "bold red",
    "black": "bold bright_white",
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    style = _COLOR_STYLES.get(card.color, "white")
    return f"[{style}]{card.label()}[/{style}]"


def format_cards(cards: Sequence[Card]) -> str:
    if not cards:
        return "[dim]—[/dim]"
    return " ".join(format_card(card) for card in cards)


def render_state(
    engine: GameEngine,
    roles: Sequence[str],
    *,
    reveal_seats: Iterable[int] | None = None,
    title: str = "President",
) -> RenderableType:
    """Return a Rich panel describing the current table state."""

    view = StateSummaryView(
        engine=engine,
        roles=roles,
        reveal_seats=set(reveal_seats or set()),
        card_formatter=format_card,
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
