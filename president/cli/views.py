"""Composable view primitives for the President CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Set

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card
from ..engine import GameEngine


@dataclass(slots=True)
class StateSummaryView:
    """Renderable summarising the seats and the table."""

    engine: GameEngine
    roles: Sequence[str]
    reveal_seats: Set[int]
    card_formatter: Callable[[Card], str]

    def _hand_markup(self, cards: Sequence[Card], visible: bool) -> str:
        if not visible:
            return f"{len(cards)} cards"
        if not cards:
            return "—"
        return " ".join(self.card_formatter(card) for card in cards)

    def _table_panel(self) -> Panel:
        engine = self.engine
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        if engine.last_played:
            played = " ".join(self.card_formatter(card) for card in engine.last_played)
            grid.add_row(f"[cyan]Last played[/cyan]: {played}")
        else:
            grid.add_row("[cyan]Last played[/cyan]: [dim]clear table[/dim]")
        grid.add_row(
            f"[cyan]Passes[/cyan]: {engine.consecutive_passes}/{engine.config.pass_threshold}"
        )
        grid.add_row(f"[cyan]Turn[/cyan]: {len(engine.history) + 1}")
        return Panel(grid, title="Table State", box=box.SQUARE, border_style="blue")

    def render(self) -> RenderableType:
        engine = self.engine
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Seat", justify="left", style="bold")
        table.add_column("Role", justify="left")
        table.add_column("Hand", justify="left")
        table.add_column("Status", justify="left")

        for seat, cards in enumerate(engine.hands):
            role = self.roles[seat] if seat < len(self.roles) else "AI"
            visible = seat in self.reveal_seats
            hand_display = self._hand_markup(cards, visible)

            status_text = ""
            if engine.winner_seat == seat:
                status_text = "[bold green]Winner[/bold green]"
            elif not engine.is_over and seat == engine.active_seat:
                status_text = "[yellow]To act[/yellow]"

            name = f"P{seat}"
            if not engine.is_over and seat == engine.active_seat:
                name = f"[bold yellow]{name}[/bold yellow]"

            table.add_row(name, role, hand_display, status_text)

        return Group(table, self._table_panel())
