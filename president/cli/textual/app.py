"""Textual-powered interactive President interface."""

from __future__ import annotations

import random
from dataclasses import dataclass

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from ... import rules, scoreboard
from ...actions import PlayAction
from ...cards import format_cards as plain_cards
from ...engine import GameEngine, TurnRecord
from ...selection import HandSelection
from ...state import GameConfig
from ..render import format_card, format_cards, render_state

MAX_EVENT_LINES = 18
HUMAN_SEAT = 0
MAX_HINTS = 4


@dataclass(slots=True)
class PlayerContext:
    """Cached metadata for each seat."""

    label: str
    role: str


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def add(self, message: str) -> None:
        log = list(self.lines)
        log.append(message)
        self.lines = tuple(log[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text.from_markup(line))
        else:
            content.add_row(Text.from_markup("[dim]Event log will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class InfoPanel(Static):
    """Static widget wrapping a titled panel."""

    def update_panel(self, title: str, body) -> None:
        self.update(Panel(body, title=title, border_style="cyan"))


class ScorePanel(Static):
    """Running win tally across games in this session."""

    def update_scores(self, history: scoreboard.MatchHistory) -> None:
        table = Table(expand=True)
        table.add_column("Seat", justify="center")
        table.add_column("Wins", justify="right")
        table.add_column("Cards left", justify="right")
        for total in history.totals():
            table.add_row(f"P{total.seat}", str(total.wins), str(total.cards_left))
        self.update(Panel(table, title=f"Scores ({len(history.games)} game(s))", border_style="green"))


class StatusStrip(Static):
    """Single-line status message above the table."""

    message: reactive[str] = reactive("")

    def watch_message(self, value: str) -> None:
        self.update(Text.from_markup(value))


class PresidentTextualApp(App):
    """Textual President game UI with one human seat."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
    }

    #left, #right {
        layout: vertical;
        width: 1fr;
        height: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }

    #hand {
        height: 1fr;
        border: heavy $accent;
    }

    StatusStrip {
        width: 100%;
    }

    InfoPanel, EventLog, ScorePanel {
        width: 100%;
        min-height: 6;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit"),
        Binding("p", "play", "Play selection"),
        Binding("x", "pass_turn", "Pass"),
        Binding("space", "toggle_card", "Toggle card", show=False),
        Binding("c", "clear_selection", "Clear"),
        Binding("h", "toggle_reveal", "Reveal hands"),
        Binding("n", "new_game", "New game", show=False),
    ]

    def __init__(self, *, seed: int | None, delay: float, reveal: bool) -> None:
        super().__init__()
        if delay < 0:
            raise ValueError("delay must be non-negative")
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        self.rng = random.Random(seed)
        self.delay = delay
        self.reveal_enabled = reveal
        self.config = GameConfig(num_seats=4, human_seat=HUMAN_SEAT)
        self.roles = ["Human" if idx == HUMAN_SEAT else "AI" for idx in range(self.config.num_seats)]
        self.contexts = [
            PlayerContext(label="You" if idx == HUMAN_SEAT else f"P{idx}", role=self.roles[idx])
            for idx in range(self.config.num_seats)
        ]
        self.match_history = scoreboard.MatchHistory(self.config.num_seats)
        self.selection = HandSelection()
        self.game_number = 0
        self.engine: GameEngine | None = None

        self.status_strip: StatusStrip | None = None
        self.table_panel: InfoPanel | None = None
        self.hand_list: OptionList | None = None
        self.event_log: EventLog | None = None
        self.score_panel: ScorePanel | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.table_panel = InfoPanel(id="table")
        self.table_panel.update_panel("Table", Text.from_markup("[dim]Dealing…[/dim]"))
        self.hand_list = OptionList(id="hand")
        left = Vertical(self.table_panel, self.hand_list, id="left")

        self.event_log = EventLog(id="events")
        self.score_panel = ScorePanel(id="scores")
        self.score_panel.update_scores(self.match_history)
        right = Vertical(self.event_log, self.score_panel, id="right")

        yield Horizontal(left, right, id="main")
        yield Footer()

    async def on_mount(self) -> None:
        await self._start_game()

    async def action_toggle_reveal(self) -> None:
        self.reveal_enabled = not self.reveal_enabled
        self._refresh_ui()

    async def action_new_game(self) -> None:
        if self.engine is None or not self.engine.is_over:
            return
        await self._start_game()

    async def action_clear_selection(self) -> None:
        self.selection.clear()
        self._refresh_ui()

    async def action_toggle_card(self) -> None:
        if self.hand_list is None or self.hand_list.highlighted is None:
            return
        index = self.hand_list.highlighted
        self.selection.toggle(index)
        self._refresh_ui(highlight=index)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.selection.toggle(event.option_index)
        self._refresh_ui(highlight=event.option_index)

    async def action_play(self) -> None:
        engine = self.engine
        if engine is None or not self._human_to_act():
            return
        cards = self.selection.cards(engine.hand(HUMAN_SEAT))
        try:
            record = engine.submit_play(HUMAN_SEAT, cards)
        except rules.InvalidPlayError as exc:
            self._set_status(f"[red]Invalid play:[/red] {exc}")
            return
        self.selection.clear()
        self._log_record(record)
        self._refresh_ui()
        await self._process_turn()

    async def action_pass_turn(self) -> None:
        engine = self.engine
        if engine is None or not self._human_to_act():
            return
        record = engine.submit_pass(HUMAN_SEAT)
        self.selection.clear()
        self._log_record(record)
        self._refresh_ui()
        await self._process_turn()

    async def _start_game(self) -> None:
        self.game_number += 1
        self.selection.clear()
        self.engine = GameEngine.new_game(self.config, self.rng)
        if self.event_log:
            self.event_log.add(f"[bold cyan]Game {self.game_number}[/bold cyan] dealt (seed {self.seed})")
        self._refresh_ui()
        await self._process_turn()

    async def _process_turn(self) -> None:
        engine = self.engine
        if engine is None:
            return
        if engine.is_over:
            self._handle_game_end()
            return

        seat = engine.pending_automated_seat
        if seat is None:
            self._set_status(
                "[yellow]Your turn[/yellow]: select cards with Enter or Space, [bold]P[/bold] to play, [bold]X[/bold] to pass"
                f" • {hint_text(engine)}"
            )
            return

        self._set_status(f"[cyan]{self.contexts[seat].label}[/cyan] is thinking…")
        if self.delay > 0:
            self.set_timer(self.delay, self._perform_ai_turn)
        else:
            self.call_later(self._perform_ai_turn)

    async def _perform_ai_turn(self) -> None:
        engine = self.engine
        if engine is None or engine.pending_automated_seat is None:
            return
        record = engine.play_automated_turn()
        self._log_record(record)
        self._refresh_ui()
        await self._process_turn()

    def _handle_game_end(self) -> None:
        engine = self.engine
        assert engine is not None and engine.winner_seat is not None
        summary = scoreboard.GameSummary(
            game_number=self.game_number,
            winner_seat=engine.winner_seat,
            turns=len(engine.history),
            cards_left=[len(hand) for hand in engine.hands],
        )
        self.match_history.record(summary)
        if self.score_panel:
            self.score_panel.update_scores(self.match_history)
        winner_label = self.contexts[engine.winner_seat].label
        verb = "win" if engine.winner_seat == HUMAN_SEAT else "wins"
        if self.event_log:
            self.event_log.add(f"[bold green]{winner_label} {verb} game {self.game_number}![/bold green]")
        self._set_status(
            f"[green]{winner_label} {verb}.[/green] Press [bold]N[/bold] for a new game or [bold]Q[/bold] to quit."
        )
        self._refresh_ui()

    def _human_to_act(self) -> bool:
        engine = self.engine
        if engine is None or engine.is_over:
            return False
        if engine.active_seat != HUMAN_SEAT:
            self._set_status("[red]Wait for your turn.[/red]")
            return False
        return True

    def _log_record(self, record: TurnRecord) -> None:
        if not self.event_log:
            return
        label = self.contexts[record.seat].label
        action = record.action
        if isinstance(action, PlayAction):
            text = f"{label} played {format_cards(action.cards)}"
        else:
            text = f"{label} passed"
        if record.cleared_table:
            text += " [dim](table cleared)[/dim]"
        self.event_log.add(text)

    def _refresh_ui(self, *, highlight: int | None = None) -> None:
        engine = self.engine
        if engine is None:
            return
        reveal = set(range(self.config.num_seats)) if self.reveal_enabled or engine.is_over else {HUMAN_SEAT}
        if self.table_panel:
            self.table_panel.update(render_state(engine, self.roles, reveal_seats=reveal, title=f"Game {self.game_number}"))

        if self.hand_list:
            hand = engine.hand(HUMAN_SEAT)
            self.selection.prune(len(hand))
            previous = self.hand_list.highlighted if highlight is None else highlight
            self.hand_list.clear_options()
            self.hand_list.add_options(
                [
                    Option(Text.from_markup(f"{'[reverse]✔[/reverse]' if idx in self.selection else ' '} {format_card(card)}"))
                    for idx, card in enumerate(hand)
                ]
            )
            if hand:
                self.hand_list.highlighted = min(previous or 0, len(hand) - 1)

    def _set_status(self, message: str) -> None:
        if self.status_strip:
            self.status_strip.message = message


def hint_text(engine: GameEngine, seat: int = HUMAN_SEAT) -> str:
    """Summarise the legal sets ``seat`` can play right now."""

    plays = rules.legal_plays(engine.hand(seat), engine.table)
    if not plays:
        return "no legal play, pass"
    shown = ", ".join(plain_cards(play) for play in plays[:MAX_HINTS])
    if len(plays) > MAX_HINTS:
        shown += f" (+{len(plays) - MAX_HINTS} more)"
    return f"legal: {shown}"


def run_textual_app(*, seed: int | None, delay: float, reveal: bool) -> None:
    """Launch the Textual UI."""

    app = PresidentTextualApp(seed=seed, delay=delay, reveal=reveal)
    app.run()
