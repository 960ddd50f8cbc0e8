"""Typer entry-point wiring for the President CLI."""

from __future__ import annotations

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .. import simulate
from ..log import LOG_LEVEL, setup_logging
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _check_log_level(value: str) -> str:
    level = value.upper()
    if level not in _LOG_LEVELS:
        raise typer.BadParameter(f"log level must be one of {', '.join(_LOG_LEVELS)}")
    return level


def _render_self_play(report: simulate.SelfPlayReport) -> Table:
    """Return a Rich table describing a self-play session."""

    history = report.history
    games = len(history.games)
    totals = history.totals()
    best_wins = max((total.wins for total in totals), default=0)

    table = Table(title=f"Self-play Results (seed {report.seed})", box=box.SIMPLE_HEAVY)
    table.add_column("Seat", justify="center")
    table.add_column("Wins", justify="right")
    table.add_column("Win %", justify="right")
    table.add_column("Cards left", justify="right")

    for total in totals:
        label = f"P{total.seat}"
        wins = str(total.wins)
        if total.wins == best_wins and games:
            label = f"[bold blue]{label}[/bold blue]"
            wins = f"[bold blue]{wins}[/bold blue]"
        share = 100.0 * total.wins / games if games else 0.0
        table.add_row(label, wins, f"{share:.1f}", str(total.cards_left))

    return table


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
    delay: float = typer.Option(1.0, min=0.0, help="Seconds to wait before each automated move is shown."),
    reveal: bool = typer.Option(False, "--reveal", help="Show the automated opponents' hands."),
    log_level: str = typer.Option(LOG_LEVEL, callback=_check_log_level, help="Logging level."),
) -> None:
    """Play against three automated opponents."""

    setup_logging(log_level)
    run_textual_app(seed=seed, delay=delay, reveal=reveal)


@app.command("simulate")
def simulate_cli(
    games: int = typer.Option(100, min=1, help="Number of all-automated games to play."),
    seed: int = typer.Option(123, help="Random seed for the session."),
    seats: int = typer.Option(4, min=2, max=8, help="Number of seats at the table."),
    log_level: str = typer.Option(LOG_LEVEL, callback=_check_log_level, help="Logging level."),
) -> None:
    """Run automated self-play games and report wins per seat."""

    setup_logging(log_level)
    report = simulate.run_self_play(games, seed=seed, num_seats=seats)
    console.print(_render_self_play(report))
    console.print(
        f"[cyan]{len(report.history.games)} game(s) simulated, "
        f"{report.average_turns:.1f} turns on average.[/cyan]"
    )


def main() -> None:
    """Entry-point for the ``president`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
