"""Self-play harness running all-automated games."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from . import scoreboard
from .engine import GameEngine
from .state import GameConfig

__all__ = ["SelfPlayReport", "play_game", "run_self_play"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelfPlayReport:
    """Summary of a self-play session."""

    seed: int
    history: scoreboard.MatchHistory

    @property
    def average_turns(self) -> float:
        if not self.history.games:
            return 0.0
        return sum(game.turns for game in self.history.games) / len(self.history.games)


def play_game(
    game_number: int,
    rng: random.Random,
    *,
    num_seats: int = 4,
    turn_limit: int = 2000,
) -> scoreboard.GameSummary:
    """Play one game with every seat automated."""

    config = GameConfig(num_seats=num_seats, human_seat=None)
    engine = GameEngine.new_game(config, rng)

    for _ in range(turn_limit):
        if engine.is_over:
            break
        engine.play_automated_turn()
    else:
        raise RuntimeError(f"game {game_number} did not finish within {turn_limit} turns")

    winner_seat = engine.winner_seat
    assert winner_seat is not None
    return scoreboard.GameSummary(
        game_number=game_number,
        winner_seat=winner_seat,
        turns=len(engine.history),
        cards_left=[len(hand) for hand in engine.hands],
    )


def run_self_play(games: int, *, seed: int = 123, num_seats: int = 4) -> SelfPlayReport:
    """Play ``games`` games from a single seeded random source."""

    if games <= 0:
        raise ValueError("games must be positive")

    rng = random.Random(seed)
    history = scoreboard.MatchHistory(num_seats=num_seats)
    for game_number in range(1, games + 1):
        summary = play_game(game_number, rng, num_seats=num_seats)
        history.record(summary)
        logger.info("Game %d won by P%d in %d turns", game_number, summary.winner_seat, summary.turns)

    return SelfPlayReport(seed=seed, history=history)
