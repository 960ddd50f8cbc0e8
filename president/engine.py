"""Turn engine driving a game of President."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

from . import rules
from .actions import Action, PassAction, PlayAction
from .cards import Card, build_shuffled_deck, format_cards
from .opponents import LowestBeatOpponent, Opponent
from .rules import ContractViolationError, InvalidPlayError, OutOfTurnError
from .state import GameConfig, Hand, TableState, deal

__all__ = ["TurnRecord", "GameEngine"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnRecord:
    """One accepted action in the order it happened."""

    turn: int
    seat: int
    action: Action
    cleared_table: bool = False

    def describe(self) -> str:
        text = f"P{self.seat} {self.action.describe()}"
        if self.cleared_table:
            text += " (table cleared)"
        return text


class GameEngine:
    """State machine owning the hands and the table for one game.

    All mutation goes through :meth:`submit_play` and :meth:`submit_pass`.
    Automated seats are driven by :meth:`play_automated_turn`, which routes
    the opponent's choice back through the same two operations.
    """

    def __init__(
        self,
        hands: Sequence[Hand],
        config: GameConfig | None = None,
        *,
        opponent: Opponent | None = None,
        first_seat: int = 0,
    ) -> None:
        if config is None:
            config = GameConfig(num_seats=len(hands))
        if len(hands) != config.num_seats:
            raise ValueError("hand count does not match configured number of seats")
        if not 0 <= first_seat < config.num_seats:
            raise ValueError("first_seat must be a valid seat index")

        self.config = config
        self.opponent: Opponent = opponent if opponent is not None else LowestBeatOpponent()
        self._hands = [Hand(hand) for hand in hands]
        self._table = TableState(active_seat=first_seat)
        self._winner_seat: int | None = None
        self._played: list[Card] = []
        self._history: list[TurnRecord] = []
        self._check_termination()

    @classmethod
    def new_game(
        cls,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        *,
        opponent: Opponent | None = None,
    ) -> "GameEngine":
        """Shuffle a fresh deck, deal it and return a ready engine."""

        config = config or GameConfig()
        hands = deal(build_shuffled_deck(rng), config.num_seats)
        logger.info(
            "Dealt %d seats: %s",
            config.num_seats,
            ", ".join(str(len(hand)) for hand in hands),
        )
        return cls(hands, config, opponent=opponent)

    # -- queryable state -------------------------------------------------

    @property
    def hands(self) -> tuple[tuple[Card, ...], ...]:
        return tuple(hand.cards() for hand in self._hands)

    def hand(self, seat: int) -> tuple[Card, ...]:
        return self._hands[seat].cards()

    @property
    def table(self) -> TableState:
        return self._table.copy()

    @property
    def last_played(self) -> tuple[Card, ...]:
        return self._table.last_played

    @property
    def active_seat(self) -> int:
        return self._table.active_seat

    @property
    def consecutive_passes(self) -> int:
        return self._table.consecutive_passes

    @property
    def winner_seat(self) -> int | None:
        return self._winner_seat

    @property
    def is_over(self) -> bool:
        return self._winner_seat is not None

    @property
    def history(self) -> tuple[TurnRecord, ...]:
        return tuple(self._history)

    @property
    def played_cards(self) -> tuple[Card, ...]:
        return tuple(self._played)

    @property
    def pending_automated_seat(self) -> int | None:
        """Return the seat the opponent strategy must act for next, if any."""

        if self.is_over:
            return None
        seat = self._table.active_seat
        return seat if self.config.is_automated(seat) else None

    # -- operations ------------------------------------------------------

    def submit_play(self, seat: int, cards: Sequence[Card]) -> TurnRecord:
        """Lay ``cards`` from ``seat``'s hand on the table."""

        self._require_turn(seat)
        proposed = tuple(cards)
        if not rules.is_valid_play(proposed, self._table):
            logger.debug("P%d rejected play %s", seat, format_cards(proposed))
            raise InvalidPlayError(
                f"cannot play {format_cards(proposed) or 'nothing'} on "
                f"{format_cards(self._table.last_played) or 'a clear table'}"
            )

        hand = self._hands[seat]
        if len({id(card) for card in proposed}) != len(proposed):
            raise ContractViolationError("the same card was proposed more than once")
        for card in proposed:
            if card not in hand:
                raise ContractViolationError(f"{card.label()} is not in P{seat}'s hand")

        for card in proposed:
            hand.remove(card)
        self._played.extend(proposed)
        self._table.last_played = proposed
        self._table.consecutive_passes = 0

        record = self._record(seat, PlayAction(cards=proposed))
        logger.debug("P%d played %s (%d left)", seat, format_cards(proposed), len(hand))
        self._advance_turn()
        return record

    def submit_pass(self, seat: int) -> TurnRecord:
        """Pass the turn for ``seat``; enough passes in a row clear the table."""

        self._require_turn(seat)
        self._table.consecutive_passes += 1
        cleared = False
        if self._table.consecutive_passes >= self.config.pass_threshold:
            self._table.clear()
            cleared = True
            logger.debug("Table cleared after %d passes", self.config.pass_threshold)

        record = self._record(seat, PassAction(), cleared_table=cleared)
        logger.debug("P%d passed", seat)
        self._advance_turn()
        return record

    def play_automated_turn(self) -> TurnRecord:
        """Let the opponent strategy act once for the pending automated seat."""

        seat = self.pending_automated_seat
        if seat is None:
            raise ContractViolationError("no automated turn is pending")

        action = self.opponent.choose_move(self._hands[seat].cards(), self._table.copy())
        if isinstance(action, PlayAction):
            return self.submit_play(seat, action.cards)
        return self.submit_pass(seat)

    def run_automated_turns(self) -> list[TurnRecord]:
        """Play automated turns until a human must act or the game ends."""

        records: list[TurnRecord] = []
        while self.pending_automated_seat is not None:
            records.append(self.play_automated_turn())
        return records

    # -- internals -------------------------------------------------------

    def _require_turn(self, seat: int) -> None:
        if self.is_over:
            raise ContractViolationError("the game is over")
        if seat != self._table.active_seat:
            raise OutOfTurnError(f"P{seat} acted during P{self._table.active_seat}'s turn")

    def _record(self, seat: int, action: Action, *, cleared_table: bool = False) -> TurnRecord:
        record = TurnRecord(
            turn=len(self._history) + 1,
            seat=seat,
            action=action,
            cleared_table=cleared_table,
        )
        self._history.append(record)
        return record

    def _advance_turn(self) -> None:
        self._table.active_seat = (self._table.active_seat + 1) % self.config.num_seats
        self._check_termination()

    def _check_termination(self) -> None:
        for seat, hand in enumerate(self._hands):
            if not hand:
                self._winner_seat = seat
                logger.info("P%d wins after %d turns", seat, len(self._history))
                return
