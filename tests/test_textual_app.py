"""Tests driving the Textual UI through its pilot."""

from __future__ import annotations

import pytest

from president.cards import Card, Suit
from president.cli.textual.app import HUMAN_SEAT, PresidentTextualApp, hint_text
from president.engine import GameEngine
from president.state import GameConfig, Hand


async def _settle(pilot, app: PresidentTextualApp, turns: int) -> None:
    for _ in range(100):
        if app.engine is not None and (app.engine.is_over or len(app.engine.history) >= turns):
            return
        await pilot.pause(0.02)


@pytest.mark.anyio
@pytest.mark.parametrize("delay", [0.0, 0.01])
async def test_automated_seats_act_after_the_human_plays(delay: float) -> None:
    app = PresidentTextualApp(seed=3, delay=delay, reveal=False)
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()
        assert app.selection.indices == (0,)
        await pilot.press("p")
        await _settle(pilot, app, turns=4)

        engine = app.engine
        assert engine is not None
        seats = [record.seat for record in engine.history[:4]]
        assert seats == [0, 1, 2, 3]
        assert engine.is_over or engine.active_seat == HUMAN_SEAT


@pytest.mark.anyio
async def test_space_toggles_the_highlighted_card() -> None:
    app = PresidentTextualApp(seed=5, delay=0.0, reveal=False)
    async with app.run_test() as pilot:
        await pilot.press("space")
        await pilot.pause()
        assert app.selection.indices == (0,)
        await pilot.press("space")
        await pilot.pause()
        assert app.selection.indices == ()
        await pilot.press("enter")
        await pilot.pause()
        await pilot.press("space")
        await pilot.pause()
        assert app.selection.indices == ()


@pytest.mark.anyio
async def test_human_turn_status_lists_legal_plays() -> None:
    app = PresidentTextualApp(seed=8, delay=0.0, reveal=False)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.status_strip is not None
        assert "legal:" in app.status_strip.message


def test_hint_text_summarises_legal_sets() -> None:
    hands = [
        Hand([Card(4, Suit.CLUBS), Card(4, Suit.DIAMONDS), Card(9, Suit.HEARTS)]),
        Hand([Card(5, Suit.CLUBS)]),
        Hand([Card(6, Suit.CLUBS)]),
        Hand([Card(7, Suit.CLUBS)]),
    ]
    engine = GameEngine(hands, GameConfig())

    assert hint_text(engine) == "legal: 4♣, 4♣ 4♦, 9♥"

    engine.submit_play(0, [hands[0][2]])
    assert hint_text(engine, seat=1) == "no legal play, pass"


def test_hint_text_truncates_long_lists() -> None:
    hand = Hand([Card(rank, Suit.SPADES) for rank in range(3, 10)])
    engine = GameEngine([hand, Hand([Card(3, Suit.CLUBS)])], GameConfig(num_seats=2))

    assert hint_text(engine).endswith("(+3 more)")
