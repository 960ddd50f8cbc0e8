from __future__ import annotations

import pytest

from president.cards import Card, Suit
from president.selection import HandSelection


def _hand() -> list[Card]:
    return [Card(3, Suit.CLUBS), Card(7, Suit.HEARTS), Card(7, Suit.SPADES), Card(12, Suit.DIAMONDS)]


def test_toggle_adds_and_removes_indices() -> None:
    selection = HandSelection()

    assert selection.toggle(2) is True
    assert selection.toggle(1) is True
    assert selection.indices == (2, 1)
    assert selection.toggle(2) is False
    assert selection.indices == (1,)
    assert 1 in selection
    assert len(selection) == 1


def test_cards_resolve_against_the_hand() -> None:
    hand = _hand()
    selection = HandSelection()
    selection.toggle(1)
    selection.toggle(2)

    assert selection.cards(hand) == (hand[1], hand[2])


def test_stale_indices_are_ignored_and_pruned() -> None:
    hand = _hand()
    selection = HandSelection()
    selection.toggle(0)
    selection.toggle(3)

    shorter = hand[:2]
    assert selection.cards(shorter) == (hand[0],)
    selection.prune(len(shorter))
    assert selection.indices == (0,)


def test_clear_and_negative_index() -> None:
    selection = HandSelection()
    selection.toggle(0)
    selection.clear()

    assert selection.indices == ()
    with pytest.raises(ValueError):
        selection.toggle(-1)
