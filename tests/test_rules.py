"""Tests covering the play validator and rank helpers."""

from __future__ import annotations

import pytest

from president import rules
from president.cards import Card, Suit
from president.state import TableState

H, D, C, S = Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES


def _table(*cards: Card) -> TableState:
    return TableState(last_played=tuple(cards))


@pytest.mark.parametrize(
    ("proposed", "last_played", "expected"),
    [
        ([(3, H)], [], True),
        ([(3, H), (3, D)], [(5, C)], False),
        ([(7, C)], [(5, C)], True),
        ([(5, C)], [(7, C)], False),
        ([(7, C), (3, D)], [], False),
        ([], [], False),
        ([], [(5, C)], False),
        ([(6, H)], [(6, S)], False),
        ([(9, H), (9, S)], [(8, C), (8, D)], True),
        ([(4, H), (4, S), (4, C), (4, D)], [], True),
        ([(15, H)], [(14, S)], True),
        ([(14, H)], [(15, S)], False),
    ],
)
def test_is_valid_play(proposed, last_played, expected) -> None:
    cards = [Card(rank, suit) for rank, suit in proposed]
    table = _table(*(Card(rank, suit) for rank, suit in last_played))

    assert rules.is_valid_play(cards, table) is expected


def test_is_valid_play_ignores_seat_and_does_not_mutate() -> None:
    table = TableState(last_played=(Card(5, C),), consecutive_passes=2, active_seat=3)
    before = table.copy()

    assert rules.is_valid_play([Card(8, H)], table)
    assert table == before


def test_group_by_rank_orders_ranks_and_keeps_hand_order() -> None:
    seven_d = Card(7, D)
    seven_h = Card(7, H)
    cards = [Card(9, S), seven_d, Card(5, C), seven_h]

    groups = rules.group_by_rank(cards)

    assert list(groups) == [5, 7, 9]
    assert groups[7] == [seven_d, seven_h]


def test_legal_plays_on_clear_table_offers_every_set_size() -> None:
    cards = [Card(4, C), Card(4, D), Card(9, H)]

    plays = rules.legal_plays(cards, TableState())

    assert [[card.label() for card in play] for play in plays] == [["4♣"], ["4♣", "4♦"], ["9♥"]]


def test_legal_plays_matches_arity_and_rank() -> None:
    cards = [Card(4, C), Card(4, D), Card(8, H), Card(8, S), Card(8, C), Card(10, H)]

    plays = rules.legal_plays(cards, _table(Card(6, C), Card(6, D)))

    assert [(play[0].rank, len(play)) for play in plays] == [(8, 2)]
    assert rules.legal_plays(cards, _table(Card(15, C))) == []


def test_error_taxonomy_shares_a_base() -> None:
    for error in (rules.InvalidPlayError, rules.OutOfTurnError, rules.ContractViolationError):
        assert issubclass(error, rules.GameError)
        assert issubclass(error, RuntimeError)
