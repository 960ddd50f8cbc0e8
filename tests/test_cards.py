from __future__ import annotations

import random
from collections import Counter

import pytest

from president.cards import (
    ACE,
    DECK_SIZE,
    RANKS,
    TWO,
    Card,
    Suit,
    build_deck,
    build_shuffled_deck,
    format_cards,
)


def test_build_deck_contains_every_rank_and_suit_once() -> None:
    deck = build_deck()

    assert len(deck) == DECK_SIZE == 52
    pairs = Counter((card.rank, card.suit) for card in deck)
    assert len(pairs) == 52
    assert set(pairs.values()) == {1}
    assert {card.rank for card in deck} == set(range(3, 16))


@pytest.mark.parametrize("seed", [0, 1, 42, 2024])
def test_shuffled_deck_keeps_integrity(seed: int) -> None:
    deck = build_shuffled_deck(random.Random(seed))

    assert len(deck) == 52
    assert len({id(card) for card in deck}) == 52
    per_rank = Counter(card.rank for card in deck)
    assert all(per_rank[rank] == 4 for rank in RANKS)
    per_suit = Counter(card.suit for card in deck)
    assert all(per_suit[suit] == 13 for suit in Suit)


def test_shuffled_deck_is_reproducible_with_seed() -> None:
    first = build_shuffled_deck(random.Random(7))
    second = build_shuffled_deck(random.Random(7))

    assert [card.label() for card in first] == [card.label() for card in second]
    assert [card.label() for card in first] != [card.label() for card in build_deck()]


def test_cards_compare_by_identity() -> None:
    one = Card(7, Suit.HEARTS)
    other = Card(7, Suit.HEARTS)

    assert one == one
    assert one != other
    assert len({one, other}) == 2


@pytest.mark.parametrize(
    ("rank", "suit", "label", "color"),
    [
        (3, Suit.HEARTS, "3♥", "red"),
        (10, Suit.DIAMONDS, "10♦", "red"),
        (11, Suit.CLUBS, "J♣", "black"),
        (13, Suit.SPADES, "K♠", "black"),
        (ACE, Suit.HEARTS, "A♥", "red"),
        (TWO, Suit.SPADES, "2♠", "black"),
    ],
)
def test_card_label_and_color(rank: int, suit: Suit, label: str, color: str) -> None:
    card = Card(rank, suit)

    assert card.label() == label
    assert card.color == color


@pytest.mark.parametrize("rank", [2, 16, 0])
def test_card_rejects_out_of_range_rank(rank: int) -> None:
    with pytest.raises(ValueError):
        Card(rank, Suit.CLUBS)


def test_card_is_immutable() -> None:
    card = Card(5, Suit.CLUBS)
    with pytest.raises(AttributeError):
        card.rank = 6  # type: ignore[misc]


def test_format_cards_joins_labels() -> None:
    cards = [Card(9, Suit.SPADES), Card(9, Suit.HEARTS)]
    assert format_cards(cards) == "9♠ 9♥"
