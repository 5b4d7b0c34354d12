"""
Tests for tcgindex/deduplicator.py
"""

import logging
from typing import Any, Callable, Dict

import pytest

from tcgindex.deduplicator import deduplicate_cards


def test_keeps_first_occurrence_in_order(
    raw_card_factory: Callable[..., Dict[str, Any]],
):
    first = raw_card_factory("dup1", "Pikachu", set_id="base1")
    second = raw_card_factory("dup1", "Pikachu (Reprint)", set_id="base2")
    cards = [
        raw_card_factory("a", "Abra"),
        first,
        raw_card_factory("b", "Bulbasaur"),
        second,
    ]

    unique_cards, duplicate_ids = deduplicate_cards(cards)

    assert [card["id"] for card in unique_cards] == ["a", "dup1", "b"]
    assert unique_cards[1] is first
    assert duplicate_ids == {"dup1"}


def test_equality_is_by_id_only(raw_card_factory: Callable[..., Dict[str, Any]]):
    cards = [
        raw_card_factory("x1", "Mew", rarity="Rare"),
        raw_card_factory("x1", "Mewtwo", rarity="Common"),
    ]

    unique_cards, _ = deduplicate_cards(cards)

    assert len(unique_cards) == 1
    assert unique_cards[0]["name"] == "Mew"


def test_output_length_matches_duplicate_occurrences(
    raw_card_factory: Callable[..., Dict[str, Any]],
):
    cards = [raw_card_factory(card_id, "Card") for card_id in "aabacca"]

    unique_cards, duplicate_ids = deduplicate_cards(cards)

    # 7 cards, 4 repeated occurrences
    assert len(unique_cards) == 3
    assert duplicate_ids == {"a", "c"}
    assert len({card["id"] for card in unique_cards}) == len(unique_cards)


def test_deduplication_is_idempotent(raw_card_factory: Callable[..., Dict[str, Any]]):
    cards = [raw_card_factory(card_id, "Card") for card_id in ["p", "q", "p", "r", "q"]]

    once, _ = deduplicate_cards(cards)
    twice, duplicate_ids = deduplicate_cards(once)

    assert twice == once
    assert not duplicate_ids


def test_single_warning_lists_each_duplicate_once(
    raw_card_factory: Callable[..., Dict[str, Any]],
    caplog: pytest.LogCaptureFixture,
):
    cards = [raw_card_factory(card_id, "Card") for card_id in ["d1", "d1", "d1", "d2", "d2"]]

    with caplog.at_level(logging.WARNING, logger="tcgindex.deduplicator"):
        deduplicate_cards(cards)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].getMessage().count("d1") == 1
    assert warnings[0].getMessage().count("d2") == 1


def test_no_warning_without_duplicates(
    raw_card_factory: Callable[..., Dict[str, Any]],
    caplog: pytest.LogCaptureFixture,
):
    with caplog.at_level(logging.WARNING, logger="tcgindex.deduplicator"):
        deduplicate_cards([raw_card_factory("solo", "Ditto")])

    assert not [r for r in caplog.records if r.levelno == logging.WARNING]


def test_cards_without_usable_id_pass_through():
    cards = [{"name": "No Id"}, {"name": "No Id Either"}, "not a card"]

    unique_cards, duplicate_ids = deduplicate_cards(cards)

    assert unique_cards == cards
    assert not duplicate_ids
