"""
Tests for tcgindex/compiled_classes/tcg_name_index.py

Covers prefix generation bounds, the prefix cap (including the
100th vs 101st insertion), uncapped full names and words, and
word splitting rules.
"""

from typing import Callable, List

import pytest

from tcgindex.classes import TcgSearchRecordObject
from tcgindex.compiled_classes import (
    TcgNameIndexObject,
    build_name_index,
    generate_prefixes,
)


# =============================================================================
# generate_prefixes
# =============================================================================


@pytest.mark.parametrize(
    "term,expected",
    [
        ("pikachu", ["pi", "pik", "pika", "pikac", "pikach"]),
        ("abc", ["ab"]),
        ("ab", []),
        ("a", []),
        ("", []),
        ("mr. mime", ["mr", "mr.", "mr. ", "mr. m", "mr. mi", "mr. mim"]),
    ],
)
def test_generate_prefixes_bounds(term: str, expected: List[str]):
    assert list(generate_prefixes(term)) == expected


def test_generate_prefixes_custom_minimum():
    assert list(generate_prefixes("eevee", min_length=3)) == ["eev", "eeve"]


def test_generate_prefixes_never_yields_full_term():
    for term in ["charizard", "ex", "pokémon"]:
        assert term not in list(generate_prefixes(term))


# =============================================================================
# Single record behaviour
# =============================================================================


def test_single_name_registers_full_name_and_prefixes(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    name_index = build_name_index([record_factory("b1", "Charizard")])

    assert name_index["charizard"] == ["b1"]
    assert name_index["ch"] == ["b1"]
    assert name_index["chariza"] == ["b1"]
    assert name_index["charizar"] == ["b1"]
    assert "c" not in name_index


def test_multi_word_name_registers_each_word(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    name_index = build_name_index([record_factory("xy1-1", "Dark Charizard")])

    assert name_index["dark charizard"] == ["xy1-1"]
    assert name_index["charizard"] == ["xy1-1"]
    assert name_index["char"] == ["xy1-1"]
    # "dark" is reached from the full name and from the word, listed once
    assert name_index["dark"] == ["xy1-1"]
    assert name_index["da"] == ["xy1-1"]


def test_short_words_are_not_registered_on_their_own(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    name_index = build_name_index([record_factory("sm1-1", "Pikachu & Zekrom GX")])

    assert "&" not in name_index
    assert name_index["gx"] == ["sm1-1"]
    assert name_index["zekrom"] == ["sm1-1"]


def test_name_is_lowercased(record_factory: Callable[..., TcgSearchRecordObject]):
    name_index = build_name_index([record_factory("b2", "MewTwo EX")])

    assert "mewtwo ex" in name_index
    assert "MewTwo EX" not in name_index
    assert all(key == key.lower() for key in name_index.to_json())


def test_empty_name_is_skipped(record_factory: Callable[..., TcgSearchRecordObject]):
    name_index = build_name_index([record_factory("b3", "")])

    assert len(name_index) == 0


def test_whitespace_runs_split_like_single_spaces(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    name_index = build_name_index([record_factory("b4", "Team  Rocket's\tMeowth")])

    assert name_index["team"] == ["b4"]
    assert name_index["rocket's"] == ["b4"]
    assert name_index["meowth"] == ["b4"]
    assert "" not in name_index


# =============================================================================
# Prefix cap
# =============================================================================


def test_prefix_bucket_holds_exactly_cap_ids():
    name_index = TcgNameIndexObject(prefix_cap=100)

    stored = [name_index.add_prefix("ab", f"card-{i}") for i in range(101)]

    assert stored[:100] == [True] * 100
    assert stored[100] is False
    assert len(name_index["ab"]) == 100
    assert name_index["ab"][-1] == "card-99"


def test_prefix_cap_boundary_through_records(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    # 101 distinct names sharing the prefix "ze"
    records = [record_factory(f"z{i}", f"zebra{i:03d}") for i in range(101)]

    name_index = build_name_index(records)

    assert len(name_index["ze"]) == 100
    assert "z100" not in name_index["ze"]
    assert name_index["ze"][99] == "z99"
    # The 101st card keeps its own uncapped full-name bucket
    assert name_index["zebra100"] == ["z100"]


def test_prefix_cap_is_configurable(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    records = [record_factory(f"p{i}", f"Pidgey{i}") for i in range(5)]

    name_index = build_name_index(records, prefix_cap=3)

    assert name_index["pi"] == ["p0", "p1", "p2"]
    assert name_index["pidgey4"] == ["p4"]


def test_full_name_bucket_is_never_capped(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    records = [record_factory(f"e{i}", "Energy") for i in range(150)]

    name_index = build_name_index(records, prefix_cap=100)

    assert len(name_index["energy"]) == 150
    assert len(name_index["ener"]) == 100


def test_full_word_bucket_is_never_capped(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    records = [record_factory(f"r{i}", f"Rocket's Grunt{i}") for i in range(120)]

    name_index = build_name_index(records)

    assert len(name_index["rocket's"]) == 120
    assert len(name_index["ro"]) == 100


def test_full_term_still_appends_to_a_capped_prefix_bucket(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    # "mew" fills as a prefix of "mewtwo..." then is registered as a full name
    records = [record_factory(f"m{i}", f"Mewtwo{i}") for i in range(3)]
    records.append(record_factory("mew", "Mew"))

    name_index = build_name_index(records, prefix_cap=3)

    assert name_index["mew"] == ["m0", "m1", "m2", "mew"]


def test_invalid_prefix_cap_rejected():
    with pytest.raises(ValueError):
        TcgNameIndexObject(prefix_cap=0)


def test_builds_are_independent(record_factory: Callable[..., TcgSearchRecordObject]):
    first = build_name_index([record_factory("a1", "Abra")])
    second = build_name_index([record_factory("k1", "Kadabra")])

    assert "abra" in first
    assert "abra" not in second
    assert first.to_json() is not second.to_json()


def test_card_listed_once_per_key(record_factory: Callable[..., TcgSearchRecordObject]):
    name_index = build_name_index([record_factory("base1-4", "Charizard Charizard")])

    for key, card_ids in name_index.to_json().items():
        assert card_ids == ["base1-4"], key


def test_word_bucket_fills_after_its_prefix_bucket_capped(
    record_factory: Callable[..., TcgSearchRecordObject],
):
    # "dark" is a capped prefix of each full name and an uncapped word
    records = [record_factory(f"d{i}", f"Dark Raichu{i}") for i in range(4)]

    name_index = build_name_index(records, prefix_cap=2)

    assert name_index["dark"] == ["d0", "d1", "d2", "d3"]
    assert name_index["dar"] == ["d0", "d1"]
