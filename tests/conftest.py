"""Pytest configuration and fixtures for tcgindex tests."""

import json
import pathlib
from typing import Any, Callable, Dict, List, Optional

import pytest

from tcgindex.classes import TcgSearchRecordObject
from tcgindex.models import TcgCard, TcgSet
from tcgindex.search_record_builder import build_search_record


def make_raw_card(
    card_id: str, name: str, set_id: str = "base1", **attributes: Any
) -> Dict[str, Any]:
    """Raw card dict the way it appears in a per-set card file."""
    card: Dict[str, Any] = {"id": card_id, "name": name, "set": {"id": set_id}}
    card.update(attributes)
    return card


def make_record(
    card_id: str,
    name: str,
    set_id: str = "base1",
    **attributes: Any,
) -> TcgSearchRecordObject:
    """Projected record for a card in a plain test set."""
    card = TcgCard.model_validate(make_raw_card(card_id, name, set_id, **attributes))
    return build_search_record(card, TcgSet(id=set_id, name="Base", series="Base"))


@pytest.fixture
def data_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """
    Empty catalog layout: <tmp>/data/sets and <tmp>/data/cards
    """
    root = tmp_path / "data"
    root.joinpath("sets").mkdir(parents=True)
    root.joinpath("cards").mkdir()
    return root


@pytest.fixture
def write_catalog(
    data_path: pathlib.Path,
) -> Callable[..., pathlib.Path]:
    """
    Write a set catalog plus card files. Sets listed in
    cards_by_set get a card file; every other set has none.
    """

    def _write(
        sets: List[Dict[str, Any]],
        cards_by_set: Optional[Dict[str, Any]] = None,
    ) -> pathlib.Path:
        data_path.joinpath("sets", "sets.json").write_text(
            json.dumps(sets), encoding="utf-8"
        )
        for set_id, cards in (cards_by_set or {}).items():
            content = cards if isinstance(cards, str) else json.dumps(cards)
            data_path.joinpath("cards", f"{set_id}.json").write_text(
                content, encoding="utf-8"
            )
        return data_path

    return _write


@pytest.fixture
def base_set() -> Dict[str, Any]:
    """The set the single-card scenarios use."""
    return {
        "id": "base1",
        "name": "Base",
        "series": "Base",
        "releaseDate": "1999/01/09",
    }


@pytest.fixture
def charizard() -> Dict[str, Any]:
    """Base Set Charizard, raw."""
    return make_raw_card(
        "b1",
        "Charizard",
        number="4",
        rarity="Rare Holo",
        types=["Fire"],
        supertype="Pokémon",
        subtypes=["Stage 2"],
    )


@pytest.fixture
def raw_card_factory() -> Callable[..., Dict[str, Any]]:
    """make_raw_card, as a fixture."""
    return make_raw_card


@pytest.fixture
def record_factory() -> Callable[..., TcgSearchRecordObject]:
    """make_record, as a fixture."""
    return make_record
