"""
TCGINDEX search record projection
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

import pydantic

from . import constants
from .classes import TcgSearchRecordObject, TcgSearchRecordSetObject
from .models import TcgCard, TcgSet

LOGGER = logging.getLogger(__name__)


def build_sets_by_id(sets: Iterable[TcgSet]) -> Dict[str, TcgSet]:
    """
    Index the set catalog by id. A repeated id resolves to its last entry.
    :param sets: Set catalog
    :return Set id -> set
    """
    return {tcg_set.id: tcg_set for tcg_set in sets}


def resolve_set(card: TcgCard, sets_by_id: Dict[str, TcgSet]) -> TcgSet:
    """
    Find the set a card belongs to, or stand one in
    :param card: Card to resolve
    :param sets_by_id: Set catalog by id
    :return Catalog set, or an "Unknown Set" placeholder
    """
    set_id = card.set_id
    if set_id and set_id in sets_by_id:
        return sets_by_id[set_id]

    LOGGER.debug(
        f"Card {card.id} references unknown set {set_id!r}, using placeholder set"
    )
    # Placeholder ids never name a card file
    return TcgSet.model_construct(
        id=set_id or constants.UNKNOWN_SET_ID,
        name=constants.UNKNOWN_SET_NAME,
        series=constants.UNKNOWN_SET_SERIES,
    )


def build_search_text(card: TcgCard, card_set: TcgSet) -> str:
    """
    Combine the searchable attributes into one lowercase string.
    Order: name, id, number, rarity, types, supertype, subtypes,
    set name, set series. Empty values are dropped.
    :param card: Raw card
    :param card_set: Resolved set
    :return Search text
    """
    parts: List[Optional[str]] = [
        card.name,
        card.id,
        card.number,
        card.rarity,
        *card.types,
        card.supertype,
        *card.subtypes,
        card_set.name,
        card_set.series,
    ]
    return " ".join(part for part in parts if part).lower()


def build_search_record(card: TcgCard, card_set: TcgSet) -> TcgSearchRecordObject:
    """
    Project a raw card onto the compact record the indexes use
    :param card: Raw card
    :param card_set: Resolved set
    :return Search record
    """
    record = TcgSearchRecordObject()
    record.id = card.id
    record.name = card.name
    record.number = card.number
    record.rarity = card.rarity or constants.UNKNOWN_VALUE
    record.types = list(card.types)
    record.supertype = card.supertype or constants.UNKNOWN_VALUE
    record.subtypes = list(card.subtypes)
    record.set = TcgSearchRecordSetObject(card_set.id, card_set.name, card_set.series)
    record.search_text = build_search_text(card, card_set)
    record.exact_matches = {
        "name": card.name.lower(),
        "number": card.number,
        "id": card.id.lower(),
    }
    return record


def build_search_records(
    raw_cards: Iterable[Any], sets: Iterable[TcgSet]
) -> List[TcgSearchRecordObject]:
    """
    Project every raw card. A card without a string id or name
    is logged and skipped; malformed optional attributes are not fatal.
    :param raw_cards: De-duplicated raw cards
    :param sets: Set catalog
    :return Search records in input order
    """
    LOGGER.info("Creating search records")
    sets_by_id = build_sets_by_id(sets)

    records: List[TcgSearchRecordObject] = []
    placeholder_count = 0
    for raw_card in raw_cards:
        try:
            card = TcgCard.model_validate(raw_card)
        except pydantic.ValidationError as error:
            LOGGER.error(f"Skipping invalid card {describe_raw_card(raw_card)}: {error}")
            continue

        card_set = resolve_set(card, sets_by_id)
        if card_set.id not in sets_by_id:
            placeholder_count += 1
        records.append(build_search_record(card, card_set))

    if placeholder_count:
        LOGGER.warning(
            f"{placeholder_count} cards reference a set missing from the catalog"
        )

    LOGGER.info(f"Created {len(records)} search records")
    return records


def describe_raw_card(raw_card: Any) -> str:
    """
    Best-effort "id (set X)" label for log lines about a broken card
    :param raw_card: Raw card entry
    :return Label
    """
    if not isinstance(raw_card, dict):
        return f"<{type(raw_card).__name__} entry>"

    set_reference = raw_card.get("set")
    set_id = set_reference.get("id") if isinstance(set_reference, dict) else None
    return f"{raw_card.get('id', '<no id>')} (set {set_id or '<none>'})"
