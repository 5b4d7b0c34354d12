"""
TCGINDEX Card Lookup Object
"""
import logging
from typing import Dict, Iterable

from ..classes.tcg_search_record import TcgSearchRecordObject

LOGGER = logging.getLogger(__name__)


class TcgCardLookupObject:
    """
    TCGINDEX Card Lookup Object

    Resolves an index hit (card id) to its full search record
    """

    cards: Dict[str, TcgSearchRecordObject]

    def __init__(self) -> None:
        self.cards = {}

    def add(self, record: TcgSearchRecordObject) -> None:
        """
        Store a record under its id. Ids are unique after de-duplication,
        so an overwrite means the input was not de-duplicated.
        :param record: Record to store
        """
        if record.id in self.cards:
            LOGGER.warning(
                f"Card lookup already holds {record.id}, replacing it with the later record"
            )
        self.cards[record.id] = record

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, key: object) -> bool:
        return key in self.cards

    def __getitem__(self, key: str) -> TcgSearchRecordObject:
        return self.cards[key]

    def to_json(self) -> Dict[str, TcgSearchRecordObject]:
        """
        Support json.dump()
        :return: JSON serialized object
        """
        return self.cards


def build_card_lookup(records: Iterable[TcgSearchRecordObject]) -> TcgCardLookupObject:
    """
    Build the id => record table
    :param records: Projected records
    :return Card lookup
    """
    LOGGER.info("Building card lookup table")
    card_lookup = TcgCardLookupObject()
    for record in records:
        card_lookup.add(record)

    LOGGER.info(f"Created card lookup with {len(card_lookup)} cards")
    return card_lookup
