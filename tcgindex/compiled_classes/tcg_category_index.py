"""
TCGINDEX Category Index Object
"""
import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..classes.tcg_search_record import TcgSearchRecordObject

LOGGER = logging.getLogger(__name__)


class TcgCategoryIndexObject:
    """
    TCGINDEX Category Index Object

    Inverted index from one categorical value to every card holding it
    """

    category: str
    index: Dict[str, List[str]]

    def __init__(self, category: str) -> None:
        """
        :param category: What the keys are (set, type, rarity, ...), for logging
        """
        self.category = category
        self.index = {}

    def add(self, key: Optional[str], card_id: str) -> None:
        """
        Append a card under a key, ignoring empty keys
        :param key: Category value, already normalized
        :param card_id: Card to append
        """
        if not key:
            return
        self.index.setdefault(key, []).append(card_id)

    def __len__(self) -> int:
        return len(self.index)

    def __contains__(self, key: object) -> bool:
        return key in self.index

    def __getitem__(self, key: str) -> List[str]:
        return self.index[key]

    def to_json(self) -> Dict[str, List[str]]:
        """
        Support json.dump()
        :return: JSON serialized object
        """
        return self.index


def _lower_or_none(value: Optional[str]) -> Optional[str]:
    return value.lower() if value else None


def _build_category_index(
    category: str,
    records: Iterable[TcgSearchRecordObject],
    keys_for_record: Callable[[TcgSearchRecordObject], Iterable[Optional[str]]],
) -> TcgCategoryIndexObject:
    LOGGER.info(f"Building {category} index")
    category_index = TcgCategoryIndexObject(category)
    for record in records:
        for key in keys_for_record(record):
            category_index.add(key, record.id)

    LOGGER.info(f"Created {category} index with {len(category_index)} entries")
    return category_index


def build_set_index(records: Iterable[TcgSearchRecordObject]) -> TcgCategoryIndexObject:
    """
    Set id => card ids. Set ids are already slugs, so they are kept as-is
    :param records: Projected records
    :return Set index
    """
    return _build_category_index(
        "set", records, lambda record: [record.set.id if record.set else None]
    )


def build_type_index(
    records: Iterable[TcgSearchRecordObject],
) -> TcgCategoryIndexObject:
    """
    Lowercase type => card ids, one entry per type a card has
    :param records: Projected records
    :return Type index
    """
    return _build_category_index(
        "type",
        records,
        lambda record: [_lower_or_none(card_type) for card_type in record.types or []],
    )


def build_rarity_index(
    records: Iterable[TcgSearchRecordObject],
) -> TcgCategoryIndexObject:
    """
    Lowercase rarity => card ids
    :param records: Projected records
    :return Rarity index
    """
    return _build_category_index(
        "rarity", records, lambda record: [_lower_or_none(record.rarity)]
    )


def build_supertype_index(
    records: Iterable[TcgSearchRecordObject],
) -> TcgCategoryIndexObject:
    """
    Lowercase supertype => card ids
    :param records: Projected records
    :return Supertype index
    """
    return _build_category_index(
        "supertype", records, lambda record: [_lower_or_none(record.supertype)]
    )
