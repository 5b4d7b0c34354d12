"""
TCGINDEX Name Index Object
"""
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Set

from .. import constants
from ..classes.tcg_search_record import TcgSearchRecordObject

LOGGER = logging.getLogger(__name__)


def generate_prefixes(
    term: str, min_length: int = constants.MIN_PREFIX_LENGTH
) -> Iterator[str]:
    """
    Yield the proper prefixes of a term, shortest first.
    "pika" => "pi", "pik" (the full term itself is never yielded)
    :param term: String to split into prefixes
    :param min_length: Shortest prefix to produce
    :return Prefixes where min_length <= len(prefix) < len(term)
    """
    for length in range(min_length, len(term)):
        yield term[:length]


class TcgNameIndexObject:
    """
    TCGINDEX Name Index Object

    Autocomplete index over card names. Full names and full words
    always collect every matching id; prefix-only registrations stop
    once a bucket holds prefix_cap ids.
    """

    prefix_cap: int
    index: Dict[str, List[str]]

    def __init__(self, prefix_cap: int = constants.DEFAULT_PREFIX_CAP) -> None:
        """
        :param prefix_cap: Most ids a prefix registration may fill a bucket to
        """
        if prefix_cap < 1:
            raise ValueError(f"prefix_cap must be positive, got {prefix_cap}")

        self.prefix_cap = prefix_cap
        self.index = {}

    def add_full_term(self, term: str, card_id: str) -> None:
        """
        Register a complete name or word, never capped
        :param term: Lowercase name or word
        :param card_id: Card to append
        """
        self.index.setdefault(term, []).append(card_id)

    def add_prefix(self, prefix: str, card_id: str) -> bool:
        """
        Register a partial name or word, subject to the prefix cap
        :param prefix: Lowercase prefix
        :param card_id: Card to append
        :return Whether the id was stored
        """
        bucket = self.index.setdefault(prefix, [])
        if len(bucket) >= self.prefix_cap:
            return False

        bucket.append(card_id)
        return True

    def add_term(
        self, term: str, card_id: str, registered: Optional[Set[str]] = None
    ) -> None:
        """
        Register a term in full plus each of its prefixes
        :param term: Lowercase name or word
        :param card_id: Card to append
        :param registered: Keys this card is already stored under, updated in place
        """
        if registered is None:
            registered = set()

        if term not in registered:
            self.add_full_term(term, card_id)
            registered.add(term)

        for prefix in generate_prefixes(term):
            if prefix not in registered and self.add_prefix(prefix, card_id):
                registered.add(prefix)

    def add_record(self, record: TcgSearchRecordObject) -> None:
        """
        Index a record's name, then every word of it that
        is at least MIN_WORD_LENGTH characters long.
        A card is listed at most once per key.
        :param record: Record to index
        """
        if not record.name:
            return

        registered: Set[str] = set()
        name = record.name.lower()
        self.add_term(name, record.id, registered)

        for word in name.split():
            if len(word) < constants.MIN_WORD_LENGTH:
                continue
            self.add_term(word, record.id, registered)

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


def build_name_index(
    records: Iterable[TcgSearchRecordObject],
    prefix_cap: int = constants.DEFAULT_PREFIX_CAP,
) -> TcgNameIndexObject:
    """
    Build the autocomplete index for a set of records
    :param records: Projected records
    :param prefix_cap: Prefix bucket cap
    :return Fresh name index
    """
    LOGGER.info("Building name index")
    name_index = TcgNameIndexObject(prefix_cap)
    for record in records:
        name_index.add_record(record)

    LOGGER.info(f"Created name index with {len(name_index)} prefixes")
    return name_index
