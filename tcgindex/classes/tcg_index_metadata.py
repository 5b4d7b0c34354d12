"""
TCGINDEX Index Metadata Object
"""
import datetime
from typing import Any, Dict, Optional, Sized

from ..compiled_classes.tcg_structures import TcgStructuresObject
from .json_object import JsonObject


class TcgIndexMetadataObject(JsonObject):
    """
    TCGINDEX Index Metadata Object

    Summary written next to the index artifacts. Consumers should
    trust an artifact set only when this file is the newest of the group.
    """

    created_at: str
    total_cards: int
    total_sets: int
    indexes: Dict[str, Dict[str, Any]]

    def __init__(
        self,
        total_cards: int,
        total_sets: int,
        indexes: Dict[str, Sized],
        created_at: Optional[datetime.datetime] = None,
    ) -> None:
        """
        :param total_cards: Number of cards after de-duplication
        :param total_sets: Number of sets in the catalog
        :param indexes: Metadata key (name, set, ..., cardLookup) -> built index
        :param created_at: Build time, defaults to now (UTC)
        """
        if created_at is None:
            created_at = datetime.datetime.now(datetime.timezone.utc)
        elif created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=datetime.timezone.utc)

        self.created_at = (
            created_at.astimezone(datetime.timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )
        self.total_cards = total_cards
        self.total_sets = total_sets

        index_files = TcgStructuresObject().get_index_file_names()
        self.indexes = {
            key: {"entries": len(index), "file": index_files[key]}
            for key, index in indexes.items()
        }
