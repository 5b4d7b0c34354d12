"""
TCGINDEX Search Record Object
"""
from typing import Dict, List, Optional

from .json_object import JsonObject


class TcgSearchRecordSetObject(JsonObject):
    """
    TCGINDEX Search Record Set Object
    """

    id: str
    name: Optional[str]
    series: Optional[str]

    def __init__(
        self, set_id: str, name: Optional[str] = None, series: Optional[str] = None
    ) -> None:
        self.id = set_id
        self.name = name
        self.series = series


class TcgSearchRecordObject(JsonObject):
    """
    TCGINDEX Search Record Object

    The compact projection of a card that both the indexes and
    the card lookup are built from.
    """

    id: str
    name: str
    number: Optional[str]
    rarity: str
    types: List[str]
    supertype: str
    subtypes: List[str]
    set: TcgSearchRecordSetObject
    search_text: str
    exact_matches: Dict[str, Optional[str]]

    def __init__(self) -> None:
        """
        Empty initializer, the record builder fills everything in
        """
        self.id = ""
        self.name = ""
        self.number = None
        self.rarity = ""
        self.types = []
        self.supertype = ""
        self.subtypes = []
        self.set = TcgSearchRecordSetObject("")
        self.search_text = ""
        self.exact_matches = {}

    def __str__(self) -> str:
        return str(vars(self))
