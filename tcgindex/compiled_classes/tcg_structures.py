"""
TCGINDEX Internal Object for Output Files
"""
from typing import Dict, List

from singleton_decorator import singleton


@singleton
class TcgStructuresObject:
    """
    TCGINDEX Internal Object for Output Files
    """

    card_lookup: str
    name_index: str
    set_index: str
    type_index: str
    rarity_index: str
    supertype_index: str
    index_metadata: str

    def __init__(self) -> None:
        """
        Initializer to build up the object
        """
        self.card_lookup = "card-lookup"
        self.name_index = "name-index"
        self.set_index = "set-index"
        self.type_index = "type-index"
        self.rarity_index = "rarity-index"
        self.supertype_index = "supertype-index"
        self.index_metadata = "index-metadata"

    def get_index_file_names(self) -> Dict[str, str]:
        """
        Map each metadata index key to the file it is written to
        :return Metadata key -> file name (with extension)
        """
        return {
            "name": f"{self.name_index}.json",
            "set": f"{self.set_index}.json",
            "type": f"{self.type_index}.json",
            "rarity": f"{self.rarity_index}.json",
            "supertype": f"{self.supertype_index}.json",
            "cardLookup": f"{self.card_lookup}.json",
        }

    def get_all_compiled_file_names(self) -> List[str]:
        """
        Get all files that are compiled outputs
        :return Compiled outputs files
        """
        return [
            self.card_lookup,
            self.name_index,
            self.set_index,
            self.type_index,
            self.rarity_index,
            self.supertype_index,
            self.index_metadata,
        ]
