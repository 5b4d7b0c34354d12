"""
TCGINDEX Compiled Outputs Dispatcher
"""

from .tcg_card_lookup import TcgCardLookupObject, build_card_lookup
from .tcg_category_index import (
    TcgCategoryIndexObject,
    build_rarity_index,
    build_set_index,
    build_supertype_index,
    build_type_index,
)
from .tcg_name_index import TcgNameIndexObject, build_name_index, generate_prefixes
from .tcg_structures import TcgStructuresObject
