"""
TCGINDEX Class Dispatcher
"""

from .json_object import JsonObject
from .tcg_index_metadata import TcgIndexMetadataObject
from .tcg_search_record import TcgSearchRecordObject, TcgSearchRecordSetObject
