"""
TCGINDEX Top Level Object
"""
import abc
from typing import Any, Dict

from ..utils import to_camel_case


class JsonObject(abc.ABC):
    """
    Base for output objects: attributes are dumped with camelCase keys
    """

    def to_json(self) -> Dict[str, Any]:
        """
        Support json.dump()
        :return: JSON serialized object
        """
        return {
            to_camel_case(key): value
            for key, value in self.__dict__.items()
            if not key.startswith("_")
        }
