"""
TCGINDEX raw input models
"""

from .tcg_card import TcgCard, TcgCardSetReference
from .tcg_set import TcgSet

__all__ = [
    "TcgCard",
    "TcgCardSetReference",
    "TcgSet",
]
