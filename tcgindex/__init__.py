"""
tcgindex: compiles trading card catalogs into client-side search indexes
"""

from ._version import __version__

__all__ = [
    "__version__",
]
