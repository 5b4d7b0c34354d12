"""
TCGINDEX fatal error types
"""

import pathlib
from typing import Optional


class TcgindexError(Exception):
    """Base class for errors that abort an index build."""


class ConfigurationError(TcgindexError):
    """Raised when a configuration value cannot be used."""

    def __init__(self, section: str, option: str, message: str):
        self.section = section
        self.option = option
        super().__init__(f"[{section}] {option}: {message}")


class CatalogLoadError(TcgindexError):
    """Raised when the set catalog cannot be found or parsed."""

    def __init__(self, path: pathlib.Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class ArtifactWriteError(TcgindexError):
    """Raised when an index artifact cannot be written or published."""

    def __init__(
        self,
        path: pathlib.Path,
        message: str,
        file_name: Optional[str] = None,
    ):
        self.path = path
        self.file_name = file_name
        location = path.joinpath(file_name) if file_name else path
        super().__init__(f"{location}: {message}")
