"""Dynamic version read from tcgindex.properties."""

import configparser
import pathlib

_config = configparser.ConfigParser()
_config.read(pathlib.Path(__file__).parent / "resources" / "tcgindex.properties")
__version__ = _config.get("TCGINDEX", "version", fallback="1.0.0+fallback")
