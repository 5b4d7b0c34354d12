"""
TCGINDEX Constants that cannot be changed and are hardcoded intentionally
"""

import datetime
import hashlib
import os
import pathlib
from typing import Optional

RESOURCE_PATH: pathlib.Path = pathlib.Path(__file__).resolve().parent.joinpath(
    "resources"
)
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("tcgindex.properties")

WORKING_DIR: pathlib.Path = pathlib.Path.cwd()
DEFAULT_DATA_PATH: pathlib.Path = WORKING_DIR.joinpath("public", "data")

ENV_DATA_PATH: Optional[str] = os.environ.get("TCGINDEX_DATA_PATH")
ENV_OUT_PATH: Optional[str] = os.environ.get("TCGINDEX_OUTPUT_PATH")

LOG_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("TCGINDEX_LOG_PATH", WORKING_DIR))
    .expanduser()
    .resolve()
    .joinpath("tcgindex_logs")
)

TCGINDEX_BUILD_DATE: str = datetime.datetime.today().strftime("%Y-%m-%d")

HASH_TO_GENERATE = hashlib.sha256()

# Name index tuning
DEFAULT_PREFIX_CAP: int = 100
MIN_PREFIX_LENGTH: int = 2
MIN_WORD_LENGTH: int = 2

# Stand-in values for cards whose attributes or set cannot be resolved
UNKNOWN_VALUE: str = "Unknown"
UNKNOWN_SET_ID: str = "unknown"
UNKNOWN_SET_NAME: str = "Unknown Set"
UNKNOWN_SET_SERIES: str = "Unknown Series"

STAGING_DIR_SUFFIX: str = ".staging"
BACKUP_DIR_SUFFIX: str = ".previous"
