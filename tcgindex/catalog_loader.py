"""
TCGINDEX catalog loading: the set catalog plus one card file per set
"""
import json
import logging
import pathlib
from typing import Any, Dict, List

import pydantic

from .errors import CatalogLoadError
from .models import TcgSet
from .parallel_call import parallel_call
from .utils import load_json_file

LOGGER = logging.getLogger(__name__)


def load_set_catalog(sets_file: pathlib.Path) -> List[TcgSet]:
    """
    Load the set catalog. Without it there is nothing to index,
    so every failure here is fatal.
    :param sets_file: Path to sets.json
    :return Sets in catalog order
    """
    if not sets_file.is_file():
        raise CatalogLoadError(
            sets_file, "Set catalog not found. Fetch the set data before indexing."
        )

    try:
        raw_sets = load_json_file(sets_file)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        raise CatalogLoadError(sets_file, f"Unable to parse set catalog: {error}") from error

    if not isinstance(raw_sets, list):
        raise CatalogLoadError(
            sets_file, f"Set catalog must be a JSON array, found {type(raw_sets).__name__}"
        )

    sets: List[TcgSet] = []
    for position, raw_set in enumerate(raw_sets):
        try:
            sets.append(TcgSet.model_validate(raw_set))
        except pydantic.ValidationError as error:
            LOGGER.warning(
                f"Skipping set catalog entry #{position} in {sets_file}: "
                f"{error.error_count()} validation error(s), {error.errors()[0]['msg']}"
            )

    LOGGER.info(f"Loaded {len(sets)} sets from {sets_file}")
    return sets


def get_card_file_path(set_id: str, cards_directory: pathlib.Path) -> pathlib.Path:
    """
    Where a set's card file lives
    :param set_id: Set id
    :param cards_directory: Directory of card files
    :return Path to <set_id>.json
    """
    return cards_directory.joinpath(f"{set_id}.json")


def load_cards_for_set(set_id: str, cards_directory: pathlib.Path) -> List[Dict[str, Any]]:
    """
    Load the raw cards of one set. Card data routinely lags
    behind the set catalog, so a missing or broken file only
    empties that set.
    :param set_id: Set to load
    :param cards_directory: Directory of card files
    :return Raw card dicts, empty on failure
    """
    cards_path = get_card_file_path(set_id, cards_directory)
    if not cards_path.is_file():
        LOGGER.warning(f"Cards data not found for set {set_id} ({cards_path})")
        return []

    try:
        cards = load_json_file(cards_path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        LOGGER.error(f"Error loading cards for set {set_id} ({cards_path}): {error}")
        return []

    if not isinstance(cards, list):
        LOGGER.error(
            f"Error loading cards for set {set_id} ({cards_path}): "
            f"expected a JSON array, found {type(cards).__name__}"
        )
        return []

    LOGGER.debug(f"Loaded {len(cards)} cards for set {set_id}")
    return cards


def load_all_cards(
    sets: List[TcgSet],
    cards_directory: pathlib.Path,
    parallel: bool = False,
    pool_size: int = 32,
) -> List[Dict[str, Any]]:
    """
    Load every set's cards, concatenated in catalog order
    :param sets: Set catalog
    :param cards_directory: Directory of card files
    :param parallel: Fan the reads out over a gevent pool
    :param pool_size: How large the pool should be
    :return Flat list of raw card dicts
    """
    LOGGER.info(f"Loading cards for {len(sets)} sets from {cards_directory}")
    set_ids = [tcg_set.id for tcg_set in sets]

    all_cards: List[Dict[str, Any]]
    if parallel:
        all_cards = parallel_call(
            load_cards_for_set,
            set_ids,
            repeatable_args=(cards_directory,),
            fold_list=True,
            pool_size=pool_size,
        )
    else:
        all_cards = []
        for set_id in set_ids:
            all_cards.extend(load_cards_for_set(set_id, cards_directory))

    LOGGER.info(f"Loaded {len(all_cards)} cards total")
    return all_cards


def find_sets_missing_cards(
    sets: List[TcgSet], cards_directory: pathlib.Path
) -> List[str]:
    """
    Determine which sets in the catalog have no card file yet
    :param sets: Set catalog
    :param cards_directory: Directory of card files
    :return Set ids without a card file, in catalog order
    """
    return [
        tcg_set.id
        for tcg_set in sets
        if not get_card_file_path(tcg_set.id, cards_directory).is_file()
    ]


def create_missing_card_files(
    sets: List[TcgSet], cards_directory: pathlib.Path
) -> List[str]:
    """
    Write an empty card list for every set lacking a card file,
    so that clients fetching cards/<set>.json get [] instead of a 404
    :param sets: Set catalog
    :param cards_directory: Directory of card files
    :return Set ids a placeholder was created for
    """
    missing_set_ids = find_sets_missing_cards(sets, cards_directory)
    if not missing_set_ids:
        LOGGER.info("Every set in the catalog has a card file")
        return []

    cards_directory.mkdir(parents=True, exist_ok=True)
    for set_id in missing_set_ids:
        with get_card_file_path(set_id, cards_directory).open(
            "w", encoding="utf-8"
        ) as file:
            json.dump([], file)
        LOGGER.info(f"Created empty card file for set {set_id}")

    return missing_set_ids
