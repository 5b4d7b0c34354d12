"""
TCGINDEX build orchestration: load -> de-duplicate -> project -> index -> publish
"""
import datetime
import logging
import pathlib
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from . import constants
from .catalog_loader import load_all_cards, load_set_catalog
from .classes import TcgIndexMetadataObject, TcgSearchRecordObject
from .compiled_classes import (
    TcgCardLookupObject,
    TcgCategoryIndexObject,
    TcgNameIndexObject,
    build_card_lookup,
    build_name_index,
    build_rarity_index,
    build_set_index,
    build_supertype_index,
    build_type_index,
)
from .deduplicator import deduplicate_cards
from .models import TcgSet
from .search_record_builder import build_search_records

if TYPE_CHECKING:
    from .tcgindex_config import TcgindexConfig

LOGGER = logging.getLogger(__name__)


@dataclass
class TcgIndexBundle:
    """Everything one build produces, ready to be written out."""

    card_lookup: TcgCardLookupObject
    name_index: TcgNameIndexObject
    set_index: TcgCategoryIndexObject
    type_index: TcgCategoryIndexObject
    rarity_index: TcgCategoryIndexObject
    supertype_index: TcgCategoryIndexObject
    metadata: TcgIndexMetadataObject


def build_indexes(
    records: List[TcgSearchRecordObject],
    total_sets: int,
    prefix_cap: int = constants.DEFAULT_PREFIX_CAP,
    created_at: Optional[datetime.datetime] = None,
) -> TcgIndexBundle:
    """
    Build the lookup, the five indexes and their metadata.
    Every builder reads the same records and nothing else.
    :param records: Projected, de-duplicated records
    :param total_sets: Number of sets in the catalog
    :param prefix_cap: Name index prefix bucket cap
    :param created_at: Build time to stamp, defaults to now
    :return Built bundle
    """
    card_lookup = build_card_lookup(records)
    name_index = build_name_index(records, prefix_cap)
    set_index = build_set_index(records)
    type_index = build_type_index(records)
    rarity_index = build_rarity_index(records)
    supertype_index = build_supertype_index(records)

    metadata = TcgIndexMetadataObject(
        total_cards=len(records),
        total_sets=total_sets,
        indexes={
            "name": name_index,
            "set": set_index,
            "type": type_index,
            "rarity": rarity_index,
            "supertype": supertype_index,
            "cardLookup": card_lookup,
        },
        created_at=created_at,
    )

    return TcgIndexBundle(
        card_lookup=card_lookup,
        name_index=name_index,
        set_index=set_index,
        type_index=type_index,
        rarity_index=rarity_index,
        supertype_index=supertype_index,
        metadata=metadata,
    )


def build_bundle_from_catalog(
    sets_file: pathlib.Path,
    cards_directory: pathlib.Path,
    prefix_cap: int = constants.DEFAULT_PREFIX_CAP,
    parallel: bool = False,
    pool_size: int = 32,
) -> TcgIndexBundle:
    """
    Read the catalog from disk and build every index from it
    :param sets_file: Path to the set catalog
    :param cards_directory: Directory of per-set card files
    :param prefix_cap: Name index prefix bucket cap
    :param parallel: Load card files over a gevent pool
    :param pool_size: How large the pool should be
    :return Built bundle
    """
    sets: List[TcgSet] = load_set_catalog(sets_file)
    raw_cards = load_all_cards(sets, cards_directory, parallel, pool_size)
    unique_cards, _ = deduplicate_cards(raw_cards)
    records = build_search_records(unique_cards, sets)
    return build_indexes(records, total_sets=len(sets), prefix_cap=prefix_cap)


def build_all(config: "TcgindexConfig") -> TcgIndexBundle:
    """
    Run a complete build with the given configuration and publish the result
    :param config: Active configuration
    :return Published bundle
    """
    from .output_generator import publish_index_artifacts

    LOGGER.info(f"Building search indexes from {config.data_path}")
    bundle = build_bundle_from_catalog(
        config.sets_file,
        config.cards_directory,
        prefix_cap=config.prefix_cap,
        parallel=config.parallel_loading,
        pool_size=config.pool_size,
    )

    publish_index_artifacts(
        config.output_path,
        bundle,
        pretty_print=config.pretty_print,
        generate_hashes=config.generate_hashes,
    )
    LOGGER.info(
        f"Search index building complete: {len(bundle.metadata.indexes)} indexes, "
        f"{bundle.metadata.total_cards} cards across {bundle.metadata.total_sets} sets"
    )
    return bundle
