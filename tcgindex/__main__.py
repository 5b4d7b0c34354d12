"""
TCGINDEX Main Executor
"""

import argparse
import logging
import sys
import traceback
from typing import List, Optional

from tcgindex import constants
from tcgindex.utils import init_logger

LOGGER: logging.Logger = logging.getLogger(__name__)


def apply_args_to_config(args: argparse.Namespace) -> None:
    """
    Command line flags win over the properties file
    :param args: Parsed arguments
    """
    from tcgindex.tcgindex_config import TcgindexConfig

    config = TcgindexConfig()
    if args.data_path:
        config.data_path = args.data_path.expanduser().resolve()
    if args.output_path:
        config.output_path = args.output_path
    if args.prefix_cap:
        config.prefix_cap = args.prefix_cap
    if args.pretty:
        config.pretty_print = True
    if args.parallel:
        config.parallel_loading = True
    if args.no_hashes:
        config.generate_hashes = False


def dispatcher(args: argparse.Namespace) -> None:
    """
    TCGINDEX Dispatcher
    """
    from tcgindex.catalog_loader import create_missing_card_files, load_set_catalog
    from tcgindex.index_builder import build_all
    from tcgindex.tcgindex_config import TcgindexConfig

    apply_args_to_config(args)
    config = TcgindexConfig()

    # Placeholder card files only, no index build
    if args.create_missing_card_files:
        created = create_missing_card_files(
            load_set_catalog(config.sets_file), config.cards_directory
        )
        LOGGER.info(f"Created {len(created)} empty card files")
        return

    build_all(config)


def main(argv: Optional[List[str]] = None) -> None:
    """
    TCGINDEX safe main call. Exits non-zero when the build fails.
    """
    from tcgindex.arg_parser import parse_args
    from tcgindex.tcgindex_config import TcgindexConfig

    init_logger()
    args = parse_args(argv)

    try:
        LOGGER.info(
            f"Starting tcgindex {TcgindexConfig().tcgindex_version} "
            f"on {constants.TCGINDEX_BUILD_DATE}"
        )
        dispatcher(args)
    except Exception as error:
        LOGGER.fatal(f"Exception caught: {error} {traceback.format_exc()}")
        sys.exit(1)


if __name__ == "__main__":
    main()
