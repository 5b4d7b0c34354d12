"""
TCGINDEX Arg Parser to determine what actions to take
"""

import argparse
import logging
import os
import pathlib
from typing import List, Optional

LOGGER = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """
    argparse type for --prefix-cap
    """
    try:
        parsed = int(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from error
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"{value!r} must be at least 1")
    return parsed


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments. Every option is optional;
    with none given, the configured defaults build everything.
    :param argv: Arguments to parse, defaults to sys.argv
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("tcgindex")

    parser.add_argument(
        "--use-envvars",
        action="store_true",
        help="Use environment variables over parser flags for build operations",
    )
    parser.add_argument(
        "--data-path",
        "-d",
        type=pathlib.Path,
        metavar="DIR",
        help="Directory holding sets/sets.json and cards/<set>.json.",
    )
    parser.add_argument(
        "--output-path",
        "-o",
        type=pathlib.Path,
        metavar="DIR",
        help="Directory to publish the index artifacts to.",
    )
    parser.add_argument(
        "--prefix-cap",
        type=positive_int,
        metavar="N",
        help="Most card ids a name prefix may list (full names and words are never capped).",
    )
    parser.add_argument(
        "--pretty",
        "-p",
        action="store_true",
        help="When dumping JSON files, prettify the contents instead of minifying them.",
    )
    parser.add_argument(
        "--parallel",
        "-P",
        action="store_true",
        help="Load per-set card files concurrently.",
    )
    parser.add_argument(
        "--no-hashes",
        action="store_true",
        help="Skip writing a .sha256 file next to each artifact.",
    )
    parser.add_argument(
        "--create-missing-card-files",
        action="store_true",
        help="Write an empty card file for every catalog set lacking one, then exit.",
    )

    parsed_args = parser.parse_args(argv)

    if parsed_args.use_envvars:
        LOGGER.info("Using environment variables over parser flags")
        data_path = os.environ.get("DATA_PATH")
        output_path = os.environ.get("OUTPUT_PATH")
        prefix_cap = os.environ.get("PREFIX_CAP")
        parsed_args.data_path = pathlib.Path(data_path) if data_path else None
        parsed_args.output_path = pathlib.Path(output_path) if output_path else None
        try:
            parsed_args.prefix_cap = positive_int(prefix_cap) if prefix_cap else None
        except argparse.ArgumentTypeError as error:
            parser.error(f"PREFIX_CAP: {error}")
        parsed_args.pretty = bool(os.environ.get("PRETTY", False))
        parsed_args.parallel = bool(os.environ.get("PARALLEL", False))
        parsed_args.no_hashes = bool(os.environ.get("NO_HASHES", False))
        parsed_args.create_missing_card_files = bool(
            os.environ.get("CREATE_MISSING_CARD_FILES", False)
        )

    return parsed_args
