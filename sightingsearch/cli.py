"""Command line entry point.

Usage:
    sighting-search <sighting_file.dat> <signature_file.dat> <result_file.dat>

Reads both input files, asks for the search method (unless
SIGHTING_SEARCH_METHOD is set), prints the search time and writes the match
count to the result file.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .config import SearchConfig, resolve_search_method
from .dataio.readers import read_sightings, read_queries
from .dataio.writers import check_output_path, write_match_count
from .errors import SightingSearchError
from .search.matching import run_search, warmup

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sighting-search',
        description='Count query signatures that match at least one sighting',
    )
    parser.add_argument('sighting_file', help='Whitespace-separated speed/brightness pairs')
    parser.add_argument('signature_file', help='Whitespace-separated query signatures')
    parser.add_argument('result_file', help='Output file for the match count')
    return parser


def main(
    argv: Optional[List[str]] = None,
    input_fn: Callable[[str], str] = input,
) -> int:
    """Run the tool and return the process exit status.

    Wrong argument count exits through argparse (status 2). Any
    SightingSearchError is reported on stderr and returns 1.
    """
    args = build_parser().parse_args(argv)

    try:
        config = SearchConfig.from_env()
        logging.basicConfig(
            level=config.log_level,
            format='%(levelname)s %(name)s: %(message)s',
            stream=sys.stderr,
        )

        sightings = read_sightings(args.sighting_file)
        queries = read_queries(args.signature_file)
        check_output_path(args.result_file)

        method = resolve_search_method(config, input_fn)
        logger.info(f"Search method: {method.name.lower()}")

        if config.warmup:
            warmup()

        results = run_search(sightings, queries, method)
        print(f"CPU time: {results.elapsed_us:g} microseconds")

        write_match_count(args.result_file, results.n_matches)
    except SightingSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
