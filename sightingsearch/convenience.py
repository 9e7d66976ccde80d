"""Convenience wrappers for file-to-file searches.

Use these when you just want a match count from files on disk. For repeated
searches over in-memory data, use SightingCollection with
search.count_matches() / search.run_search() directly.

Examples
--------
>>> results = search_files("sightings.dat", "signatures.dat", "result.dat", "binary")
>>> print(f"{results.n_matches} matches in {results.elapsed_us:.1f} µs")
"""

from pathlib import Path
from typing import Iterable, Union

from .dataio.readers import read_sightings, read_queries
from .dataio.writers import check_output_path, write_match_count
from .search.matching import (
    SearchMethod,
    MatchResults,
    count_matches,
    run_search,
    warmup as warmup_kernels,
)
from .sightings.collection import SightingCollection

PathLike = Union[str, Path]


def search_pairs(
    pairs: Iterable,
    queries: Iterable[int],
    method: Union[SearchMethod, str] = SearchMethod.BINARY,
) -> int:
    """Count matches for in-memory (speed, brightness) pairs.

    Examples
    --------
    >>> search_pairs([(10, 5), (3, 7), (8, 8)], [5, 3, 7])
    3
    """
    return count_matches(SightingCollection.from_pairs(pairs), queries, method)


def search_files(
    sighting_path: PathLike,
    query_path: PathLike,
    result_path: PathLike,
    method: Union[SearchMethod, str],
    warmup: bool = True,
) -> MatchResults:
    """Read both inputs, run a timed search and write the match count.

    Order of operations:
    1. Read sightings and queries (InputUnavailableError aborts here)
    2. Validate the result path (OutputUnavailableError aborts here)
    3. Compile kernels (optional) and run the timed search
    4. Write the result atomically

    Parameters
    ----------
    sighting_path, query_path : str or Path
        Input files
    result_path : str or Path
        Output file, one decimal line
    method : SearchMethod or str
        'linear' / 'binary' (or 'l' / 'b')
    warmup : bool
        Compile search kernels before timing (default: True)

    Returns
    -------
    results : MatchResults
        Match count and timing
    """
    if isinstance(method, str):
        method = SearchMethod.parse(method)

    sightings = read_sightings(sighting_path)
    queries = read_queries(query_path)
    check_output_path(result_path)

    if warmup:
        warmup_kernels()

    results = run_search(sightings, queries, method)
    write_match_count(result_path, results.n_matches)

    return results
