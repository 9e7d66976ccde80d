"""Signature search strategies.

Core algorithms:
1. Linear scan on unsorted sightings (O(n) per query)
2. Binary search on signature-sorted sightings (O(log n) per query)
3. Match counting with the strategy bound once per run
"""

from .linear import (
    linear_exists,
    count_matches_linear,
)

from .binary import (
    binary_exists,
    count_matches_binary,
)

from .matching import (
    SearchMethod,
    MatchResults,
    as_query_array,
    count_matches,
    run_search,
    warmup,
)

__all__ = [
    # Linear search
    'linear_exists',
    'count_matches_linear',
    # Binary search
    'binary_exists',
    'count_matches_binary',
    # Match counting
    'SearchMethod',
    'MatchResults',
    'as_query_array',
    'count_matches',
    'run_search',
    'warmup',
]
