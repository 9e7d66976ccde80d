"""Binary search over a sighting collection sorted by signature.

Precondition: (speed, brightness) sorted by the ordering relation in
sightings.ordering. The bisection compares only the signature component;
several sightings may share a signature and any one of them is a match.

Performance
-----------
O(log n) per query, after one O(n log n) sort per run.
"""

import numpy as np
import numba

from ..sightings.signature import signature


@numba.jit(nopython=True, cache=True)
def binary_exists(
    speed: np.ndarray,
    brightness: np.ndarray,
    target: int,
) -> bool:
    """Return True if any sighting in the sorted arrays has the target signature.

    Parameters
    ----------
    speed, brightness : np.ndarray (int64)
        Parallel attribute arrays
        CRITICAL: Must be sorted by the ordering relation! Not validated.
    target : int
        Signature to look for

    Returns
    -------
    found : bool
        True on the first exact signature hit, False once the range is empty

    Examples
    --------
    >>> speed = np.array([3, 10, 8], dtype=np.int64)      # signatures 3, 5, 7
    >>> brightness = np.array([7, 5, 8], dtype=np.int64)
    >>> binary_exists(speed, brightness, 5)
    True
    >>> binary_exists(speed, brightness, 6)
    False
    """
    n = len(speed)
    if n == 0:
        return False

    left = 0
    right = n - 1
    while left <= right:
        mid = (left + right) // 2
        mid_signature = signature(speed[mid], brightness[mid])
        if mid_signature == target:
            return True
        if mid_signature < target:
            left = mid + 1
        else:
            right = mid - 1

    return False


@numba.jit(nopython=True, cache=True)
def count_matches_binary(
    speed: np.ndarray,
    brightness: np.ndarray,
    queries: np.ndarray,
) -> int:
    """Count queries with at least one matching sighting (sorted input)."""
    count = 0
    for q in range(len(queries)):
        if binary_exists(speed, brightness, queries[q]):
            count += 1
    return count
