"""Linear scan over an unsorted sighting collection.

No order precondition and no mutation. O(n) per query.
"""

import numpy as np
import numba

from ..sightings.signature import signature


@numba.jit(nopython=True, cache=True)
def linear_exists(
    speed: np.ndarray,
    brightness: np.ndarray,
    target: int,
) -> bool:
    """Return True if any sighting has the target signature.

    Parameters
    ----------
    speed, brightness : np.ndarray (int64)
        Parallel attribute arrays, any order
    target : int
        Signature to look for

    Returns
    -------
    found : bool
        True on the first sighting whose signature equals target

    Examples
    --------
    >>> speed = np.array([10, 3, 8], dtype=np.int64)
    >>> brightness = np.array([5, 7, 8], dtype=np.int64)
    >>> linear_exists(speed, brightness, 3)
    True
    >>> linear_exists(speed, brightness, 4)
    False
    """
    for i in range(len(speed)):
        if signature(speed[i], brightness[i]) == target:
            return True
    return False


@numba.jit(nopython=True, cache=True)
def count_matches_linear(
    speed: np.ndarray,
    brightness: np.ndarray,
    queries: np.ndarray,
) -> int:
    """Count queries with at least one matching sighting (linear scan each)."""
    count = 0
    for q in range(len(queries)):
        if linear_exists(speed, brightness, queries[q]):
            count += 1
    return count
