"""Total order over sightings used by the binary search path.

a precedes b  iff  signature(a) < signature(b)
              or  (signature(a) == signature(b) and a.speed < b.speed)

The same relation sorts the collection and, restricted to its signature
component, drives the bisection in search.binary. If the two ever disagree
binary search returns false negatives.
"""

from typing import TYPE_CHECKING

import numpy as np
import numba

from .signature import signature, compute_signatures

if TYPE_CHECKING:
    from .collection import Sighting


@numba.jit(nopython=True, cache=True)
def precedes_numba(
    speed_a: int,
    brightness_a: int,
    speed_b: int,
    brightness_b: int,
) -> bool:
    """Strict ordering predicate on raw attributes (Numba-compiled)."""
    sig_a = signature(speed_a, brightness_a)
    sig_b = signature(speed_b, brightness_b)
    if sig_a == sig_b:
        return speed_a < speed_b
    return sig_a < sig_b


def precedes(a: 'Sighting', b: 'Sighting') -> bool:
    """Return True if sighting a sorts strictly before sighting b.

    Backs Sighting.__lt__, so sorted() on Sighting records uses this relation.

    Examples
    --------
    >>> from sightingsearch.sightings import Sighting
    >>> precedes(Sighting(3, 7), Sighting(10, 5))   # 3 < 5
    True
    >>> precedes(Sighting(2, 5), Sighting(1, 10))   # both 1, speed 2 > 1
    False
    """
    return bool(precedes_numba(a.speed, a.brightness, b.speed, b.brightness))


def sort_order(speed: np.ndarray, brightness: np.ndarray) -> np.ndarray:
    """Stable permutation that sorts sightings by the ordering relation.

    Parameters
    ----------
    speed, brightness : np.ndarray (int64)
        Parallel attribute arrays

    Returns
    -------
    order : np.ndarray (intp)
        Indices such that (speed[order], brightness[order]) is sorted.
        Sightings equal under the relation keep their input order.
    """
    signatures = compute_signatures(speed, brightness)
    # lexsort: last key is primary
    return np.lexsort((speed, signatures))


@numba.jit(nopython=True, cache=True)
def is_sorted_numba(speed: np.ndarray, brightness: np.ndarray) -> bool:
    """Check that no adjacent pair is out of order.

    For every i: signature[i] <= signature[i+1], and speed[i] <= speed[i+1]
    when the signatures are equal.
    """
    for i in range(1, len(speed)):
        if precedes_numba(speed[i], brightness[i], speed[i - 1], brightness[i - 1]):
            return False
    return True
