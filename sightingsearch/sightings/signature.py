"""Signature derivation for sightings.

A sighting's signature is the ceiling of speed * brightness / 10. It is never
stored: every search kernel recomputes it from the two raw attributes, which
is consistent because sightings are immutable.

Exact integer ceiling division is used instead of float ceil() so that large
products cannot be rounded wrongly by float64.
"""

import numpy as np
import numba

from ..constants import SIGNATURE_DIVISOR


@numba.jit(nopython=True, cache=True)
def signature(speed: int, brightness: int) -> int:
    """Compute the signature of a single sighting.

    Parameters
    ----------
    speed : int
        Sighting speed
    brightness : int
        Sighting brightness

    Returns
    -------
    signature : int
        ceil(speed * brightness / 10), exact for any sign

    Examples
    --------
    >>> signature(3, 7)
    3
    >>> signature(10, 5)
    5
    >>> signature(-3, 7)   # ceil(-2.1) rounds toward +infinity
    -2

    Notes
    -----
    -((-p) // d) is ceil(p / d) because // floors for negative operands too.
    """
    product = np.int64(speed) * np.int64(brightness)
    return -((-product) // SIGNATURE_DIVISOR)


@numba.jit(nopython=True, cache=True)
def compute_signatures(
    speed: np.ndarray,
    brightness: np.ndarray,
) -> np.ndarray:
    """Compute signatures for parallel speed / brightness arrays.

    Returns a new array; nothing is cached on the inputs.

    Parameters
    ----------
    speed, brightness : np.ndarray (int64)
        Parallel attribute arrays of equal length

    Returns
    -------
    signatures : np.ndarray (int64)
        signatures[i] == signature(speed[i], brightness[i])
    """
    n = len(speed)
    signatures = np.empty(n, dtype=np.int64)
    for i in range(n):
        signatures[i] = signature(speed[i], brightness[i])
    return signatures

