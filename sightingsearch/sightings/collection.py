"""Sighting record and the in-memory sighting collection.

The collection keeps speeds and brightnesses as two parallel int64 arrays
(struct-of-arrays) so they can be handed straight to the Numba search
kernels. Signatures are not stored; see sightings.signature.

Lifecycle
---------
1. Built once from input, in insertion order
2. Optionally sorted in place by the ordering relation (binary search only)
3. Read-only from then on: sort() clears the arrays' writeable flag
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from ..constants import INT_DTYPE
from .signature import signature, compute_signatures
from .ordering import precedes, sort_order, is_sorted_numba

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sighting:
    """One sensor sighting. Immutable, compared by value."""

    speed: int
    brightness: int

    @property
    def signature(self) -> int:
        """ceil(speed * brightness / 10), recomputed on every access."""
        return int(signature(self.speed, self.brightness))

    def __lt__(self, other: 'Sighting') -> bool:
        """Signature ascending, ties broken by speed."""
        if not isinstance(other, Sighting):
            return NotImplemented
        return precedes(self, other)

    def __str__(self) -> str:
        return f"({self.speed}, {self.brightness}) => {self.signature}"


class SightingCollection:
    """Ordered sequence of sightings stored as parallel int64 arrays.

    Attributes
    ----------
    speed : np.ndarray (int64)
        Speed of each sighting
    brightness : np.ndarray (int64)
        Brightness of each sighting (parallel to speed)
    n_sightings : int
        Number of sightings

    Examples
    --------
    >>> sightings = SightingCollection.from_pairs([(10, 5), (3, 7), (8, 8)])
    >>> sightings.signatures()
    array([5, 3, 7])
    >>> sightings.sort()
    >>> [str(s) for s in sightings]
    ['(3, 7) => 3', '(10, 5) => 5', '(8, 8) => 7']
    """

    def __init__(self, speed: Iterable[int], brightness: Iterable[int]):
        """Copy the attribute arrays into int64 storage.

        Parameters
        ----------
        speed, brightness : array-like of int
            Parallel attribute sequences of equal length

        Raises
        ------
        ValueError
            If the arrays are not 1-D or differ in length
        """
        self.speed = np.array(speed, dtype=INT_DTYPE).reshape(-1)
        self.brightness = np.array(brightness, dtype=INT_DTYPE).reshape(-1)

        if len(self.speed) != len(self.brightness):
            raise ValueError(
                f"speed and brightness differ in length: "
                f"{len(self.speed)} != {len(self.brightness)}"
            )

        self.n_sightings = len(self.speed)
        self._sorted = False

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, int]]) -> 'SightingCollection':
        """Create collection from (speed, brightness) pairs."""
        pairs = list(pairs)
        speed = [p[0] for p in pairs]
        brightness = [p[1] for p in pairs]
        return cls(speed, brightness)

    @classmethod
    def from_sightings(cls, sightings: Iterable[Sighting]) -> 'SightingCollection':
        """Create collection from Sighting records."""
        return cls.from_pairs((s.speed, s.brightness) for s in sightings)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'SightingCollection':
        """Create collection from a whitespace-separated sighting file.

        See dataio.readers.read_sightings() for the token rules.
        """
        from ..dataio.readers import read_sightings

        return read_sightings(path)

    @property
    def is_sorted(self) -> bool:
        """True once sort() has run (or the input was already in order)."""
        return self._sorted

    def signatures(self) -> np.ndarray:
        """Signature of every sighting, in current order (fresh array)."""
        return compute_signatures(self.speed, self.brightness)

    def sort(self) -> None:
        """Sort in place by the ordering relation and freeze the arrays.

        Idempotent: a second call is a no-op, so the collection is mutated
        at most once per run.
        """
        if self._sorted:
            return

        if not is_sorted_numba(self.speed, self.brightness):
            order = sort_order(self.speed, self.brightness)
            self.speed[:] = self.speed[order]
            self.brightness[:] = self.brightness[order]
            logger.debug(f"Sorted {self.n_sightings:,} sightings by signature")

        self.speed.flags.writeable = False
        self.brightness.flags.writeable = False
        self._sorted = True

    def get_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Extract (speed, brightness) arrays for the Numba kernels."""
        return self.speed, self.brightness

    def __len__(self) -> int:
        return self.n_sightings

    def __getitem__(self, idx: int) -> Sighting:
        return Sighting(int(self.speed[idx]), int(self.brightness[idx]))

    def __iter__(self) -> Iterator[Sighting]:
        for i in range(self.n_sightings):
            yield self[i]

    def __repr__(self) -> str:
        return (
            f"SightingCollection(n_sightings={self.n_sightings:,}, "
            f"sorted={self._sorted})"
        )
