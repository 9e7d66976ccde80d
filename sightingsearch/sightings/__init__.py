"""Sighting records, signature derivation and ordering.

Core pieces:
1. signature(speed, brightness) = ceil(speed * brightness / 10)
2. Ordering relation: signature ascending, ties broken by speed
3. SightingCollection: parallel int64 arrays, sortable once in place
"""

from .signature import (
    signature,
    compute_signatures,
)

from .ordering import (
    precedes,
    precedes_numba,
    sort_order,
    is_sorted_numba,
)

from .collection import (
    Sighting,
    SightingCollection,
)

__all__ = [
    # Signature
    'signature',
    'compute_signatures',
    # Ordering
    'precedes',
    'precedes_numba',
    'sort_order',
    'is_sorted_numba',
    # Records
    'Sighting',
    'SightingCollection',
]
