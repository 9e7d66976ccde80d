"""SightingSearch - signature matching over sensor sightings.

Counts how many query signatures match at least one sighting, where a
sighting's signature is ceil(speed * brightness / 10). Two interchangeable
strategies are provided, both as Numba-compiled kernels:

- Linear scan over the sightings in input order
- Sort once by (signature, speed), then binary search per query

Both strategies always return the same count; only the running time differs.
"""

__version__ = "0.1.0"

# Import main submodules for convenient access
from sightingsearch import sightings
from sightingsearch import search
from sightingsearch import dataio
from sightingsearch import config
from sightingsearch import convenience

__all__ = [
    "sightings",
    "search",
    "dataio",
    "config",
    "convenience",
]
