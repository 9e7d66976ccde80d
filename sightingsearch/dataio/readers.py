"""Sighting and query file reading.

Both files are plain text holding whitespace-separated integers:
- Sighting file: speed brightness pairs
- Query file: one signature per token

Token rules (same for both):
1. Parsing stops at the first token that is not a 32-bit integer; the rest
   of the file is ignored. A token such as "12abc" still yields its leading
   integer (12) before parsing stops
2. A trailing unpaired value in a sighting file is dropped
"""

import logging
import re
from pathlib import Path
from typing import List, Union

import numpy as np

from ..constants import INT_DTYPE, INPUT_INT_MIN, INPUT_INT_MAX
from ..errors import InputUnavailableError
from ..sightings.collection import SightingCollection

logger = logging.getLogger(__name__)

# ASCII whitespace only; other characters belong to tokens
_WHITESPACE = re.compile(r'[ \t\n\r\f\v]+')

# Optional sign then ASCII digits, matched at the start of a token
_INT_PREFIX = re.compile(r'[+-]?[0-9]+', re.ASCII)


def parse_int_tokens(text: str) -> List[int]:
    """Parse leading whitespace-separated 32-bit integers from text.

    Parameters
    ----------
    text : str
        File contents

    Returns
    -------
    values : List[int]
        Integers up to the first token that is not an integer. A token with
        a valid integer prefix ("12abc", "2.5") contributes that prefix and
        then ends parsing. An out-of-range value ends parsing unused.

    Examples
    --------
    >>> parse_int_tokens("10 5\\n3 7\\n")
    [10, 5, 3, 7]
    >>> parse_int_tokens("1 2 x 4")
    [1, 2]
    >>> parse_int_tokens("1 2.5 3")
    [1, 2]
    """
    tokens = [token for token in _WHITESPACE.split(text) if token]
    values = []

    for i, token in enumerate(tokens):
        match = _INT_PREFIX.match(token)
        if match is None:
            break
        value = int(match.group())
        if value < INPUT_INT_MIN or value > INPUT_INT_MAX:
            break
        values.append(value)
        if match.end() < len(token):
            break
    else:
        return values

    logger.warning(
        f"Stopped at malformed token {tokens[i]!r}; "
        f"ignoring the rest of the input ({len(tokens) - i:,} tokens)"
    )

    return values


def _read_text(path: Union[str, Path]) -> str:
    path = Path(path)
    try:
        with open(path) as f:
            return f.read()
    except OSError as e:
        raise InputUnavailableError(f"cannot open file {path}: {e.strerror}") from e


def read_sightings(path: Union[str, Path]) -> SightingCollection:
    """Read (speed, brightness) pairs into a SightingCollection.

    Parameters
    ----------
    path : str or Path
        Sighting file

    Returns
    -------
    sightings : SightingCollection
        Sightings in file order

    Raises
    ------
    InputUnavailableError
        If the file cannot be opened

    Examples
    --------
    >>> sightings = read_sightings("sightings.dat")
    >>> print(f"{len(sightings)} sightings, first: {sightings[0]}")
    """
    path = Path(path)
    logger.info(f"Reading sighting file: {path.name}")

    values = parse_int_tokens(_read_text(path))

    if len(values) % 2:
        logger.warning(f"Dropping unpaired trailing value {values[-1]} in {path.name}")
        values = values[:-1]

    sightings = SightingCollection(values[0::2], values[1::2])

    logger.info(f"✓ Read {len(sightings):,} sightings from {path.name}")

    return sightings


def read_queries(path: Union[str, Path]) -> np.ndarray:
    """Read query signatures.

    Parameters
    ----------
    path : str or Path
        Query (signature) file

    Returns
    -------
    queries : np.ndarray (int64)
        Signatures in file order, duplicates kept

    Raises
    ------
    InputUnavailableError
        If the file cannot be opened
    """
    path = Path(path)
    logger.info(f"Reading signature file: {path.name}")

    queries = np.array(parse_int_tokens(_read_text(path)), dtype=INT_DTYPE)

    logger.info(f"✓ Read {len(queries):,} signatures from {path.name}")

    return queries
