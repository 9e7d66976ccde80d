"""Sighting / query file reading and result file writing."""

from .readers import (
    parse_int_tokens,
    read_sightings,
    read_queries,
)

from .writers import (
    check_output_path,
    write_match_count,
)

__all__ = [
    # Reading
    'parse_int_tokens',
    'read_sightings',
    'read_queries',
    # Writing
    'check_output_path',
    'write_match_count',
]
