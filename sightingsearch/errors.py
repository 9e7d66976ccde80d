"""Exception types raised by SightingSearch.

Library code raises these; only the command line entry point catches them
and turns them into an exit status.
"""


class SightingSearchError(Exception):
    """Base class for all SightingSearch errors."""


class InputUnavailableError(SightingSearchError, OSError):
    """Sighting or query source cannot be opened."""


class OutputUnavailableError(SightingSearchError, OSError):
    """Result destination cannot be opened for writing."""


class InvalidSelectionError(SightingSearchError, ValueError):
    """Search method choice is not one of linear / binary."""


class UsageError(SightingSearchError):
    """Program invoked incorrectly (or no method could be read)."""
