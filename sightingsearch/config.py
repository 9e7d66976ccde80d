"""Run configuration and search method selection.

The method can be fixed through the environment (SIGHTING_SEARCH_METHOD);
otherwise the user is asked interactively until a valid answer is given.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .constants import (
    ENV_METHOD,
    ENV_WARMUP,
    ENV_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    METHOD_PROMPT,
    INVALID_CHOICE_MESSAGE,
)
from .errors import InvalidSelectionError, UsageError
from .search.matching import SearchMethod

logger = logging.getLogger(__name__)

_FALSE_STRINGS = ("0", "false", "no", "off")


@dataclass
class SearchConfig:
    """Settings for one search run."""

    # Fixed method; None means ask interactively
    method: Optional[SearchMethod] = None

    # Compile kernels before the timed search
    warmup: bool = True

    # Root logging level for the command line tool
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SearchConfig':
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read (default: os.environ)

        Returns:
            SearchConfig with values from SIGHTING_SEARCH_METHOD,
            SIGHTING_SEARCH_WARMUP and SIGHTING_SEARCH_LOG_LEVEL

        Raises:
            InvalidSelectionError: configured method is not linear / binary
            UsageError: configured log level is unknown
        """
        if environ is None:
            environ = os.environ

        method = None
        method_text = environ.get(ENV_METHOD, "").strip()
        if method_text:
            method = SearchMethod.parse(method_text)

        warmup = environ.get(ENV_WARMUP, "1").strip().lower() not in _FALSE_STRINGS

        log_level = environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise UsageError(f"Unknown log level in {ENV_LOG_LEVEL}: {log_level!r}")

        return cls(method=method, warmup=warmup, log_level=log_level)


def prompt_search_method(input_fn: Callable[[str], str] = input) -> SearchMethod:
    """Ask for a search method until a valid one is entered.

    Invalid answers print 'Incorrect choice' on stderr and ask again.

    Args:
        input_fn: Prompt function (default: builtin input)

    Returns:
        The chosen SearchMethod

    Raises:
        UsageError: input ended before a valid choice was made
    """
    while True:
        try:
            answer = input_fn(METHOD_PROMPT)
        except EOFError as e:
            raise UsageError("no search method selected (end of input)") from e

        try:
            return SearchMethod.parse(answer)
        except InvalidSelectionError:
            print(INVALID_CHOICE_MESSAGE, file=sys.stderr)


def resolve_search_method(
    config: SearchConfig,
    input_fn: Callable[[str], str] = input,
) -> SearchMethod:
    """Configured method if set, otherwise prompt for one."""
    if config.method is not None:
        logger.debug(f"Using configured search method: {config.method.name.lower()}")
        return config.method
    return prompt_search_method(input_fn)
