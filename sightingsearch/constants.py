"""Constants shared by the signature, search and I/O modules.

All integer data is stored as int64 so that the product of two 32-bit
inputs can never overflow inside the Numba kernels.
"""

import numpy as np

# =============================================================================
# Signature
# =============================================================================

# signature = ceil(speed * brightness / SIGNATURE_DIVISOR)
SIGNATURE_DIVISOR = 10

# =============================================================================
# Data Types
# =============================================================================

# Storage dtype for speed, brightness and query arrays
INT_DTYPE = np.int64

# Input values must fit a signed 32-bit integer; the first token outside
# this range ends parsing, like any other malformed token.
INPUT_INT_MIN = -(2 ** 31)
INPUT_INT_MAX = 2 ** 31 - 1

# =============================================================================
# Configuration (environment variables)
# =============================================================================

ENV_METHOD = "SIGHTING_SEARCH_METHOD"
ENV_WARMUP = "SIGHTING_SEARCH_WARMUP"
ENV_LOG_LEVEL = "SIGHTING_SEARCH_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

# =============================================================================
# Interactive Prompt
# =============================================================================

METHOD_PROMPT = "Choice of search method ([l]inear, [b]inary)? "
INVALID_CHOICE_MESSAGE = "Incorrect choice"
