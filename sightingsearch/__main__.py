"""Allow ``python -m sightingsearch``."""

import sys

from .cli import main

sys.exit(main())
