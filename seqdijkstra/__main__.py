"""Allow ``python -m seqdijkstra``."""

import sys

from .cli import main

sys.exit(main())
