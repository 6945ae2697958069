"""Allow running the score keeper with python -m bowling_scorer."""

import sys

from .cli import main

sys.exit(main())
