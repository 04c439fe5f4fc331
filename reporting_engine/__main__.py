"""Allow running the CLI as python -m reporting_engine."""

import sys

from .cli import main

sys.exit(main())
