"""Allow running dotlens as ``python -m dotlens``."""

import sys

from dotlens.cli import main

sys.exit(main())
