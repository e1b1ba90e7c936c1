"""Allow running as ``python -m graphbench``."""

import sys

from graphbench.cli import main

sys.exit(main())
