"""Allow running with ``python -m endurosim``."""

import sys

from endurosim.cli import main

sys.exit(main())
