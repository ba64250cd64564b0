"""Allow running OLDPHONE with ``python -m oldphone``."""

import sys
from .cli import main

sys.exit(main())
