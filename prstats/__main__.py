"""Allow running as ``python -m prstats``."""

import sys

from prstats.main import main

if __name__ == "__main__":
    sys.exit(main())
