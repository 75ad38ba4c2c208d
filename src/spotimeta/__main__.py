"""Allow ``python -m spotimeta``."""

import sys

from spotimeta.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
