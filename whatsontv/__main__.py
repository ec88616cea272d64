"""Allow ``python -m whatsontv``."""

import sys

from whatsontv.cli import main

if __name__ == "__main__":
    sys.exit(main())
