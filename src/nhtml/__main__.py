"""Entry point for ``python -m nhtml``."""

import sys

from nhtml.cli import main

if __name__ == "__main__":
    sys.exit(main())
