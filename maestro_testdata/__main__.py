"""Entry point for python -m maestro_testdata."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
