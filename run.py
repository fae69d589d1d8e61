"""Entry point for the hangul-search inspection CLI."""

import sys

from hangul_search.cli import main

if __name__ == "__main__":
    sys.exit(main())
