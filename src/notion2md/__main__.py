"""Module entry point for running with python -m notion2md."""

import sys

from notion2md.cli import main

if __name__ == "__main__":
    sys.exit(main())
