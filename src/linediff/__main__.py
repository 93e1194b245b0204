#!/usr/bin/env python3
"""Entry point for running linediff as a module.

This allows the package to be executed as:
    python -m linediff FILE1 FILE2 [options]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
