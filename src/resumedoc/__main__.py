#!/usr/bin/env python3
"""Entry point for running resumedoc as a module.

This allows the package to be executed as:
    python -m resumedoc build resume.yaml
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
