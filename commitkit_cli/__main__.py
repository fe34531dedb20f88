"""
Module execution entry point.

Allows running with: python -m commitkit_cli
"""

import sys
from commitkit_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
