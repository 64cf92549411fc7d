"""
Main entry point for dalia when run as a module.
"""

import sys
from dalia.cli import main

if __name__ == '__main__':
    sys.exit(main())
