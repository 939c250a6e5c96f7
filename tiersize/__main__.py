"""
Main entry point for running the package as a module.

Usage:
    python -m tiersize resize --input-dir ~/Pictures/inspections
    python -m tiersize classify photo.jpg
    python -m tiersize tiers
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
