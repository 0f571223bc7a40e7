"""
Main entry point for running ultrawide as a module.

Usage:
    ULTRAWIDE_SCREEN=3440x1440 ULTRAWIDE_WINDOWS=5 python -m ultrawide
"""

from .preview import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
