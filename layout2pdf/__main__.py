"""
Entry point for running layout2pdf as a module.

Usage:
    python -m layout2pdf report
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
