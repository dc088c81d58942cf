"""
Entry point for running pageframe as a module.

Usage:
    python -m pageframe capture request.json --output framed.pdf
    python -m pageframe capture --url https://example.com --selector main
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
