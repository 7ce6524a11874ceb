"""
Main entry point for running the package as a module.

Usage:
    python -m gallerygen generate --gallery ./Gallery --images ./images --output manifest.json
    python -m gallerygen report --manifest manifest.json
    python -m gallerygen resolve https://example.com/
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
