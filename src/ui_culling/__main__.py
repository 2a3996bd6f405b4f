"""
Entry point for running the UI culling scene runner as a module.

Usage:
    python -m ui_culling [scene.yaml]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
