"""
Royal Game of Ur - Main Entry Point
Plays an optional interactive game, then simulates many games between scripted agents.
"""

import sys

from royal_ur.cli import main

if __name__ == "__main__":
    sys.exit(main())
