"""
Main entry point for the GolfEzz client.
"""

import sys
from golfezz.cli import main

if __name__ == "__main__":
    sys.exit(main())
