"""
Main entry point for booking calendar application.
"""

import sys
from axemacal.cli import main

if __name__ == "__main__":
    sys.exit(main())
