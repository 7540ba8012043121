"""
Command entry point.
"""

import sys
from .command import Base

def main() -> None:
    """
    Main entry point for checkout subcommands.
    """

    Base.start(sys.executable, sys.argv)

if __name__ == "__main__":
    main()
