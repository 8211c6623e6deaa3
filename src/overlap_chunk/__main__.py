"""Main entry point for the overlap-chunk package.

This module allows the package to be run as a script using `python -m overlap_chunk`.
"""

import sys


def main() -> None:
    """Run the command line tool and exit with its status code."""
    from overlap_chunk.main import main as app_main
    sys.exit(app_main())


if __name__ == "__main__":
    main()
