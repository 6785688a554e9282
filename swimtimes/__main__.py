"""
Package entry point.

Allows running the application via:

    python -m swimtimes

This simply forwards execution to swimtimes.cli.main().
"""

from swimtimes.cli import main

if __name__ == "__main__":
    main()
