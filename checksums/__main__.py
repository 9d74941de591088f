"""Entry point for running checksums as a module: python -m checksums.

This enables:
    python -m checksums [DIRECTORY] [options]
"""

from checksums.api.cli.main import main

if __name__ == "__main__":
    main()
