"""Command-line interface for checksums."""
