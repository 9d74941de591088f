"""Public entry points for checksums."""
