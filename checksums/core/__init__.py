"""Core types, constants, configuration and exceptions for checksums."""
