"""Core constants for checksums."""

from enum import IntEnum

# Streaming read size for file digests (64 KiB)
DEFAULT_CHUNK_SIZE = 64 * 1024

# Manifest layout
MANIFEST_SUFFIX = ".hash"
MANIFEST_SEPARATOR = "\t"
MANIFEST_ENCODING = "utf-8"
# Undecodable file names survive a write/read cycle unchanged
MANIFEST_ERRORS = "surrogateescape"

# Sentinel for unbounded traversal depth
INFINITE_DEPTH = None


class ExitCode(IntEnum):
    """Process exit codes returned by the CLI.

    Usage errors share code 2 with argparse's own parse failures.
    """

    SUCCESS = 0
    VERIFICATION_FAILED = 1
    USAGE_ERROR = 2
    ALGORITHM_MISMATCH = 3
    MANIFEST_INVALID = 4
    IO_ERROR = 5
