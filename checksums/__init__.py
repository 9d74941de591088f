"""checksums: create and verify digests of directory trees."""

from checksums.core.constants import ExitCode
from checksums.core.types import (
    HashEntry,
    Manifest,
    Outcome,
    PathComparison,
    VerificationVerdict,
)
from checksums.hashing import Algorithm, digest_file, new_hasher
from checksums.ops import (
    compare_hashes,
    create_hashes,
    default_manifest_path,
    read_hashes,
    render_comparison,
    write_hashes,
)

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "ExitCode",
    "HashEntry",
    "Manifest",
    "Outcome",
    "PathComparison",
    "VerificationVerdict",
    "compare_hashes",
    "create_hashes",
    "default_manifest_path",
    "digest_file",
    "new_hasher",
    "read_hashes",
    "render_comparison",
    "write_hashes",
]
