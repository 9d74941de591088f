"""Checksum engine exceptions."""

from .checksums import (
    AlgorithmMismatch,
    ChecksumsError,
    FileUnreadable,
    ManifestCorrupt,
    ManifestNotFound,
    ManifestPathRequired,
    OutputExists,
    UnsupportedAlgorithm,
    WriteFailed,
)

__all__ = [
    "AlgorithmMismatch",
    "ChecksumsError",
    "FileUnreadable",
    "ManifestCorrupt",
    "ManifestNotFound",
    "ManifestPathRequired",
    "OutputExists",
    "UnsupportedAlgorithm",
    "WriteFailed",
]
