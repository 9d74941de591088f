"""Digest algorithms and streaming file digests."""

from .algorithms import Algorithm, Digest, Hasher, new_hasher
from .digester import digest_file

__all__ = [
    "Algorithm",
    "Digest",
    "Hasher",
    "digest_file",
    "new_hasher",
]
