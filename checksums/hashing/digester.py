"""Streaming file digests."""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from checksums.core.constants import DEFAULT_CHUNK_SIZE
from checksums.core.exceptions import FileUnreadable
from checksums.hashing.algorithms import Algorithm, Digest


def _reason(error: OSError) -> str:
    return error.strerror or str(error)


def digest_file(
    path: str | os.PathLike[str],
    algorithm: str | Algorithm,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Digest:
    """Compute the digest of a single file.

    The file is read into one reusable buffer ``chunk_size`` bytes at a time
    and every non-empty chunk is fed to a fresh hasher, which is finalized
    once after end of file.

    Args:
        path: File to digest
        algorithm: Algorithm member or name
        chunk_size: Read size in bytes

    Returns:
        Lowercase hex digest

    Raises:
        FileUnreadable: If the file cannot be opened or a read fails
        UnsupportedAlgorithm: If the algorithm name is unknown
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    hasher = Algorithm.from_name(algorithm).new_hasher()
    buffer = bytearray(chunk_size)
    view = memoryview(buffer)

    try:
        stream = open(path, "rb")
    except OSError as e:
        raise FileUnreadable(Path(path), _reason(e)) from e

    total = 0
    with stream:
        while True:
            try:
                read = stream.readinto(buffer)
            except OSError as e:
                raise FileUnreadable(Path(path), _reason(e)) from e
            if not read:
                break
            hasher.update(view[:read])
            total += read

    digest = hasher.finalize()
    logger.debug(f"{hasher.algorithm} {digest} {path} ({total} bytes)")
    return digest
