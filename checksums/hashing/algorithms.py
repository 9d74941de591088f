"""Digest algorithm registry.

The set of algorithms is closed: ``Algorithm`` enumerates them and
``_BACKENDS`` maps each one to a constructor. Lookups always build a fresh
backend, so hashers never share state.
"""

from __future__ import annotations

import hashlib
import re
from collections.abc import Callable, Mapping
from enum import Enum
from functools import partial
from types import MappingProxyType
from typing import NewType, Protocol

from checksums.core.exceptions import UnsupportedAlgorithm
from checksums.hashing.blake import Blake512
from checksums.hashing.checksum import (
    CRC8_SMBUS,
    CRC16_ARC,
    CRC32_ISO_HDLC,
    CRC64_XZ,
    CrcChecksum,
    Xor8,
)

# Lowercase hex rendering of a finished digest
Digest = NewType("Digest", str)

_HEX_DIGEST = re.compile(r"[0-9a-f]+")


class DigestBackend(Protocol):
    """Minimal hashlib-style interface every backend provides."""

    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...


class Algorithm(Enum):
    """Supported digest algorithms as (canonical name, output width in bits)."""

    SHA1 = ("SHA1", 160)
    SHA2_256 = ("SHA2-256", 256)
    SHA2_512 = ("SHA2-512", 512)
    SHA3_256 = ("SHA3-256", 256)
    SHA3_512 = ("SHA3-512", 512)
    BLAKE = ("BLAKE", 512)
    BLAKE2 = ("BLAKE2", 512)
    CRC8 = ("CRC8", 8)
    CRC16 = ("CRC16", 16)
    CRC32 = ("CRC32", 32)
    CRC64 = ("CRC64", 64)
    MD5 = ("MD5", 128)
    XOR8 = ("XOR8", 8)

    def __init__(self, canonical_name: str, width_bits: int):
        self.canonical_name = canonical_name
        self.width_bits = width_bits

    def __str__(self) -> str:
        return self.canonical_name

    @property
    def hex_length(self) -> int:
        """Number of hex characters in a rendered digest."""
        return self.width_bits // 4

    @classmethod
    def from_name(cls, name: str | Algorithm) -> Algorithm:
        """Look up an algorithm by canonical name, ignoring case.

        Raises:
            UnsupportedAlgorithm: If no algorithm has that name
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper()
        for algorithm in cls:
            if algorithm.canonical_name == key:
                return algorithm
        raise UnsupportedAlgorithm(str(name))

    @classmethod
    def names(cls) -> list[str]:
        return [algorithm.canonical_name for algorithm in cls]

    def new_hasher(self) -> Hasher:
        """Return a fresh single-use hasher for this algorithm."""
        return Hasher(self, _BACKENDS[self]())

    def is_valid_digest(self, digest: str) -> bool:
        """Check that ``digest`` is lowercase hex of this algorithm's width."""
        return len(digest) == self.hex_length and bool(_HEX_DIGEST.fullmatch(digest))


_BACKENDS: Mapping[Algorithm, Callable[[], DigestBackend]] = MappingProxyType(
    {
        Algorithm.SHA1: hashlib.sha1,
        Algorithm.SHA2_256: hashlib.sha256,
        Algorithm.SHA2_512: hashlib.sha512,
        Algorithm.SHA3_256: hashlib.sha3_256,
        Algorithm.SHA3_512: hashlib.sha3_512,
        Algorithm.BLAKE: Blake512,
        Algorithm.BLAKE2: partial(hashlib.blake2b, digest_size=64),
        Algorithm.CRC8: partial(CrcChecksum, CRC8_SMBUS),
        Algorithm.CRC16: partial(CrcChecksum, CRC16_ARC),
        Algorithm.CRC32: partial(CrcChecksum, CRC32_ISO_HDLC),
        Algorithm.CRC64: partial(CrcChecksum, CRC64_XZ),
        Algorithm.MD5: hashlib.md5,
        Algorithm.XOR8: Xor8,
    }
)


class Hasher:
    """Single-use streaming hasher.

    ``update`` may be called any number of times; ``finalize`` ends the
    hasher's life and further calls to either raise ``RuntimeError``.
    """

    def __init__(self, algorithm: Algorithm, backend: DigestBackend):
        self.algorithm = algorithm
        self._backend: DigestBackend | None = backend

    @property
    def width_bits(self) -> int:
        return self.algorithm.width_bits

    @property
    def finalized(self) -> bool:
        return self._backend is None

    def update(self, data: bytes) -> None:
        if self._backend is None:
            raise RuntimeError(f"{self.algorithm} hasher already finalized")
        self._backend.update(data)

    def finalize(self) -> Digest:
        if self._backend is None:
            raise RuntimeError(f"{self.algorithm} hasher already finalized")
        backend, self._backend = self._backend, None
        raw = backend.digest()
        if len(raw) * 8 != self.algorithm.width_bits:
            raise RuntimeError(
                f"{self.algorithm} produced {len(raw) * 8} bits, "
                f"expected {self.algorithm.width_bits}"
            )
        return Digest(raw.hex())


def new_hasher(algorithm: str | Algorithm) -> Hasher:
    """Resolve ``algorithm`` by name and return a fresh hasher for it."""
    return Algorithm.from_name(algorithm).new_hasher()
