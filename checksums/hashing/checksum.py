"""Non-cryptographic checksums exposed through the hashlib interface.

CRC variants are built on crcmod. Each parameter set names the catalogued
CRC model it implements; crcmod expects the polynomial with its top bit set
and an initial value equal to the CRC of the empty string.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from operator import xor

import crcmod


@dataclass(frozen=True)
class CrcParameters:
    """crcmod parameters for one CRC model."""

    model: str
    poly: int
    init_crc: int
    reflected: bool
    xor_out: int

    @property
    def width_bits(self) -> int:
        return self.poly.bit_length() - 1


CRC8_SMBUS = CrcParameters("CRC-8/SMBUS", 0x107, 0x00, False, 0x00)
CRC16_ARC = CrcParameters("CRC-16/ARC", 0x18005, 0x0000, True, 0x0000)
CRC32_ISO_HDLC = CrcParameters(
    "CRC-32/ISO-HDLC", 0x104C11DB7, 0x00000000, True, 0xFFFFFFFF
)
CRC64_XZ = CrcParameters(
    "CRC-64/XZ", 0x142F0E1EBA9EA3693, 0x0, True, 0xFFFFFFFFFFFFFFFF
)


class CrcChecksum:
    """Streaming CRC with a big-endian ``digest()``."""

    def __init__(self, params: CrcParameters):
        self.params = params
        self.name = params.model
        self.digest_size = params.width_bits // 8
        self._crc = crcmod.Crc(
            params.poly,
            initCrc=params.init_crc,
            rev=params.reflected,
            xorOut=params.xor_out,
        )

    def update(self, data: bytes) -> None:
        # crcmod's C extension only accepts read-only buffers
        self._crc.update(bytes(data))

    @property
    def value(self) -> int:
        return self._crc.crcValue

    def digest(self) -> bytes:
        return self.value.to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()


class Xor8:
    """Running XOR of every input byte."""

    name = "xor8"
    digest_size = 1

    def __init__(self) -> None:
        self.value = 0

    def update(self, data: bytes) -> None:
        self.value = reduce(xor, memoryview(data).cast("B"), self.value)

    def digest(self) -> bytes:
        return bytes((self.value,))

    def hexdigest(self) -> str:
        return self.digest().hex()
