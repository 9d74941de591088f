"""BLAKE-512, the SHA-3 finalist that preceded BLAKE2.

hashlib ships BLAKE2 but not the original BLAKE, so the 512-bit variant is
implemented here: 16 rounds over 64-bit words, 128-byte blocks, zero salt.
The object mirrors the hashlib interface (``update``/``digest``/``hexdigest``).
"""

import struct

MASK64 = 0xFFFFFFFFFFFFFFFF

BLOCK_SIZE = 128
DIGEST_SIZE = 64
ROUNDS = 16

# Initial chaining value (shared with SHA-512)
IV = (
    0x6A09E667F3BCC908,
    0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1,
    0x510E527FADE682D1,
    0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B,
    0x5BE0CD19137E2179,
)

# Leading fractional digits of pi
U = (
    0x243F6A8885A308D3,
    0x13198A2E03707344,
    0xA4093822299F31D0,
    0x082EFA98EC4E6C89,
    0x452821E638D01377,
    0xBE5466CF34E90C6C,
    0xC0AC29B7C97C50DD,
    0x3F84D5B5B5470917,
    0x9216D5D98979FB1B,
    0xD1310BA698DFB5AC,
    0x2FFD72DBD01ADFB7,
    0xB8E1AFED6A267E96,
    0xBA7C9045F12C7F99,
    0x24A19947B3916CF7,
    0x0801F2E2858EFC16,
    0x636920D871574E69,
)

SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
)

# (a, b, c, d) state indices for the four column steps, then the four diagonals
_G_INDICES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def _rotr64(x: int, n: int) -> int:
    return ((x >> n) | (x << (64 - n))) & MASK64


class Blake512:
    """Streaming BLAKE-512 hash object."""

    name = "blake512"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self, data: bytes = b""):
        self._h = list(IV)
        self._buffer = bytearray()
        # Message bits already compressed
        self._counter = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Absorb ``data``, compressing every complete block."""
        self._buffer += data
        offset = 0
        while len(self._buffer) - offset >= BLOCK_SIZE:
            self._counter += BLOCK_SIZE * 8
            self._h = _compress(
                self._h, self._buffer[offset : offset + BLOCK_SIZE], self._counter
            )
            offset += BLOCK_SIZE
        if offset:
            del self._buffer[:offset]

    def copy(self) -> "Blake512":
        other = Blake512()
        other._h = list(self._h)
        other._buffer = bytearray(self._buffer)
        other._counter = self._counter
        return other

    def digest(self) -> bytes:
        """Return the digest of the data absorbed so far.

        Padding is ``msg || 1 || 0* || 1 || len128``. A final block holding no
        message bits is compressed with a zero counter.
        """
        h = list(self._h)
        tail = bytes(self._buffer)
        remaining = len(tail)
        bit_length = self._counter + remaining * 8
        length = (bit_length & ((1 << 128) - 1)).to_bytes(16, "big")

        if remaining == BLOCK_SIZE - 17:
            h = _compress(h, tail + b"\x81" + length, bit_length)
        elif remaining < BLOCK_SIZE - 17:
            block = tail + b"\x80" + bytes(BLOCK_SIZE - 18 - remaining) + b"\x01" + length
            h = _compress(h, block, bit_length if remaining else 0)
        else:
            h = _compress(h, tail + b"\x80" + bytes(BLOCK_SIZE - 1 - remaining), bit_length)
            h = _compress(h, bytes(BLOCK_SIZE - 17) + b"\x01" + length, 0)

        return struct.pack(">8Q", *h)

    def hexdigest(self) -> str:
        return self.digest().hex()


def _compress(h: list[int], block: bytes | bytearray, counter: int) -> list[int]:
    m = struct.unpack(">16Q", bytes(block))
    t0 = counter & MASK64
    t1 = (counter >> 64) & MASK64
    v = list(h) + [
        U[0],
        U[1],
        U[2],
        U[3],
        t0 ^ U[4],
        t0 ^ U[5],
        t1 ^ U[6],
        t1 ^ U[7],
    ]

    for rnd in range(ROUNDS):
        s = SIGMA[rnd % 10]
        for i, (a, b, c, d) in enumerate(_G_INDICES):
            x = s[2 * i]
            y = s[2 * i + 1]
            v[a] = (v[a] + v[b] + (m[x] ^ U[y])) & MASK64
            v[d] = _rotr64(v[d] ^ v[a], 32)
            v[c] = (v[c] + v[d]) & MASK64
            v[b] = _rotr64(v[b] ^ v[c], 25)
            v[a] = (v[a] + v[b] + (m[y] ^ U[x])) & MASK64
            v[d] = _rotr64(v[d] ^ v[a], 16)
            v[c] = (v[c] + v[d]) & MASK64
            v[b] = _rotr64(v[b] ^ v[c], 11)

    return [h[i] ^ v[i] ^ v[i + 8] for i in range(8)]
