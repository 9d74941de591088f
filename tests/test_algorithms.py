"""Tests for the digest algorithm registry."""

import hashlib
import zlib

import pytest

from checksums.core.exceptions import UnsupportedAlgorithm
from checksums.hashing.algorithms import Algorithm, Hasher, new_hasher

EMPTY_DIGESTS = {
    Algorithm.SHA1: "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    Algorithm.SHA2_256: "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    Algorithm.SHA2_512: (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    ),
    Algorithm.SHA3_256: "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a",
    Algorithm.SHA3_512: (
        "a69f73cca23a9ac5c8b567dc185a756e97c982164fe25859e0d1dcc1475c80a6"
        "15b2123af1f5f94c11e3e9402c3ac558f500199d95b6d3e301758586281dcd26"
    ),
    Algorithm.BLAKE: (
        "a8cfbbd73726062df0c6864dda65defe58ef0cc52a5625090fa17601e1eecd1b"
        "628e94f396ae402a00acc9eab77b4d4c2e852aaaa25a636d80af3fc7913ef5b8"
    ),
    Algorithm.BLAKE2: (
        "786a02f742015903c6c6fd852552d272912f4740e15847618a86e217f71f5419"
        "d25e1031afee585313896444934eb04b903a685b1448b755d56f701afe9be2ce"
    ),
    Algorithm.CRC8: "00",
    Algorithm.CRC16: "0000",
    Algorithm.CRC32: "00000000",
    Algorithm.CRC64: "0000000000000000",
    Algorithm.MD5: "d41d8cd98f00b204e9800998ecf8427e",
    Algorithm.XOR8: "00",
}

# Catalogued check values for the ASCII string "123456789"
CHECK_VALUES = {
    Algorithm.CRC8: "f4",
    Algorithm.CRC16: "bb3d",
    Algorithm.CRC32: "cbf43926",
    Algorithm.CRC64: "995dc9bbdf1939fa",
    Algorithm.XOR8: "31",
}

EXPECTED_WIDTHS = {
    "SHA1": 160,
    "SHA2-256": 256,
    "SHA2-512": 512,
    "SHA3-256": 256,
    "SHA3-512": 512,
    "BLAKE": 512,
    "BLAKE2": 512,
    "CRC8": 8,
    "CRC16": 16,
    "CRC32": 32,
    "CRC64": 64,
    "MD5": 128,
    "XOR8": 8,
}


def _digest(algorithm: Algorithm, *chunks: bytes) -> str:
    hasher = algorithm.new_hasher()
    for chunk in chunks:
        hasher.update(chunk)
    return hasher.finalize()


class TestAlgorithmLookup:
    """Test name resolution and the closed algorithm set."""

    def test_registry_covers_every_algorithm(self):
        assert {a.canonical_name: a.width_bits for a in Algorithm} == EXPECTED_WIDTHS

    @pytest.mark.parametrize("name", ["sha2-256", "SHA2-256", "Sha2-256", "  sha2-256 "])
    def test_lookup_is_case_insensitive(self, name):
        assert Algorithm.from_name(name) is Algorithm.SHA2_256

    def test_lookup_accepts_member(self):
        assert Algorithm.from_name(Algorithm.MD5) is Algorithm.MD5

    @pytest.mark.parametrize("name", ["SHA256", "sha-1", "", "CRC128"])
    def test_unknown_name_raises(self, name):
        with pytest.raises(UnsupportedAlgorithm) as exc_info:
            Algorithm.from_name(name)
        assert exc_info.value.name == name

    def test_hex_length(self):
        assert Algorithm.SHA1.hex_length == 40
        assert Algorithm.CRC8.hex_length == 2
        assert Algorithm.SHA3_512.hex_length == 128

    def test_str_is_canonical_name(self):
        assert str(Algorithm.SHA3_256) == "SHA3-256"

    def test_is_valid_digest(self):
        assert Algorithm.CRC16.is_valid_digest("bb3d")
        assert not Algorithm.CRC16.is_valid_digest("BB3D")
        assert not Algorithm.CRC16.is_valid_digest("bb3")
        assert not Algorithm.CRC16.is_valid_digest("bb3g")


class TestHasherContract:
    """Test the uniform update/finalize contract."""

    @pytest.mark.parametrize("algorithm", list(Algorithm), ids=str)
    def test_empty_input_digest(self, algorithm):
        assert _digest(algorithm) == EMPTY_DIGESTS[algorithm]

    @pytest.mark.parametrize("algorithm", list(Algorithm), ids=str)
    def test_digest_width_is_fixed(self, algorithm):
        for data in (b"", b"x", b"y" * 1000):
            assert len(_digest(algorithm, data)) == algorithm.hex_length

    @pytest.mark.parametrize("algorithm", list(Algorithm), ids=str)
    def test_deterministic(self, algorithm):
        data = b"The quick brown fox jumps over the lazy dog"
        assert _digest(algorithm, data) == _digest(algorithm, data)

    @pytest.mark.parametrize("algorithm", list(Algorithm), ids=str)
    def test_chunking_transparency(self, algorithm):
        data = bytes(range(256)) * 3 + b"tail"
        whole = _digest(algorithm, data)
        pieces = [data[i : i + 37] for i in range(0, len(data), 37)]
        assert _digest(algorithm, *pieces) == whole
        assert _digest(algorithm, data[:1], b"", data[1:]) == whole

    @pytest.mark.parametrize(
        "algorithm", [a for a in Algorithm if a.width_bits >= 32], ids=str
    )
    def test_order_sensitive(self, algorithm):
        assert _digest(algorithm, b"ab", b"cd") != _digest(algorithm, b"cd", b"ab")

    @pytest.mark.parametrize("algorithm", sorted(CHECK_VALUES, key=str), ids=str)
    def test_check_values(self, algorithm):
        assert _digest(algorithm, b"123456789") == CHECK_VALUES[algorithm]

    def test_crc32_matches_zlib(self):
        data = b"checksums of directory trees" * 50
        assert _digest(Algorithm.CRC32, data) == f"{zlib.crc32(data):08x}"

    @pytest.mark.parametrize(
        "algorithm, factory",
        [
            (Algorithm.SHA1, hashlib.sha1),
            (Algorithm.SHA2_256, hashlib.sha256),
            (Algorithm.SHA2_512, hashlib.sha512),
            (Algorithm.SHA3_256, hashlib.sha3_256),
            (Algorithm.SHA3_512, hashlib.sha3_512),
            (Algorithm.MD5, hashlib.md5),
        ],
        ids=str,
    )
    def test_hashlib_backed_algorithms(self, algorithm, factory):
        data = b"abc" * 1000
        assert _digest(algorithm, data) == factory(data).hexdigest()

    def test_blake2_is_64_byte_blake2b(self):
        assert _digest(Algorithm.BLAKE2, b"abc") == hashlib.blake2b(b"abc").hexdigest()

    def test_each_lookup_returns_independent_instance(self):
        first = new_hasher("md5")
        second = new_hasher("MD5")
        assert first is not second
        first.update(b"only in first")
        assert second.finalize() == EMPTY_DIGESTS[Algorithm.MD5]

    def test_new_hasher_unknown_name(self):
        with pytest.raises(UnsupportedAlgorithm):
            new_hasher("whirlpool")

    def test_update_after_finalize_raises(self):
        hasher = Algorithm.SHA1.new_hasher()
        hasher.finalize()
        assert hasher.finalized
        with pytest.raises(RuntimeError, match="already finalized"):
            hasher.update(b"late")

    def test_double_finalize_raises(self):
        hasher = Algorithm.CRC32.new_hasher()
        hasher.finalize()
        with pytest.raises(RuntimeError, match="already finalized"):
            hasher.finalize()

    def test_hasher_reports_width(self):
        hasher = new_hasher("crc64")
        assert isinstance(hasher, Hasher)
        assert hasher.width_bits == 64

    def test_accepts_memoryview(self):
        data = bytearray(b"view me")
        for algorithm in Algorithm:
            assert _digest(algorithm, memoryview(data)) == _digest(algorithm, bytes(data))
