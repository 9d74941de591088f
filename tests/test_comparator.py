"""Tests for manifest reconciliation."""

import copy

import pytest

from checksums.core.exceptions import AlgorithmMismatch
from checksums.core.types import Manifest, Outcome, VerificationVerdict
from checksums.hashing.algorithms import Algorithm
from checksums.services.comparator import compare_manifests


def _crc8(digests: dict[str, str]) -> Manifest:
    return Manifest.from_digests(Algorithm.CRC8, digests)


def _outcomes(verdict: VerificationVerdict) -> dict[str, Outcome]:
    return {c.path: c.outcome for c in verdict.comparisons}


class TestClassification:
    """Each path lands in exactly one outcome."""

    def test_all_matching(self):
        fresh = _crc8({"a": "01", "b": "02"})
        loaded = _crc8({"a": "01", "b": "02"})
        verdict = compare_manifests(fresh, loaded)

        assert _outcomes(verdict) == {"a": Outcome.MATCHING, "b": Outcome.MATCHING}
        assert verdict.all_matched

    def test_mixed_outcomes(self):
        fresh = _crc8({"a": "01", "b": "ff", "d": "04"})
        loaded = _crc8({"a": "01", "b": "02", "c": "03"})
        verdict = compare_manifests(fresh, loaded)

        assert _outcomes(verdict) == {
            "a": Outcome.MATCHING,
            "b": Outcome.MISMATCHING,
            "c": Outcome.MISSING,
            "d": Outcome.EXTRA,
        }
        assert not verdict.all_matched

    def test_digests_recorded_per_side(self):
        fresh = _crc8({"b": "ff", "d": "04"})
        loaded = _crc8({"b": "02", "c": "03"})
        by_path = {c.path: c for c in compare_manifests(fresh, loaded).comparisons}

        assert (by_path["b"].expected, by_path["b"].actual) == ("02", "ff")
        assert (by_path["c"].expected, by_path["c"].actual) == ("03", None)
        assert (by_path["d"].expected, by_path["d"].actual) == (None, "04")

    def test_manifest_against_itself(self):
        m = _crc8({"x": "10", "y/z": "20"})
        verdict = compare_manifests(m, m)
        assert verdict.count(Outcome.MATCHING) == len(m)
        assert verdict.all_matched

    def test_both_empty(self):
        verdict = compare_manifests(_crc8({}), _crc8({}))
        assert verdict.comparisons == ()
        assert verdict.all_matched

    def test_everything_missing(self):
        verdict = compare_manifests(_crc8({}), _crc8({"a": "01", "b": "02"}))
        assert [c.outcome for c in verdict.comparisons] == [Outcome.MISSING] * 2
        assert not verdict.all_matched

    def test_lexicographic_order(self):
        fresh = _crc8({"z": "01", "B": "02", "a/b": "03"})
        loaded = _crc8({"m": "04", "a": "05"})
        verdict = compare_manifests(fresh, loaded)
        assert [c.path for c in verdict.comparisons] == ["B", "a", "a/b", "m", "z"]

    def test_inputs_not_modified(self):
        fresh = _crc8({"a": "01", "b": "ff"})
        loaded = _crc8({"a": "01", "c": "03"})
        before = (copy.deepcopy(fresh.digests()), copy.deepcopy(loaded.digests()))

        compare_manifests(fresh, loaded)

        assert (fresh.digests(), loaded.digests()) == before


class TestPolicy:
    """Test extra-file policy and ignored paths."""

    def test_extra_fails_by_default(self):
        verdict = compare_manifests(_crc8({"a": "01", "new": "02"}), _crc8({"a": "01"}))
        assert verdict.count(Outcome.EXTRA) == 1
        assert not verdict.all_matched

    def test_extra_allowed(self):
        verdict = compare_manifests(
            _crc8({"a": "01", "new": "02"}), _crc8({"a": "01"}), allow_extra=True
        )
        assert verdict.with_outcome(Outcome.EXTRA)[0].path == "new"
        assert verdict.all_matched

    def test_allow_extra_does_not_excuse_missing(self):
        verdict = compare_manifests(
            _crc8({"new": "02"}), _crc8({"a": "01"}), allow_extra=True
        )
        assert not verdict.all_matched

    def test_ignored_paths(self):
        fresh = _crc8({"a": "01", "tree.hash": "aa"})
        loaded = _crc8({"a": "01"})
        verdict = compare_manifests(fresh, loaded, ignore=["tree.hash", "not-there"])

        assert [c.path for c in verdict.comparisons] == ["a"]
        assert verdict.ignored == ("tree.hash",)
        assert verdict.all_matched

    def test_label_carried(self):
        m = _crc8({"a": "01"})
        assert compare_manifests(m, m, label="sums.hash").label == "sums.hash"

    def test_algorithm_mismatch(self):
        fresh = Manifest.from_digests(Algorithm.MD5, {})
        loaded = Manifest.from_digests(Algorithm.SHA1, {})
        with pytest.raises(AlgorithmMismatch) as exc_info:
            compare_manifests(fresh, loaded)
        assert exc_info.value.expected is Algorithm.SHA1
        assert exc_info.value.actual is Algorithm.MD5
        assert "expected SHA1, got MD5" in str(exc_info.value)


class TestVerdictCounts:
    """Test the aggregate counters."""

    def test_counts_cover_every_outcome(self):
        verdict = compare_manifests(
            _crc8({"a": "01", "b": "ff", "d": "04"}),
            _crc8({"a": "01", "b": "02", "c": "03"}),
        )
        assert verdict.counts == {
            Outcome.MATCHING: 1,
            Outcome.MISMATCHING: 1,
            Outcome.MISSING: 1,
            Outcome.EXTRA: 1,
        }

    def test_counts_zero_filled(self):
        m = _crc8({"a": "01"})
        counts = compare_manifests(m, m).counts
        assert counts[Outcome.MISSING] == 0
        assert set(counts) == set(Outcome)
