"""Data model shared by the tree hasher, manifest codec and comparator."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from checksums.hashing.algorithms import Algorithm, Digest


@dataclass(frozen=True)
class HashEntry:
    """Digest of one file, keyed by its path relative to the hashed root."""

    path: str
    digest: Digest
    algorithm: Algorithm


class Manifest:
    """Ordered mapping of relative path to ``HashEntry`` for one algorithm.

    Entries keep insertion order, which is traversal order for manifests built
    from disk and file order for manifests read back from storage.
    """

    def __init__(
        self, algorithm: str | Algorithm, entries: Iterable[HashEntry] = ()
    ) -> None:
        self.algorithm = Algorithm.from_name(algorithm)
        self._entries: dict[str, HashEntry] = {}
        for entry in entries:
            self.add_entry(entry)

    @classmethod
    def from_digests(
        cls, algorithm: str | Algorithm, digests: dict[str, str]
    ) -> Manifest:
        manifest = cls(algorithm)
        for path, digest in digests.items():
            manifest.add(path, digest)
        return manifest

    def add(self, path: str, digest: str) -> HashEntry:
        """Add a digest for ``path``.

        Raises:
            ValueError: If the path is empty or already present, or the
                digest is not valid for the manifest's algorithm
        """
        entry = HashEntry(path=path, digest=Digest(digest), algorithm=self.algorithm)
        self.add_entry(entry)
        return entry

    def add_entry(self, entry: HashEntry) -> None:
        if entry.algorithm is not self.algorithm:
            raise ValueError(
                f"Entry for {entry.path} uses {entry.algorithm}, "
                f"manifest uses {self.algorithm}"
            )
        if not entry.path:
            raise ValueError("Manifest paths cannot be empty")
        if entry.path in self._entries:
            raise ValueError(f"Duplicate manifest path: {entry.path}")
        if not self.algorithm.is_valid_digest(entry.digest):
            raise ValueError(
                f"Invalid {self.algorithm} digest for {entry.path}: {entry.digest!r}"
            )
        self._entries[entry.path] = entry

    def get(self, path: str) -> HashEntry | None:
        return self._entries.get(path)

    def digests(self) -> dict[str, Digest]:
        """Return a plain ``path -> digest`` dict in manifest order."""
        return {path: entry.digest for path, entry in self._entries.items()}

    def entries(self) -> list[HashEntry]:
        return list(self._entries.values())

    def paths(self) -> list[str]:
        return list(self._entries)

    def __getitem__(self, path: str) -> HashEntry:
        return self._entries[path]

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Manifest):
            return NotImplemented
        return self.algorithm is other.algorithm and self.digests() == other.digests()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Manifest(algorithm={self.algorithm}, entries={len(self)})"


class Outcome(Enum):
    """Per-path reconciliation result."""

    MATCHING = "matching"
    """Present on both sides with equal digests."""

    MISMATCHING = "mismatching"
    """Present on both sides with different digests."""

    MISSING = "missing"
    """Listed in the loaded manifest but absent on disk."""

    EXTRA = "extra"
    """Present on disk but not listed in the loaded manifest."""


@dataclass(frozen=True)
class PathComparison:
    """Outcome for a single path, with the digest seen on each side."""

    path: str
    outcome: Outcome
    expected: Digest | None = None
    actual: Digest | None = None


@dataclass(frozen=True)
class VerificationVerdict:
    """Aggregate result of reconciling a fresh manifest against a loaded one."""

    algorithm: Algorithm
    comparisons: tuple[PathComparison, ...] = ()
    ignored: tuple[str, ...] = ()
    allow_extra: bool = False
    label: str | None = None

    @property
    def counts(self) -> dict[Outcome, int]:
        counts = Counter({outcome: 0 for outcome in Outcome})
        counts.update(c.outcome for c in self.comparisons)
        return dict(counts)

    def count(self, outcome: Outcome) -> int:
        return sum(1 for c in self.comparisons if c.outcome is outcome)

    def with_outcome(self, outcome: Outcome) -> list[PathComparison]:
        return [c for c in self.comparisons if c.outcome is outcome]

    @property
    def all_matched(self) -> bool:
        """True when nothing differs or is missing.

        Extra files fail verification unless ``allow_extra`` is set; they are
        reported either way.
        """
        if self.count(Outcome.MISMATCHING) or self.count(Outcome.MISSING):
            return False
        return self.allow_extra or not self.count(Outcome.EXTRA)
