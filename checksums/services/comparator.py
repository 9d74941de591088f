"""Reconciliation of freshly computed hashes against a loaded manifest."""

from collections.abc import Iterable

from loguru import logger

from checksums.core.exceptions import AlgorithmMismatch
from checksums.core.types import (
    Manifest,
    Outcome,
    PathComparison,
    VerificationVerdict,
)


def compare_manifests(
    fresh: Manifest,
    loaded: Manifest,
    *,
    allow_extra: bool = False,
    ignore: Iterable[str] = (),
    label: str | None = None,
) -> VerificationVerdict:
    """Classify every path of either manifest in a single pass.

    Paths are visited in lexicographic order so reports are reproducible.
    Neither manifest is modified.

    Args:
        fresh: Hashes computed from the tree on disk
        loaded: Hashes read back from a stored manifest
        allow_extra: Whether files absent from ``loaded`` still pass
        ignore: Paths left out of the comparison on both sides
        label: Name of the stored manifest, carried through for reporting

    Returns:
        Verdict holding one ``PathComparison`` per compared path

    Raises:
        AlgorithmMismatch: If the manifests were built with different algorithms
    """
    if fresh.algorithm is not loaded.algorithm:
        raise AlgorithmMismatch(loaded.algorithm, fresh.algorithm)

    ignored = set(ignore)
    comparisons: list[PathComparison] = []

    for path in sorted((set(fresh) | set(loaded)) - ignored):
        actual = fresh.get(path)
        expected = loaded.get(path)

        if actual is None:
            outcome = Outcome.MISSING
        elif expected is None:
            outcome = Outcome.EXTRA
        elif actual.digest == expected.digest:
            outcome = Outcome.MATCHING
        else:
            outcome = Outcome.MISMATCHING

        if outcome is not Outcome.MATCHING:
            logger.debug(f"{outcome.value}: {path}")

        comparisons.append(
            PathComparison(
                path=path,
                outcome=outcome,
                expected=expected.digest if expected else None,
                actual=actual.digest if actual else None,
            )
        )

    verdict = VerificationVerdict(
        algorithm=loaded.algorithm,
        comparisons=tuple(comparisons),
        ignored=tuple(sorted(p for p in ignored if p in fresh or p in loaded)),
        allow_extra=allow_extra,
        label=label,
    )
    logger.info(
        "Comparison: "
        + ", ".join(f"{n} {o.value}" for o, n in verdict.counts.items())
    )
    return verdict
