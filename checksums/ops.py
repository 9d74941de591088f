"""Caller-facing operations for creating and verifying tree checksums.

These are the entry points the CLI uses::

    hashes = create_hashes(root, "SHA1", depth=0)
    write_hashes(default_manifest_path(root), "SHA1", hashes)

    algorithm, loaded = read_hashes(default_manifest_path(root))
    fresh = create_hashes(root, algorithm, depth=0)
    verdict = compare_hashes(None, fresh, loaded)
    exit_code = render_comparison(verdict)
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from checksums.core.constants import DEFAULT_CHUNK_SIZE, MANIFEST_SUFFIX
from checksums.core.exceptions import AlgorithmMismatch, ManifestPathRequired
from checksums.core.types import Manifest, VerificationVerdict
from checksums.hashing.algorithms import Algorithm
from checksums.services.comparator import compare_manifests
from checksums.services.comparison_report import render_comparison
from checksums.services.manifest_codec import read_manifest, write_manifest
from checksums.services.tree_hasher import hash_tree


def default_manifest_path(root: str | Path) -> Path:
    """Return ``<root>.hash`` beside the hashed directory.

    Raises:
        ManifestPathRequired: If the root has no name, e.g. ``/``
    """
    root_path = Path(root).resolve()
    if not root_path.name:
        raise ManifestPathRequired(root_path)
    return root_path.with_name(root_path.name + MANIFEST_SUFFIX)


def create_hashes(
    root: str | Path,
    algorithm: str | Algorithm,
    depth: int | None,
    *,
    ignore: Iterable[str] = (),
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Manifest:
    """Hash every regular file under ``root`` down to ``depth`` (None = no limit)."""
    return hash_tree(root, algorithm, depth, ignore=ignore, chunk_size=chunk_size)


def write_hashes(
    destination: str | Path,
    algorithm: str | Algorithm,
    manifest: Manifest,
    overwrite: bool = False,
) -> Path:
    """Store ``manifest`` at ``destination``.

    Raises:
        AlgorithmMismatch: If the manifest was built with another algorithm
        OutputExists: If the destination exists and overwrite is False
        WriteFailed: On I/O errors
    """
    algorithm = Algorithm.from_name(algorithm)
    if manifest.algorithm is not algorithm:
        raise AlgorithmMismatch(algorithm, manifest.algorithm)
    return write_manifest(manifest, destination, overwrite=overwrite)


def read_hashes(source: str | Path) -> tuple[Algorithm, Manifest]:
    """Load a stored manifest and the algorithm it declares."""
    manifest = read_manifest(source)
    return manifest.algorithm, manifest


def compare_hashes(
    root_label: str | None,
    fresh: Manifest,
    loaded: Manifest,
    *,
    allow_extra: bool = False,
) -> VerificationVerdict:
    """Compare fresh hashes against loaded ones.

    Args:
        root_label: Path of the stored manifest relative to the hashed root,
            or None when it lives outside the tree. A manifest stored inside
            the tree is reported as ignored rather than as an extra file.
        fresh: Hashes computed from disk
        loaded: Hashes read back with ``read_hashes``
        allow_extra: Whether files missing from ``loaded`` still pass
    """
    ignore = (root_label,) if root_label else ()
    return compare_manifests(
        fresh, loaded, allow_extra=allow_extra, ignore=ignore, label=root_label
    )


__all__ = [
    "compare_hashes",
    "create_hashes",
    "default_manifest_path",
    "read_hashes",
    "render_comparison",
    "write_hashes",
]
