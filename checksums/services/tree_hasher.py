"""Depth-bounded directory tree hashing.

Walks a directory in sorted name order and digests every regular file found
within the depth bound. Symbolic links and special files are never followed
or digested. Any unreadable file or directory aborts the whole walk: a
manifest with gaps is never returned.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from checksums.core.constants import DEFAULT_CHUNK_SIZE
from checksums.core.exceptions import FileUnreadable
from checksums.core.types import Manifest
from checksums.core.utils.path_utils import normalize_relative_path
from checksums.hashing.algorithms import Algorithm
from checksums.hashing.digester import digest_file


class TreeHasher:
    """Builds a ``Manifest`` for the current state of a directory tree.

    Depth is counted from the root (depth 0). Directories deeper than
    ``max_depth`` are not entered; ``max_depth=None`` removes the bound.
    """

    def __init__(
        self,
        algorithm: str | Algorithm,
        max_depth: int | None = 0,
        ignore: Iterable[str] = (),
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be >= 0 or None, got {max_depth}")
        self.algorithm = Algorithm.from_name(algorithm)
        self.max_depth = max_depth
        self.ignore = frozenset(normalize_relative_path(p) for p in ignore)
        self.chunk_size = chunk_size

    def hash(self, root: str | Path) -> Manifest:
        """Digest every regular file under ``root`` within the depth bound.

        Raises:
            FileUnreadable: If the root, a subdirectory or a file cannot be read
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise FileUnreadable(root_path, "not a directory")

        manifest = Manifest(self.algorithm)
        depth_label = "infinite" if self.max_depth is None else self.max_depth
        logger.info(
            f"Hashing {root_path} with {self.algorithm} (max depth {depth_label})"
        )
        self._hash_directory(root_path, "", 0, manifest)
        logger.info(f"Hashed {len(manifest)} files under {root_path}")
        return manifest

    def _hash_directory(
        self, directory: Path, prefix: str, depth: int, manifest: Manifest
    ) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise FileUnreadable(directory, e.strerror or str(e)) from e

        for entry in entries:
            relative = f"{prefix}{entry.name}"

            if entry.is_symlink():
                logger.debug(f"Skipping symlink: {relative}")
                continue

            if entry.is_dir(follow_symlinks=False):
                if self.max_depth is None or depth < self.max_depth:
                    self._hash_directory(
                        Path(entry.path), f"{relative}/", depth + 1, manifest
                    )
                else:
                    logger.debug(f"Not descending past max depth: {relative}")
                continue

            if not entry.is_file(follow_symlinks=False):
                logger.debug(f"Skipping special file: {relative}")
                continue

            if relative in self.ignore:
                logger.debug(f"Ignoring {relative}")
                continue

            manifest.add(
                relative, digest_file(entry.path, self.algorithm, self.chunk_size)
            )


def hash_tree(
    root: str | Path,
    algorithm: str | Algorithm,
    max_depth: int | None = 0,
    *,
    ignore: Iterable[str] = (),
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Manifest:
    """Hash a directory tree. See ``TreeHasher``."""
    return TreeHasher(algorithm, max_depth, ignore, chunk_size).hash(root)
