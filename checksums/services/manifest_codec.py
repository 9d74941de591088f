"""Manifest file format.

A manifest is UTF-8 text. The first line names the algorithm; each further
line is ``<relative path><TAB><lowercase hex digest>``::

    SHA1
    docs/readme.txt\tda39a3ee5e6b4b0d3255bfef95601890afd80709

Trailing blank lines are ignored. Anything else that does not parse is a hard
failure naming the offending line.
"""

import os
from pathlib import Path

from loguru import logger

from checksums.core.constants import (
    MANIFEST_ENCODING,
    MANIFEST_ERRORS,
    MANIFEST_SEPARATOR,
)
from checksums.core.exceptions import (
    FileUnreadable,
    ManifestCorrupt,
    ManifestNotFound,
    OutputExists,
    UnsupportedAlgorithm,
    WriteFailed,
)
from checksums.core.types import Manifest
from checksums.hashing.algorithms import Algorithm

_FORBIDDEN_PATH_CHARS = (MANIFEST_SEPARATOR, "\n", "\r")


def format_manifest(manifest: Manifest) -> str:
    """Render a manifest in the on-disk text format.

    Raises:
        ValueError: If a path contains a tab or line break
    """
    lines = [manifest.algorithm.canonical_name]
    for entry in manifest.entries():
        if any(ch in entry.path for ch in _FORBIDDEN_PATH_CHARS):
            raise ValueError(f"Path cannot be stored in a manifest: {entry.path!r}")
        lines.append(f"{entry.path}{MANIFEST_SEPARATOR}{entry.digest}")
    return "\n".join(lines) + "\n"


def parse_manifest(text: str, source: str | Path | None = None) -> Manifest:
    """Parse manifest text.

    Args:
        text: Manifest content with universal newlines already applied
        source: File the text came from, used in error messages

    Raises:
        ManifestCorrupt: On the first malformed line
    """
    lines = text.split("\n")
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines:
        raise ManifestCorrupt(1, "missing algorithm header", source)

    header = lines[0].strip()
    try:
        algorithm = Algorithm.from_name(header)
    except UnsupportedAlgorithm as e:
        raise ManifestCorrupt(1, f"unsupported algorithm {header!r}", source) from e

    manifest = Manifest(algorithm)
    for lineno, line in enumerate(lines[1:], start=2):
        fields = line.split(MANIFEST_SEPARATOR)
        if len(fields) != 2:
            raise ManifestCorrupt(
                lineno,
                f"expected 2 tab-separated fields, found {len(fields)}",
                source,
            )
        path, digest = fields
        if not path:
            raise ManifestCorrupt(lineno, "empty path", source)
        if path in manifest:
            raise ManifestCorrupt(lineno, f"duplicate path {path!r}", source)
        if not algorithm.is_valid_digest(digest):
            if len(digest) != algorithm.hex_length:
                reason = (
                    f"digest has {len(digest)} hex digits, "
                    f"{algorithm} requires {algorithm.hex_length}"
                )
            else:
                reason = f"digest is not lowercase hex: {digest!r}"
            raise ManifestCorrupt(lineno, reason, source)
        manifest.add(path, digest)

    return manifest


def read_manifest(source: str | Path) -> Manifest:
    """Load a manifest from disk.

    Raises:
        ManifestNotFound: If the file does not exist
        FileUnreadable: If the file exists but cannot be read
        ManifestCorrupt: If the content does not parse
    """
    source_path = Path(source)
    try:
        with open(
            source_path, encoding=MANIFEST_ENCODING, errors=MANIFEST_ERRORS
        ) as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ManifestNotFound(source_path) from e
    except OSError as e:
        raise FileUnreadable(source_path, e.strerror or str(e)) from e

    manifest = parse_manifest(text, source_path)
    logger.info(
        f"Loaded {len(manifest)} {manifest.algorithm} hashes from {source_path}"
    )
    return manifest


def write_manifest(
    manifest: Manifest, destination: str | Path, *, overwrite: bool = False
) -> Path:
    """Persist a manifest.

    Without ``overwrite`` the destination is created exclusively, so an
    existing file is never clobbered. With ``overwrite`` the content goes to a
    sibling temporary file that then replaces the destination.

    Raises:
        OutputExists: If the destination exists and overwrite is False
        WriteFailed: If the manifest cannot be rendered or written
    """
    destination_path = Path(destination)
    try:
        content = format_manifest(manifest)
    except ValueError as e:
        raise WriteFailed(destination_path, str(e)) from e

    if overwrite:
        _replace_file(destination_path, content)
    else:
        _create_file(destination_path, content)

    logger.info(
        f"Wrote {len(manifest)} {manifest.algorithm} hashes to {destination_path}"
    )
    return destination_path


def _create_file(path: Path, content: str) -> None:
    try:
        f = open(path, "x", encoding=MANIFEST_ENCODING, errors=MANIFEST_ERRORS)
    except FileExistsError as e:
        raise OutputExists(path) from e
    except OSError as e:
        raise WriteFailed(path, e.strerror or str(e)) from e

    try:
        with f:
            f.write(content)
    except OSError as e:
        path.unlink(missing_ok=True)
        raise WriteFailed(path, e.strerror or str(e)) from e


def _replace_file(path: Path, content: str) -> None:
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        with open(tmp, "w", encoding=MANIFEST_ENCODING, errors=MANIFEST_ERRORS) as f:
            f.write(content)
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise WriteFailed(path, e.strerror or str(e)) from e
