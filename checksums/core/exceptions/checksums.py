"""Exceptions raised by the checksum engine.

Every error carries the context a caller needs to render a useful message
(path, line number, algorithm name) and the exit code the CLI reports for it.
The engine itself never catches these; only the CLI layer does.
"""

from __future__ import annotations

from pathlib import Path

from checksums.core.constants import ExitCode


class ChecksumsError(Exception):
    """Base exception for checksum engine errors."""

    exit_code: ExitCode = ExitCode.IO_ERROR


class UnsupportedAlgorithm(ChecksumsError):
    """Raised when an algorithm name is not in the registry."""

    exit_code = ExitCode.USAGE_ERROR

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported algorithm: {name!r}")


class FileUnreadable(ChecksumsError):
    """Raised when a file or directory cannot be opened or read.

    This occurs when:
    - The file disappears or is not readable when it is opened
    - An I/O error interrupts a streaming read
    - A directory under the hashed root cannot be listed
    """

    exit_code = ExitCode.IO_ERROR

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


class OutputExists(ChecksumsError):
    """Raised when a manifest destination exists and overwrite was not granted."""

    exit_code = ExitCode.IO_ERROR

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(
            f"Output file {self.path} already exists (use --force to overwrite)"
        )


class WriteFailed(ChecksumsError):
    """Raised when a manifest cannot be written."""

    exit_code = ExitCode.IO_ERROR

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write {self.path}: {reason}")


class ManifestPathRequired(ChecksumsError):
    """Raised when no default manifest name can be derived for a root.

    The default is named after the hashed directory, so a root without a
    name (the filesystem root) needs an explicit manifest path.
    """

    exit_code = ExitCode.USAGE_ERROR

    def __init__(self, root: str | Path):
        self.root = Path(root)
        super().__init__(
            f"Cannot derive a manifest name for {self.root}; "
            "pass the manifest path explicitly (-f FILE)"
        )


class ManifestNotFound(ChecksumsError):
    """Raised when the manifest to verify against does not exist."""

    exit_code = ExitCode.MANIFEST_INVALID

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"Manifest not found: {self.path}")


class ManifestCorrupt(ChecksumsError):
    """Raised when a manifest line cannot be parsed.

    This occurs when:
    - The header does not name a supported algorithm
    - A line does not have exactly two tab-separated fields
    - A digest is not lowercase hex or has the wrong length for the algorithm
    - A path appears twice
    """

    exit_code = ExitCode.MANIFEST_INVALID

    def __init__(self, line: int, reason: str, source: str | Path | None = None):
        self.line = line
        self.reason = reason
        self.source = Path(source) if source is not None else None
        location = f"{self.source}:{line}" if self.source is not None else f"line {line}"
        super().__init__(f"Corrupt manifest at {location}: {reason}")


class AlgorithmMismatch(ChecksumsError):
    """Raised when two sides of an operation use different algorithms."""

    exit_code = ExitCode.ALGORITHM_MISMATCH

    def __init__(self, expected: object, actual: object):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Algorithm mismatch: expected {_name(expected)}, got {_name(actual)}"
        )


def _name(algorithm: object) -> str:
    return getattr(algorithm, "canonical_name", str(algorithm))
