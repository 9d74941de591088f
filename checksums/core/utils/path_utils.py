"""Path utility functions for checksums."""

from pathlib import Path, PurePosixPath


def normalize_relative_path(input_path: str | Path, base_dir: Path | None = None) -> str:
    """Normalize a path to the form stored in manifests.

    Converts absolute paths to paths relative to ``base_dir`` and ensures
    forward slash separators so manifests are portable across platforms.

    Args:
        input_path: Path to normalize (absolute or relative)
        base_dir: Base directory for relative path calculation (required for absolute paths)

    Returns:
        Normalized relative path with forward slashes

    Raises:
        ValueError: If an absolute path is given without base_dir, or is not under base_dir
    """
    path_obj = Path(input_path)

    if not path_obj.is_absolute():
        # Collapse "./a//b" style input without touching the file system
        parts = [p for p in PurePosixPath(path_obj.as_posix()).parts if p != "."]
        return "/".join(parts)

    if base_dir is None:
        raise ValueError(
            f"Cannot normalize absolute path without base_dir: {input_path}"
        )

    resolved_base_dir = base_dir.resolve()
    try:
        return path_obj.resolve().relative_to(resolved_base_dir).as_posix()
    except ValueError:
        raise ValueError(
            f"Path {input_path} is not under base directory {base_dir}"
        ) from None


def relative_label(path: str | Path, base_dir: str | Path) -> str | None:
    """Return ``path`` relative to ``base_dir``, or None when it lies outside."""
    try:
        return normalize_relative_path(Path(path).absolute(), Path(base_dir))
    except ValueError:
        return None
