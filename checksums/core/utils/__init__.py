"""Core utilities package."""

from .path_utils import normalize_relative_path, relative_label

__all__ = [
    "normalize_relative_path",
    "relative_label",
]
