"""Services for hashing trees, storing manifests and comparing them."""

from .comparator import compare_manifests
from .comparison_report import render_comparison
from .manifest_codec import read_manifest, write_manifest
from .tree_hasher import TreeHasher, hash_tree

__all__ = [
    "TreeHasher",
    "compare_manifests",
    "hash_tree",
    "read_manifest",
    "render_comparison",
    "write_manifest",
]
