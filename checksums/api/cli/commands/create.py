"""Create command module - hashes a tree and stores the manifest."""

import argparse

from loguru import logger

from checksums.core.config.config import Config
from checksums.core.constants import ExitCode
from checksums.core.exceptions import OutputExists
from checksums.core.utils.path_utils import relative_label
from checksums.ops import create_hashes, default_manifest_path, write_hashes

from ..utils.rich_output import RichOutputFormatter


def create_command(
    args: argparse.Namespace, config: Config, formatter: RichOutputFormatter
) -> ExitCode:
    """Execute create mode.

    Args:
        args: Parsed command-line arguments
        config: Pre-validated configuration instance
        formatter: Output formatter for user-facing messages

    Returns:
        Exit code for the process
    """
    root = args.directory
    manifest_path = args.file or default_manifest_path(root)
    hashing = config.hashing

    # Fail before hashing anything; the write below is still exclusive
    if manifest_path.exists() and not args.force:
        raise OutputExists(manifest_path)

    # A manifest stored inside the tree must not list itself
    label = relative_label(manifest_path, root)
    if label:
        logger.debug(f"Excluding manifest {label} from hashes")

    formatter.verbose_info(
        f"Hashing {root} with {hashing.algorithm} "
        f"(depth: {'infinite' if hashing.depth is None else hashing.depth})"
    )
    hashes = create_hashes(
        root,
        hashing.algorithm,
        hashing.depth,
        ignore=(label,) if label else (),
        chunk_size=hashing.chunk_size,
    )
    written = write_hashes(manifest_path, hashing.algorithm, hashes, overwrite=args.force)

    formatter.success(f"Wrote {len(hashes)} {hashing.algorithm} hashes to {written}")
    return ExitCode.SUCCESS


__all__ = ["create_command"]
