"""Verify command module - re-hashes a tree and compares it with a manifest."""

import argparse

from loguru import logger

from checksums.core.config.config import Config
from checksums.core.constants import ExitCode
from checksums.core.exceptions import AlgorithmMismatch
from checksums.core.utils.path_utils import relative_label
from checksums.ops import (
    compare_hashes,
    create_hashes,
    default_manifest_path,
    read_hashes,
    render_comparison,
)

from ..utils.rich_output import RichOutputFormatter


def verify_command(
    args: argparse.Namespace, config: Config, formatter: RichOutputFormatter
) -> ExitCode:
    """Execute verify mode.

    The tree is hashed with the algorithm the manifest declares. An
    ``--algorithm`` given on the command line must agree with it.

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

    algorithm, loaded = read_hashes(manifest_path)
    if getattr(args, "algorithm", None) and hashing.algorithm is not algorithm:
        raise AlgorithmMismatch(algorithm, hashing.algorithm)

    formatter.verbose_info(
        f"Verifying {root} against {manifest_path} ({len(loaded)} {algorithm} hashes)"
    )
    fresh = create_hashes(root, algorithm, hashing.depth, chunk_size=hashing.chunk_size)

    label = relative_label(manifest_path, root)
    verdict = compare_hashes(label, fresh, loaded, allow_extra=hashing.allow_extra)
    logger.debug(f"Verdict for {manifest_path}: all_matched={verdict.all_matched}")

    console, err_console = formatter.output_consoles()
    return render_comparison(verdict, console, err_console)


__all__ = ["verify_command"]
