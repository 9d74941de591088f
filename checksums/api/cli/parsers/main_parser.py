"""Main argument parser for the checksums CLI."""

import argparse
from pathlib import Path

from checksums import __version__

from .common_arguments import add_common_arguments, add_config_arguments


def create_main_parser() -> argparse.ArgumentParser:
    """Create the checksums argument parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="checksums",
        description="Tool for making/verifying checksums of directory trees.",
        epilog=(
            "Verify the current directory against DIRECTORY.hash with no options; "
            "create it with -c (add --force to replace an existing file)."
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "directory",
        metavar="DIRECTORY",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory to create/verify hashes for (default: current directory)",
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-c",
        "--create",
        action="store_true",
        help="Create directory hashes, rather than verifying them",
    )
    mode_group.add_argument(
        "-v",
        "--verify",
        action="store_true",
        help="Verify directory hashes (default)",
    )

    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        metavar="FILE",
        help='Hashes file to write or verify against (default: "DIRECTORY.hash")',
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite FILE in --create mode. No meaning in --verify mode",
    )

    add_config_arguments(parser, ["hashing"])
    add_common_arguments(parser)
    return parser
