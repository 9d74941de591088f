"""Common CLI argument patterns shared across parsers."""

import argparse


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add logging and verbosity arguments.

    Args:
        parser: Argument parser to add common arguments to
    """
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Enable file logging to specified path",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set file logging level (default: INFO)",
    )


def add_config_arguments(parser: argparse.ArgumentParser, configs: list[str]) -> None:
    """Add CLI arguments for specified config sections.

    Args:
        parser: Argument parser to add config arguments to
        configs: List of config section names to include
    """
    if "hashing" in configs:
        from checksums.core.config.hashing_config import HashingConfig

        HashingConfig.add_cli_arguments(parser)
