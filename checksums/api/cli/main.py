"""Command-line entry point for checksums."""

import argparse
import sys
from typing import Any

from loguru import logger
from pydantic import ValidationError

from checksums.core.config.config import Config
from checksums.core.constants import ExitCode
from checksums.core.exceptions import ChecksumsError

from .commands import create_command, verify_command
from .parsers import create_main_parser
from .utils.rich_output import RichOutputFormatter

CONSOLE_FORMAT = "<level>{level: <8}</level> | {message}"


def setup_logging(verbose: bool = False, config: Any | None = None) -> None:
    """Configure loguru sinks.

    Console output goes to stderr at the configured console level, or DEBUG
    when verbose. File logging is added when enabled in the config.

    Args:
        verbose: Whether to log everything to the console
        config: ``Config``, ``LoggingConfig`` or None
    """
    logger.remove()

    logging_config = getattr(config, "logging", config)
    console_level = "WARNING"
    if logging_config is not None:
        console_level = logging_config.console_level
    if verbose:
        console_level = "DEBUG"

    logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT)

    if logging_config is not None and logging_config.is_enabled():
        file_config = logging_config.file
        logger.add(
            file_config.path,
            level=file_config.level,
            rotation=file_config.rotation,
            retention=file_config.retention,
            format=file_config.format,
        )


def run(args: argparse.Namespace) -> int:
    """Run the parsed command and return the process exit code."""
    formatter = RichOutputFormatter(verbose=args.verbose)

    try:
        config = Config.from_sources(args)
    except ValidationError as e:
        for error in e.errors():
            formatter.error(error["msg"])
        return ExitCode.USAGE_ERROR

    setup_logging(verbose=args.verbose, config=config)

    try:
        if args.create:
            return create_command(args, config, formatter)
        return verify_command(args, config, formatter)
    except ChecksumsError as e:
        formatter.error(str(e))
        logger.opt(exception=e).debug("Command failed")
        return e.exit_code


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run, and exit with the resulting code."""
    parser = create_main_parser()
    args = parser.parse_args(argv)
    sys.exit(int(run(args)))


if __name__ == "__main__":
    main()
