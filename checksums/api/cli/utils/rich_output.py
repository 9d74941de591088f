"""Rich-based output formatting utilities for checksums CLI commands."""

import os
import sys

from rich.console import Console
from rich.markup import escape


# Constants for fallback message prefixes
class MessagePrefixes:
    """Constants for consistent message prefixes in fallback mode."""

    INFO = "[INFO]"
    SUCCESS = "[SUCCESS]"
    WARN = "[WARN]"
    ERROR = "[ERROR]"
    DEBUG = "[DEBUG]"


class RichOutputFormatter:
    """Terminal UI formatter using Rich, with a plain-text fallback."""

    def __init__(self, verbose: bool = False):
        """Initialize Rich output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose
        self._terminal_compatible = self._check_terminal_compatibility()
        self.console = Console() if self._terminal_compatible else None
        self.err_console = Console(stderr=True) if self._terminal_compatible else None

    def _check_terminal_compatibility(self) -> bool:
        """Check if terminal supports Rich formatting."""
        if os.environ.get("CHECKSUMS_NO_RICH"):
            return False

        if not sys.stdout.isatty():
            return False

        # Skip Rich for very basic terminals
        return os.environ.get("TERM", "") not in ("dumb", "unknown")

    def _safe_print(self, message: str, fallback: str, stderr: bool = False) -> None:
        """Print Rich markup, or ``fallback`` as plain text when Rich is off."""
        console = self.err_console if stderr else self.console
        if self._terminal_compatible and console is not None:
            console.print(message, highlight=False)
            return

        print(fallback, file=sys.stderr if stderr else sys.stdout)

    def info(self, message: str) -> None:
        """Print an info message."""
        self._safe_print(
            f"[blue][INFO][/blue] {escape(message)}", f"{MessagePrefixes.INFO} {message}"
        )

    def success(self, message: str) -> None:
        """Print a success message."""
        self._safe_print(
            f"[green][SUCCESS][/green] {escape(message)}",
            f"{MessagePrefixes.SUCCESS} {message}",
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._safe_print(
            f"[yellow][WARN][/yellow] {escape(message)}",
            f"{MessagePrefixes.WARN} {message}",
            stderr=True,
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._safe_print(
            f"[red][ERROR][/red] {escape(message)}",
            f"{MessagePrefixes.ERROR} {message}",
            stderr=True,
        )

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            self._safe_print(
                f"[cyan][DEBUG][/cyan] {escape(message)}",
                f"{MessagePrefixes.DEBUG} {message}",
            )

    def output_consoles(self) -> tuple[Console, Console]:
        """Consoles for table output, plain when Rich formatting is disabled."""
        if self._terminal_compatible and self.console and self.err_console:
            return self.console, self.err_console
        return (
            Console(no_color=True, highlight=False),
            Console(stderr=True, no_color=True, highlight=False),
        )
