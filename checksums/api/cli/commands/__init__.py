"""CLI command handlers."""

from .create import create_command
from .verify import verify_command

__all__ = ["create_command", "verify_command"]
