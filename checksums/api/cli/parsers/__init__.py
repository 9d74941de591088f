"""Argument parser utilities for the checksums CLI."""

from .common_arguments import add_common_arguments, add_config_arguments
from .main_parser import create_main_parser

__all__ = [
    "add_common_arguments",
    "add_config_arguments",
    "create_main_parser",
]
