"""Hashing configuration for checksums.

Configuration can be provided via:
- Environment variables (CHECKSUMS_*)
- CLI arguments
- Default values
"""

import argparse
import os
from typing import Any

from pydantic import BaseModel, Field, field_validator

from checksums.core.constants import DEFAULT_CHUNK_SIZE
from checksums.core.exceptions import UnsupportedAlgorithm
from checksums.hashing.algorithms import Algorithm

_INFINITE_DEPTH_WORDS = {"inf", "infinite", "infinity", "unlimited"}


class HashingConfig(BaseModel):
    """How a tree is hashed and how verification results are judged."""

    algorithm: Algorithm = Field(
        default=Algorithm.SHA1, description="Digest algorithm (case-insensitive name)"
    )
    depth: int | None = Field(
        default=0,
        ge=0,
        description="Maximum recursion depth below the root (None = infinite)",
    )
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE, gt=0, description="Read size in bytes per chunk"
    )
    allow_extra: bool = Field(
        default=False,
        description="Treat files missing from the manifest as informational",
    )

    @field_validator("algorithm", mode="before")
    @classmethod
    def validate_algorithm(cls, v: Any) -> Algorithm:
        """Resolve algorithm names through the registry."""
        try:
            return Algorithm.from_name(v)
        except UnsupportedAlgorithm:
            raise ValueError(
                f"Unsupported algorithm '{v}'. Must be one of: {', '.join(Algorithm.names())}"
            )

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add hashing-related CLI arguments."""
        parser.add_argument(
            "-a",
            "--algorithm",
            type=str,
            metavar="ALGORITHM",
            help=(
                "Hashing algorithm to use. Supported algorithms: "
                f"{', '.join(Algorithm.names())} (default: SHA1, or the "
                "manifest's algorithm when verifying)"
            ),
        )

        depth_group = parser.add_mutually_exclusive_group()
        depth_group.add_argument(
            "-d",
            "--depth",
            type=int,
            metavar="DEPTH",
            help="Max recursion depth (default: 0, files directly in DIRECTORY only)",
        )
        depth_group.add_argument(
            "-r",
            "--recursive",
            action="store_true",
            help="Set max recursion depth to infinity",
        )

        parser.add_argument(
            "--allow-extra",
            action="store_true",
            help="Do not fail verification for files absent from the manifest",
        )
        parser.add_argument(
            "--chunk-size",
            type=int,
            help=f"Read size in bytes (default: {DEFAULT_CHUNK_SIZE})",
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load hashing config from environment variables."""
        config: dict[str, Any] = {}
        if algorithm := os.getenv("CHECKSUMS_ALGORITHM"):
            config["algorithm"] = algorithm
        if depth := os.getenv("CHECKSUMS_DEPTH"):
            if depth.strip().lower() in _INFINITE_DEPTH_WORDS:
                config["depth"] = None
            else:
                config["depth"] = depth
        if chunk_size := os.getenv("CHECKSUMS_CHUNK_SIZE"):
            config["chunk_size"] = chunk_size
        if allow_extra := os.getenv("CHECKSUMS_ALLOW_EXTRA"):
            config["allow_extra"] = allow_extra.lower() in ("true", "1", "yes")
        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract hashing config overrides from CLI arguments."""
        overrides: dict[str, Any] = {}
        if getattr(args, "algorithm", None):
            overrides["algorithm"] = args.algorithm
        if getattr(args, "recursive", False):
            overrides["depth"] = None
        elif getattr(args, "depth", None) is not None:
            overrides["depth"] = args.depth
        if getattr(args, "chunk_size", None) is not None:
            overrides["chunk_size"] = args.chunk_size
        if getattr(args, "allow_extra", False):
            overrides["allow_extra"] = True
        return overrides
