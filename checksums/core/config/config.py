"""Aggregate configuration for the checksums CLI.

Sources are merged in increasing precedence: defaults, environment, CLI.
"""

from typing import Any

from pydantic import BaseModel, Field

from .hashing_config import HashingConfig
from .logging_config import LoggingConfig


class Config(BaseModel):
    """Top-level configuration."""

    hashing: HashingConfig = Field(default_factory=HashingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_sources(cls, args: Any | None = None) -> "Config":
        """Build a config from the environment and parsed CLI arguments.

        Raises:
            pydantic.ValidationError: If any merged value is invalid
        """
        hashing: dict[str, Any] = HashingConfig.load_from_env()
        logging: dict[str, Any] = LoggingConfig.load_from_env()
        if args is not None:
            hashing.update(HashingConfig.extract_cli_overrides(args))
            logging.update(LoggingConfig.extract_cli_overrides(args) or {})
        return cls(hashing=HashingConfig(**hashing), logging=LoggingConfig(**logging))
