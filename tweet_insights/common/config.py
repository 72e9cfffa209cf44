"""Common configuration classes."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tweet_insights.common.errors import ConfigurationError


class BaseConfig(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        from_attributes=True,
    )


class LoggerConfig(BaseConfig):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        description="Root log level",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format",
    )
    filename: str | None = Field(
        default=None,
        description="Optional rotating log file",
    )
    max_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Rotate log file after this many bytes",
        ge=1,
    )
    backup_count: int = Field(
        default=5,
        description="Number of rotated files to keep",
        ge=0,
    )

    def configure(self) -> None:
        """Setup logging based on configuration."""
        logging.basicConfig(level=self.level, format=self.format, force=True)

        # Add file handler if filename specified
        if self.filename:
            handler = RotatingFileHandler(
                filename=self.filename,
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
            )
            handler.setFormatter(logging.Formatter(self.format))
            logging.getLogger().addHandler(handler)


class RetryConfig(BaseConfig):
    """Retry policy for calls to AWS services."""

    max_attempts: int = Field(
        default=5,
        description="Attempts per call, including the first",
        ge=1,
        le=20,
    )
    wait_min: float = Field(
        default=1.0,
        description="Minimum backoff in seconds",
        ge=0.0,
    )
    wait_max: float = Field(
        default=20.0,
        description="Maximum backoff in seconds",
        ge=0.0,
    )


class RootConfig(BaseConfig):
    """Root configuration."""

    logging: LoggerConfig = Field(
        default_factory=LoggerConfig,
        description="Logging configuration",
    )
    retry: RetryConfig = Field(
        default_factory=RetryConfig,
        description="Retry configuration shared by AWS clients",
    )
    storage: dict[str, Any] = Field(
        default_factory=dict,
        description="Storage configuration",
    )
    analysis: dict[str, Any] = Field(
        default_factory=dict,
        description="Comprehend configuration",
    )
    analyzer: dict[str, Any] = Field(
        default_factory=dict,
        description="Record analyzer configuration",
    )
    splitter: dict[str, Any] = Field(
        default_factory=dict,
        description="Batch splitter configuration",
    )
    catalog: dict[str, Any] | None = Field(
        default=None,
        description="Athena catalog configuration",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> RootConfig:
        """Load and validate a YAML configuration file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigurationError(f"Config file not found: {path}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e


TConf = TypeVar("TConf", bound=BaseConfig)
