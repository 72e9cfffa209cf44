"""Athena catalog configuration."""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import Field, field_validator

from tweet_insights.common.config import BaseConfig


class CatalogConfig(BaseConfig):
    """Where and how result tables are created."""

    region: str = Field(
        default="eu-central-1",
        description="AWS region",
    )
    database: str = Field(
        ...,
        description="Database name",
        pattern=r"^[a-z0-9_]+$",
    )
    workgroup: str = Field(
        default="primary",
        description="Athena workgroup",
        min_length=1,
    )
    output_location: str = Field(
        ...,
        description="S3 location for query results",
    )
    timeout: int = Field(
        default=60,
        description="Query timeout in seconds",
        ge=1,
        le=600,
    )
    poll_interval: float = Field(
        default=1.0,
        description="Poll interval in seconds",
        gt=0,
        le=10,
    )

    @field_validator("output_location")
    @classmethod
    def validate_s3_location(cls, v: str) -> str:
        """Validate S3 location."""
        result = urlparse(v)
        if result.scheme != "s3":
            raise ValueError("Must be an S3 URL (s3://...)")
        if not result.netloc:
            raise ValueError("Must specify bucket name")
        return v
