"""Storage configuration."""

from __future__ import annotations

import os

from pydantic import Field, model_validator

from tweet_insights.common.config import BaseConfig


class StorageConfig(BaseConfig):
    """S3 connection settings."""

    region: str = Field(
        default="eu-central-1",
        description="AWS region",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom S3 endpoint",
    )

    @model_validator(mode="before")
    @classmethod
    def validate_region(cls, values: dict) -> dict:
        if not isinstance(values, dict) or values.get("region"):
            return values
        if region := os.getenv("AWS_REGION"):
            values["region"] = region
        return values
