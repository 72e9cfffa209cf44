"""Comprehend configuration."""

from __future__ import annotations

import os

from pydantic import Field, model_validator

from tweet_insights.common.config import BaseConfig

# Comprehend accepts at most 25 documents per batch call
MAX_BATCH_SIZE = 25


class AnalysisConfig(BaseConfig):
    """Text analysis configuration."""

    region: str = Field(
        default="eu-central-1",
        description="AWS region",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom Comprehend endpoint",
    )
    language_code: str = Field(
        default="en",
        description="Language of every submitted text",
        min_length=2,
    )
    max_batch_size: int = Field(
        default=MAX_BATCH_SIZE,
        description="Documents per service call",
        ge=1,
        le=MAX_BATCH_SIZE,
    )

    @model_validator(mode="before")
    @classmethod
    def validate_region(cls, values: dict) -> dict:
        if not isinstance(values, dict) or values.get("region"):
            return values
        if region := os.getenv("AWS_REGION"):
            values["region"] = region
        return values
