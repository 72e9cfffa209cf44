"""Record analyzer configuration."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import ConfigDict, Field, field_validator, model_validator

from tweet_insights.common.config import BaseConfig
from tweet_insights.model.record import RecordSchema
from tweet_insights.model.results import ResultKind


class AnalyzerConfig(BaseConfig):
    """Configuration for turning one chunk into result objects."""

    model_config = ConfigDict(populate_by_name=True)

    result_bucket: str = Field(
        default=...,
        description="Bucket receiving result objects",
        min_length=1,
    )
    result_prefix: str = Field(
        default="",
        description="Folder prepended to every result key",
    )
    kinds: list[ResultKind] = Field(
        default_factory=lambda: list(ResultKind),
        description="Analysis kinds to run, in order",
        min_length=1,
    )
    naming: Literal["random", "deterministic"] = Field(
        default="random",
        description="Random names, or names derived from the chunk key",
    )
    timeout: float = Field(
        default=60.0,
        description="Wall-clock budget per chunk in seconds",
        gt=0,
        le=900,
    )
    record_schema: RecordSchema = Field(
        default_factory=RecordSchema,
        alias="schema",
        description="Column layout of the chunks",
    )

    @model_validator(mode="before")
    @classmethod
    def validate_bucket(cls, values: dict) -> dict:
        if not isinstance(values, dict) or values.get("result_bucket"):
            return values
        if not (bucket := os.getenv("RESULT_BUCKET")):
            raise ValueError("result_bucket or RESULT_BUCKET must be set")
        values["result_bucket"] = bucket
        return values

    @field_validator("kinds")
    @classmethod
    def validate_kinds(cls, v: list[ResultKind]) -> list[ResultKind]:
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate analysis kinds: {v}")
        return v
