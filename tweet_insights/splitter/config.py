"""Batch splitter configuration."""

from __future__ import annotations

from pydantic import Field

from tweet_insights.common.config import BaseConfig


class SplitterConfig(BaseConfig):
    """Configuration for splitting a tweet CSV into chunk objects."""

    chunk_size: int = Field(
        default=25,
        description="Data rows per chunk",
        ge=1,
    )
    prefix: str = Field(
        default="tweets",
        description="Chunk name prefix, chunks are named {prefix}_{index}.csv",
        min_length=1,
    )
    key_prefix: str = Field(
        default="",
        description="Folder prepended to every chunk key",
    )
    bucket: str | None = Field(
        default=None,
        description="Destination bucket",
    )
    encoding: str = Field(
        default="utf-8",
        description="Source file encoding",
    )
