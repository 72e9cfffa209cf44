"""Analyzer types."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tweet_insights.storage.types import ObjectLocation


class AnalysisSummary(BaseModel):
    """Outcome of analyzing one chunk object."""

    location: ObjectLocation
    records: int = Field(default=0, description="Records read from the chunk")
    lines: dict[str, int] = Field(
        default_factory=dict,
        description="Result lines per analysis kind",
    )
    keys: dict[str, str] = Field(
        default_factory=dict,
        description="Written result key per analysis kind",
    )
    failed: list[str] = Field(
        default_factory=list,
        description="Analysis kinds that raised",
    )

    @property
    def ok(self) -> bool:
        return not self.failed
