"""Findings returned by the text analysis service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SentimentFinding(BaseModel):
    """Sentiment label and scores for one text."""

    sentiment: str = Field(..., description="POSITIVE, NEGATIVE, NEUTRAL or MIXED")
    positive: float = Field(..., ge=0.0, le=1.0)
    negative: float = Field(..., ge=0.0, le=1.0)
    mixed: float = Field(..., ge=0.0, le=1.0)
    neutral: float = Field(..., ge=0.0, le=1.0)

    @classmethod
    def from_comprehend(cls, item: dict[str, Any]) -> SentimentFinding:
        scores = item.get("SentimentScore", {})
        return cls(
            sentiment=item["Sentiment"],
            positive=scores.get("Positive", 0.0),
            negative=scores.get("Negative", 0.0),
            mixed=scores.get("Mixed", 0.0),
            neutral=scores.get("Neutral", 0.0),
        )


class EntityFinding(BaseModel):
    """One named entity detected in a text."""

    text: str
    score: float = Field(..., ge=0.0, le=1.0)
    type: str

    @classmethod
    def from_comprehend(cls, item: dict[str, Any]) -> EntityFinding:
        return cls(text=item["Text"], score=item["Score"], type=item["Type"])


class KeyPhraseFinding(BaseModel):
    """One key phrase detected in a text."""

    text: str
    score: float = Field(..., ge=0.0, le=1.0)

    @classmethod
    def from_comprehend(cls, item: dict[str, Any]) -> KeyPhraseFinding:
        return cls(text=item["Text"], score=item["Score"])
