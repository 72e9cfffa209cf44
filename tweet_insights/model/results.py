"""Flat result records written for downstream queries."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from tweet_insights.model.findings import EntityFinding, KeyPhraseFinding, SentimentFinding
from tweet_insights.model.record import TweetRecord


class BaseResult(BaseModel):
    """Fields carried back from the originating tweet for joins."""

    model_config = ConfigDict(frozen=True)

    tweet_id: str
    tweet_text: str
    tweet_date: str

    @staticmethod
    def _tweet_fields(record: TweetRecord) -> dict[str, str]:
        return {
            "tweet_id": record.tweet_id,
            "tweet_text": record.text,
            "tweet_date": record.created_at,
        }


class SentimentResult(BaseResult):
    """Sentiment of one tweet."""

    sentiment: str
    positive_score: float
    negative_score: float
    mixed_score: float
    neutral_score: float

    @classmethod
    def flatten(cls, record: TweetRecord, finding: SentimentFinding) -> list[SentimentResult]:
        return [
            cls(
                **cls._tweet_fields(record),
                sentiment=finding.sentiment,
                positive_score=finding.positive,
                negative_score=finding.negative,
                mixed_score=finding.mixed,
                neutral_score=finding.neutral,
            )
        ]


class EntityResult(BaseResult):
    """One entity found in a tweet."""

    entity: str
    score: float
    type: str

    @classmethod
    def flatten(cls, record: TweetRecord, findings: list[EntityFinding]) -> list[EntityResult]:
        return [
            cls(**cls._tweet_fields(record), entity=f.text, score=f.score, type=f.type)
            for f in findings
        ]


class KeyPhraseResult(BaseResult):
    """One key phrase found in a tweet."""

    entity: str = Field(..., description="Phrase text")
    score: float

    @classmethod
    def flatten(
        cls, record: TweetRecord, findings: list[KeyPhraseFinding]
    ) -> list[KeyPhraseResult]:
        return [cls(**cls._tweet_fields(record), entity=f.text, score=f.score) for f in findings]


class ResultKind(str, Enum):
    """Analysis kinds; the value is the result folder."""

    SENTIMENT = "sentiment"
    ENTITIES = "entities"
    KEY_PHRASES = "keyphrases"

    @property
    def folder(self) -> str:
        return self.value

    @property
    def result_model(self) -> type[BaseResult]:
        return {
            ResultKind.SENTIMENT: SentimentResult,
            ResultKind.ENTITIES: EntityResult,
            ResultKind.KEY_PHRASES: KeyPhraseResult,
        }[self]
