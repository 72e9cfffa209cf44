"""Findings and result schema tests."""

import json

import pytest

from tweet_insights.model import (
    EntityFinding,
    EntityResult,
    KeyPhraseFinding,
    KeyPhraseResult,
    ResultKind,
    SentimentFinding,
    SentimentResult,
    TweetRecord,
)

RECORD = TweetRecord(tweet_id="7", created_at="2019-03-01 10:00:00", text="Loving S3 today")


def test_sentiment_from_comprehend():
    finding = SentimentFinding.from_comprehend(
        {
            "Index": 0,
            "Sentiment": "POSITIVE",
            "SentimentScore": {"Positive": 0.9, "Negative": 0.02, "Neutral": 0.07, "Mixed": 0.01},
        }
    )

    assert finding.sentiment == "POSITIVE"
    assert (finding.positive, finding.negative, finding.neutral, finding.mixed) == (
        0.9,
        0.02,
        0.07,
        0.01,
    )


def test_entity_and_phrase_from_comprehend():
    entity = EntityFinding.from_comprehend(
        {"Score": 0.99, "Type": "TITLE", "Text": "S3", "BeginOffset": 7, "EndOffset": 9}
    )
    key_phrase = KeyPhraseFinding.from_comprehend({"Score": 0.95, "Text": "S3 today"})

    assert entity == EntityFinding(text="S3", score=0.99, type="TITLE")
    assert key_phrase == KeyPhraseFinding(text="S3 today", score=0.95)


def test_sentiment_result_is_one_line():
    finding = SentimentFinding(
        sentiment="NEUTRAL", positive=0.1, negative=0.1, mixed=0.1, neutral=0.7
    )

    (result,) = SentimentResult.flatten(RECORD, finding)

    assert json.loads(result.model_dump_json()) == {
        "tweet_id": "7",
        "tweet_text": "Loving S3 today",
        "tweet_date": "2019-03-01 10:00:00",
        "sentiment": "NEUTRAL",
        "positive_score": 0.1,
        "negative_score": 0.1,
        "mixed_score": 0.1,
        "neutral_score": 0.7,
    }


def test_entity_results_one_per_finding():
    findings = [EntityFinding(text="S3", score=0.9, type="TITLE")] * 3

    assert len(EntityResult.flatten(RECORD, findings)) == 3
    assert EntityResult.flatten(RECORD, []) == []


def test_key_phrase_result_uses_entity_field():
    (result,) = KeyPhraseResult.flatten(RECORD, [KeyPhraseFinding(text="S3 today", score=0.5)])

    assert result.model_dump() == {
        "tweet_id": "7",
        "tweet_text": "Loving S3 today",
        "tweet_date": "2019-03-01 10:00:00",
        "entity": "S3 today",
        "score": 0.5,
    }


def test_scores_are_bounded():
    with pytest.raises(ValueError):
        EntityFinding(text="x", score=1.5, type="OTHER")


@pytest.mark.parametrize(
    "kind, folder, model",
    [
        (ResultKind.SENTIMENT, "sentiment", SentimentResult),
        (ResultKind.ENTITIES, "entities", EntityResult),
        (ResultKind.KEY_PHRASES, "keyphrases", KeyPhraseResult),
    ],
)
def test_result_kinds(kind, folder, model):
    assert kind.folder == folder
    assert kind.result_model is model
    assert ResultKind(folder) is kind
