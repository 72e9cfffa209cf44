"""Comprehend client tests."""

from unittest.mock import AsyncMock

import pytest
from mocks import client_error, make_session

from tweet_insights.analysis import ComprehendClient
from tweet_insights.common import AnalysisError, ConfigurationError
from tweet_insights.model import EntityFinding, KeyPhraseFinding, ResultKind


def sentiment_item(index: int, label: str = "NEUTRAL") -> dict:
    return {
        "Index": index,
        "Sentiment": label,
        "SentimentScore": {"Positive": 0.1, "Negative": 0.1, "Neutral": 0.7, "Mixed": 0.1},
    }


def echo_sentiment(TextList, LanguageCode):
    """Label each document with its own text, results in reverse order."""
    items = [sentiment_item(i, text) for i, text in enumerate(TextList)]
    return {"ResultList": list(reversed(items)), "ErrorList": []}


@pytest.fixture
def comprehend():
    return AsyncMock()


@pytest.fixture
def client(comprehend, retry):
    return ComprehendClient.from_config(
        {"region": "us-east-1", "max_batch_size": 25},
        retry=retry,
        session=make_session(comprehend=comprehend),
    )


@pytest.mark.asyncio
async def test_sentiment_placed_by_index(client, comprehend):
    comprehend.batch_detect_sentiment.side_effect = echo_sentiment

    async with client:
        findings = await client.detect_sentiment(["a", "b", "c"])

    assert [f.sentiment for f in findings] == ["a", "b", "c"]
    comprehend.batch_detect_sentiment.assert_awaited_once_with(
        TextList=["a", "b", "c"], LanguageCode="en"
    )


@pytest.mark.asyncio
async def test_texts_sent_in_windows(client, comprehend):
    comprehend.batch_detect_sentiment.side_effect = echo_sentiment
    texts = [f"t{i}" for i in range(60)]

    async with client:
        findings = await client.detect_sentiment(texts)

    sizes = [len(c.kwargs["TextList"]) for c in comprehend.batch_detect_sentiment.await_args_list]
    assert sizes == [25, 25, 10]
    assert [f.sentiment for f in findings] == texts


@pytest.mark.asyncio
async def test_entities_and_key_phrases(client, comprehend):
    comprehend.batch_detect_entities.return_value = {
        "ResultList": [
            {"Index": 1, "Entities": []},
            {
                "Index": 0,
                "Entities": [
                    {"Score": 0.9, "Type": "ORGANIZATION", "Text": "AWS"},
                    {"Score": 0.8, "Type": "LOCATION", "Text": "Seattle"},
                ],
            },
        ],
        "ErrorList": [],
    }
    comprehend.batch_detect_key_phrases.return_value = {
        "ResultList": [
            {"Index": 0, "KeyPhrases": [{"Score": 0.7, "Text": "the cloud"}]},
            {"Index": 1, "KeyPhrases": []},
        ],
        "ErrorList": [],
    }

    async with client:
        entities = await client.analyze(ResultKind.ENTITIES, ["AWS in Seattle", "hi"])
        phrases = await client.analyze(ResultKind.KEY_PHRASES, ["the cloud", "hi"])

    assert entities == [
        [
            EntityFinding(text="AWS", score=0.9, type="ORGANIZATION"),
            EntityFinding(text="Seattle", score=0.8, type="LOCATION"),
        ],
        [],
    ]
    assert phrases == [[KeyPhraseFinding(text="the cloud", score=0.7)], []]


@pytest.mark.asyncio
async def test_language_code(comprehend, retry):
    client = ComprehendClient.from_config(
        {"language_code": "de"}, retry=retry, session=make_session(comprehend=comprehend)
    )
    comprehend.batch_detect_sentiment.side_effect = echo_sentiment

    async with client:
        await client.analyze(ResultKind.SENTIMENT, ["hallo"])

    assert comprehend.batch_detect_sentiment.await_args.kwargs["LanguageCode"] == "de"


@pytest.mark.asyncio
async def test_no_texts_no_call(client, comprehend):
    async with client:
        assert await client.analyze(ResultKind.SENTIMENT, []) == []

    comprehend.batch_detect_sentiment.assert_not_awaited()


@pytest.mark.asyncio
async def test_error_list_fails(client, comprehend):
    comprehend.batch_detect_sentiment.return_value = {
        "ResultList": [sentiment_item(0)],
        "ErrorList": [{"Index": 1, "ErrorCode": "TEXT_SIZE_LIMIT_EXCEEDED", "ErrorMessage": ""}],
    }

    async with client:
        with pytest.raises(AnalysisError, match="rejected 1 of 2") as info:
            await client.detect_sentiment(["ok", "x" * 6000])

    assert info.value.errors[0]["ErrorCode"] == "TEXT_SIZE_LIMIT_EXCEEDED"


@pytest.mark.asyncio
async def test_missing_result_fails(client, comprehend):
    comprehend.batch_detect_sentiment.return_value = {
        "ResultList": [sentiment_item(0)],
        "ErrorList": [],
    }

    async with client:
        with pytest.raises(AnalysisError, match="no result for 1"):
            await client.detect_sentiment(["a", "b"])


@pytest.mark.asyncio
async def test_unknown_index_fails(client, comprehend):
    comprehend.batch_detect_sentiment.return_value = {
        "ResultList": [sentiment_item(5)],
        "ErrorList": [],
    }

    async with client:
        with pytest.raises(AnalysisError, match="unknown index 5"):
            await client.detect_sentiment(["a"])


@pytest.mark.asyncio
async def test_throttling_is_retried(client, comprehend):
    comprehend.batch_detect_entities.side_effect = [
        client_error("ThrottlingException", "BatchDetectEntities"),
        {"ResultList": [{"Index": 0, "Entities": []}], "ErrorList": []},
    ]

    async with client:
        assert await client.detect_entities(["a"]) == [[]]

    assert comprehend.batch_detect_entities.await_count == 2


@pytest.mark.asyncio
async def test_permanent_error_is_not_retried(client, comprehend):
    comprehend.batch_detect_key_phrases.side_effect = client_error(
        "UnsupportedLanguageException", "BatchDetectKeyPhrases"
    )

    async with client:
        with pytest.raises(AnalysisError, match="UnsupportedLanguageException"):
            await client.detect_key_phrases(["a"])

    assert comprehend.batch_detect_key_phrases.await_count == 1


@pytest.mark.asyncio
async def test_requires_connection(client):
    with pytest.raises(RuntimeError, match="Not connected"):
        await client.detect_sentiment(["a"])


@pytest.mark.asyncio
async def test_close_releases_client(client):
    async with client:
        assert client._client is not None

    assert client._client is None


@pytest.mark.parametrize("size", [0, 26])
def test_batch_size_bounds(size):
    with pytest.raises(ConfigurationError):
        ComprehendClient.from_config({"max_batch_size": size})
