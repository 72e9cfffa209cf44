"""Lambda handler tests."""

import json
from unittest.mock import AsyncMock

import pytest
from mocks import HEADER, client_error, make_rows, make_session, to_csv

import handler
from tweet_insights.common import PartialAnalysisError

CONFIG = """
logging:
  level: INFO
retry:
  max_attempts: 2
  wait_min: 0
  wait_max: 0
analyzer:
  result_bucket: results
  naming: deterministic
"""

EVENT = {
    "Records": [
        {
            "eventSource": "aws:s3",
            "s3": {"bucket": {"name": "staging"}, "object": {"key": "tweets_0.csv"}},
        }
    ]
}


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG)
    monkeypatch.setenv("TWEET_INSIGHTS_CONFIG", str(path))
    monkeypatch.setattr(handler, "_config", None)
    return path


@pytest.fixture
def s3():
    client = AsyncMock()
    stream = AsyncMock()
    stream.read.return_value = to_csv(HEADER, make_rows(2)).encode("utf-8")
    client.get_object.return_value = {"Body": stream}
    return client


@pytest.fixture
def comprehend():
    client = AsyncMock()
    client.batch_detect_sentiment.return_value = {
        "ResultList": [
            {
                "Index": i,
                "Sentiment": "POSITIVE",
                "SentimentScore": {"Positive": 0.7, "Negative": 0.1, "Neutral": 0.1, "Mixed": 0.1},
            }
            for i in range(2)
        ],
        "ErrorList": [],
    }
    client.batch_detect_entities.return_value = {
        "ResultList": [
            {"Index": 0, "Entities": [{"Score": 0.9, "Type": "ORGANIZATION", "Text": "AWS"}]},
            {"Index": 1, "Entities": []},
        ],
        "ErrorList": [],
    }
    client.batch_detect_key_phrases.return_value = {
        "ResultList": [{"Index": i, "KeyPhrases": []} for i in range(2)],
        "ErrorList": [],
    }
    return client


@pytest.fixture
def session(mocker, s3, comprehend):
    session = make_session(s3=s3, comprehend=comprehend)
    mocker.patch("aioboto3.Session", return_value=session)
    return session


def test_lambda_handler(config_file, session, s3):
    response = handler.lambda_handler(EVENT, None)

    assert response["statusCode"] == 200
    (summary,) = json.loads(response["body"])
    assert summary["location"] == {"bucket": "staging", "key": "tweets_0.csv"}
    assert summary["lines"] == {"sentiment": 2, "entities": 1, "keyphrases": 0}
    assert set(summary["keys"]) == {"sentiment", "entities", "keyphrases"}

    s3.get_object.assert_awaited_once_with(Bucket="staging", Key="tweets_0.csv")
    written = {c.kwargs["Key"]: c.kwargs for c in s3.put_object.await_args_list}
    assert set(written) == set(summary["keys"].values())
    assert all(w["Bucket"] == "results" for w in written.values())


def test_lambda_handler_reraises(config_file, session, comprehend):
    comprehend.batch_detect_entities.side_effect = client_error("AccessDeniedException")

    with pytest.raises(PartialAnalysisError):
        handler.lambda_handler(EVENT, None)


def test_config_loaded_once(config_file, session):
    first = handler.load_config()
    config_file.write_text("unknown: 1\n")

    assert handler.load_config() is first
