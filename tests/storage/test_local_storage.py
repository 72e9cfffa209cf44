"""Local storage tests."""

import pytest

from tweet_insights.common import StorageError
from tweet_insights.storage import LocalStorage, ObjectStore


@pytest.mark.asyncio
async def test_put_and_get(tmp_path):
    storage = LocalStorage(tmp_path)

    await storage.put_object("staging", "input/tweets_0.csv", b"id\n1\n")

    assert (tmp_path / "staging" / "input" / "tweets_0.csv").read_bytes() == b"id\n1\n"
    assert await storage.get_object("staging", "input/tweets_0.csv") == b"id\n1\n"
    assert isinstance(storage, ObjectStore)


@pytest.mark.asyncio
async def test_missing_object(tmp_path):
    with pytest.raises(StorageError):
        await LocalStorage(tmp_path).get_object("staging", "missing.csv")


@pytest.mark.asyncio
async def test_key_cannot_escape_root(tmp_path):
    storage = LocalStorage(tmp_path / "root")

    with pytest.raises(StorageError, match="escapes"):
        await storage.put_object("staging", "../../outside.csv", b"x")
