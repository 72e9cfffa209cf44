"""Pytest configuration."""

from unittest.mock import AsyncMock

import pytest
from mocks import MockStore

from tweet_insights.common import RetryConfig
from tweet_insights.model import RecordSchema

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def retry() -> RetryConfig:
    """Retry policy without waiting."""
    return RetryConfig(max_attempts=3, wait_min=0, wait_max=0)


@pytest.fixture
def schema() -> RecordSchema:
    return RecordSchema()


@pytest.fixture
def store() -> MockStore:
    return MockStore()


@pytest.fixture
def s3_client():
    """Mock S3 client."""
    client = AsyncMock()
    return client
