"""S3 object storage."""

from __future__ import annotations

import logging
from typing import Any

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from tweet_insights.common.component import ComponentFactory
from tweet_insights.common.config import RetryConfig
from tweet_insights.common.errors import StorageError
from tweet_insights.common.retry import error_code, retrying
from tweet_insights.storage.config import StorageConfig

logger = logging.getLogger(__name__)


class S3Storage(ComponentFactory[StorageConfig]):
    """Reads and writes whole objects in S3."""

    _config_type = StorageConfig

    def __init__(
        self,
        config: StorageConfig,
        retry: RetryConfig | None = None,
        session: aioboto3.Session | None = None,
    ) -> None:
        """Initialize storage."""
        super().__init__(config)
        self.retry = retry or RetryConfig()
        self._session = session

    @property
    def session(self) -> aioboto3.Session:
        """Lazy load session."""
        if self._session is None:
            self._session = aioboto3.Session(region_name=self.config.region)
        return self._session

    def _client(self) -> Any:
        return self.session.client("s3", endpoint_url=self.config.endpoint_url)

    async def _get(self, bucket: str, key: str) -> bytes:
        async with self._client() as client:
            response = await client.get_object(Bucket=bucket, Key=key)
            return await response["Body"].read()

    async def _put(self, bucket: str, key: str, body: bytes, content_type: str | None) -> None:
        kwargs = {"ContentType": content_type} if content_type else {}
        async with self._client() as client:
            await client.put_object(Bucket=bucket, Key=key, Body=body, **kwargs)

    async def get_object(self, bucket: str, key: str) -> bytes:
        """Read an object."""
        logger.debug("Reading s3://%s/%s", bucket, key)
        try:
            body = await retrying(self.retry)(self._get, bucket, key)
        except ClientError as e:
            raise StorageError(f"Failed to read object: {error_code(e)}", bucket, key) from e
        except BotoCoreError as e:
            raise StorageError(f"Failed to read object: {e}", bucket, key) from e

        logger.info("Read %d bytes from s3://%s/%s", len(body), bucket, key)
        return body

    async def put_object(
        self, bucket: str, key: str, body: bytes, content_type: str | None = None
    ) -> None:
        """Write an object."""
        logger.debug("Writing %d bytes to s3://%s/%s", len(body), bucket, key)
        try:
            await retrying(self.retry)(self._put, bucket, key, body, content_type)
        except ClientError as e:
            raise StorageError(f"Failed to write object: {error_code(e)}", bucket, key) from e
        except BotoCoreError as e:
            raise StorageError(f"Failed to write object: {e}", bucket, key) from e

        logger.info("Wrote %d bytes to s3://%s/%s", len(body), bucket, key)
