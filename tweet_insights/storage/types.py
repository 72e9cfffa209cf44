"""Storage types."""

from __future__ import annotations

import logging
from typing import Any, Protocol
from urllib.parse import unquote_plus, urlparse

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import runtime_checkable

logger = logging.getLogger(__name__)


class ObjectLocation(BaseModel):
    """Bucket and key of one stored object."""

    model_config = ConfigDict(frozen=True)

    bucket: str = Field(..., min_length=1)
    key: str = Field(..., min_length=1)

    def __str__(self) -> str:
        return f"s3://{self.bucket}/{self.key}"

    @classmethod
    def from_url(cls, url: str) -> ObjectLocation:
        """Parse an s3://bucket/key URL."""
        result = urlparse(url)
        if result.scheme != "s3":
            raise ValueError(f"Must be an S3 URL (s3://...): {url}")
        return cls(bucket=result.netloc, key=result.path.lstrip("/"))

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> list[ObjectLocation]:
        """Extract object locations from an S3 put notification."""
        locations = []
        for record in event.get("Records", []):
            s3 = record.get("s3")
            if not s3:
                logger.warning("Skipping non-S3 event record: %s", record.get("eventSource"))
                continue
            # keys arrive URL-encoded, spaces as '+'
            locations.append(
                cls(bucket=s3["bucket"]["name"], key=unquote_plus(s3["object"]["key"]))
            )
        return locations


@runtime_checkable
class ObjectStore(Protocol):
    """Minimal object storage interface."""

    async def get_object(self, bucket: str, key: str) -> bytes:
        """Read an object."""
        ...

    async def put_object(
        self, bucket: str, key: str, body: bytes, content_type: str | None = None
    ) -> None:
        """Write an object."""
        ...
