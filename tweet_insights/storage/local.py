"""Local directory storage, one sub-directory per bucket."""

from __future__ import annotations

import logging
from pathlib import Path

from tweet_insights.common.errors import StorageError

logger = logging.getLogger(__name__)


class LocalStorage:
    """Stores objects as files below a root directory."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def path(self, bucket: str, key: str) -> Path:
        path = (self.root / bucket / key).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise StorageError("Key escapes storage root", bucket, key)
        return path

    async def get_object(self, bucket: str, key: str) -> bytes:
        try:
            return self.path(bucket, key).read_bytes()
        except OSError as e:
            raise StorageError(f"Failed to read object: {e}", bucket, key) from e

    async def put_object(
        self, bucket: str, key: str, body: bytes, content_type: str | None = None
    ) -> None:
        path = self.path(bucket, key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(body)
        except OSError as e:
            raise StorageError(f"Failed to write object: {e}", bucket, key) from e
        logger.info("Wrote %d bytes to %s", len(body), path)
