"""Amazon Comprehend client for batch text analysis."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AsyncExitStack
from typing import Any, TypeVar

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from tweet_insights.analysis.config import AnalysisConfig
from tweet_insights.common.component import ComponentFactory
from tweet_insights.common.config import RetryConfig
from tweet_insights.common.errors import AnalysisError
from tweet_insights.common.retry import error_code, retrying
from tweet_insights.model.findings import EntityFinding, KeyPhraseFinding, SentimentFinding
from tweet_insights.model.results import ResultKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ComprehendClient(ComponentFactory[AnalysisConfig]):
    """Runs Comprehend batch operations over ordered text lists.

    Every operation returns a list with one entry per submitted text, in
    submission order. Texts are sent in windows of ``max_batch_size``
    documents and each window's results are placed by their ``Index``.
    """

    _config_type = AnalysisConfig

    def __init__(
        self,
        config: AnalysisConfig,
        retry: RetryConfig | None = None,
        session: aioboto3.Session | None = None,
    ) -> None:
        """Initialize client."""
        super().__init__(config)
        self.retry = retry or RetryConfig()
        self._session = session
        self._client: Any | None = None
        self._stack: AsyncExitStack | None = None

    @property
    def session(self) -> aioboto3.Session:
        """Lazy load session."""
        if self._session is None:
            self._session = aioboto3.Session(region_name=self.config.region)
        return self._session

    async def connect(self) -> None:
        """Open the Comprehend client."""
        if self._client is not None:
            return
        self._stack = AsyncExitStack()
        self._client = await self._stack.enter_async_context(
            self.session.client("comprehend", endpoint_url=self.config.endpoint_url)
        )
        logger.debug("Comprehend client opened in %s", self.config.region)

    async def close(self) -> None:
        """Close the Comprehend client."""
        if self._stack is not None:
            await self._stack.aclose()
        self._stack = None
        self._client = None

    async def _call(self, operation: str, texts: list[str]) -> dict[str, Any]:
        if self._client is None:
            raise RuntimeError("Not connected to Comprehend")

        method = getattr(self._client, operation)
        try:
            return await retrying(self.retry)(
                method, TextList=texts, LanguageCode=self.config.language_code
            )
        except ClientError as e:
            raise AnalysisError(f"{operation} failed: {error_code(e)} - {e}") from e
        except BotoCoreError as e:
            raise AnalysisError(f"{operation} failed: {e}") from e

    async def _batch(
        self,
        operation: str,
        texts: list[str],
        parse: Callable[[dict[str, Any]], T],
    ) -> list[T]:
        results: list[T] = []
        size = self.config.max_batch_size

        for start in range(0, len(texts), size):
            window = texts[start : start + size]
            response = await self._call(operation, window)

            if errors := response.get("ErrorList"):
                raise AnalysisError(
                    f"{operation} rejected {len(errors)} of {len(window)} documents", errors
                )

            placed: list[T | None] = [None] * len(window)
            for item in response.get("ResultList", []):
                index = item["Index"]
                if not 0 <= index < len(window):
                    raise AnalysisError(f"{operation} returned unknown index {index}")
                placed[index] = parse(item)

            if (missing := placed.count(None)) > 0:
                raise AnalysisError(f"{operation} returned no result for {missing} documents")

            results.extend(placed)
            logger.debug("%s: %d/%d documents", operation, len(results), len(texts))

        return results

    async def detect_sentiment(self, texts: list[str]) -> list[SentimentFinding]:
        """Classify the sentiment of every text."""
        return await self._batch(
            "batch_detect_sentiment", texts, SentimentFinding.from_comprehend
        )

    async def detect_entities(self, texts: list[str]) -> list[list[EntityFinding]]:
        """Find named entities in every text."""
        return await self._batch(
            "batch_detect_entities",
            texts,
            lambda item: [EntityFinding.from_comprehend(e) for e in item.get("Entities", [])],
        )

    async def detect_key_phrases(self, texts: list[str]) -> list[list[KeyPhraseFinding]]:
        """Find key phrases in every text."""
        return await self._batch(
            "batch_detect_key_phrases",
            texts,
            lambda item: [KeyPhraseFinding.from_comprehend(p) for p in item.get("KeyPhrases", [])],
        )

    async def analyze(self, kind: ResultKind, texts: list[str]) -> list[Any]:
        """Run the operation for one result kind."""
        if not texts:
            return []

        operations = {
            ResultKind.SENTIMENT: self.detect_sentiment,
            ResultKind.ENTITIES: self.detect_entities,
            ResultKind.KEY_PHRASES: self.detect_key_phrases,
        }
        logger.info("Running %s analysis on %d texts", kind.value, len(texts))
        return await operations[kind](texts)

    async def __aenter__(self) -> ComprehendClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit, cleanup resources."""
        await self.close()
