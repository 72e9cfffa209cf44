"""Turn one chunk object into one result object per analysis kind."""

from __future__ import annotations

import asyncio
import hashlib
import logging
import random
from datetime import datetime, timezone
from pathlib import PurePosixPath
from typing import Any, Protocol

from tweet_insights.analyzer.config import AnalyzerConfig
from tweet_insights.analyzer.types import AnalysisSummary
from tweet_insights.common.component import ComponentFactory
from tweet_insights.common.errors import (
    AnalysisError,
    PartialAnalysisError,
    RecordShapeError,
    StorageError,
)
from tweet_insights.model.record import TweetRecord
from tweet_insights.model.results import BaseResult, ResultKind
from tweet_insights.storage.types import ObjectLocation, ObjectStore

logger = logging.getLogger(__name__)


class TextAnalyzer(Protocol):
    async def analyze(self, kind: ResultKind, texts: list[str]) -> list[Any]: ...


class RecordAnalyzer(ComponentFactory[AnalyzerConfig]):
    """Analyzes chunk objects announced by S3 put notifications.

    The i-th analysis entry returned for a kind is attributed to the i-th
    record of the chunk. Each kind is analyzed and written on its own, so
    a failing kind does not discard the others; the failure is raised as
    ``PartialAnalysisError`` once every kind has run.
    """

    _config_type = AnalyzerConfig

    def __init__(
        self,
        config: AnalyzerConfig,
        source: ObjectStore,
        results: ObjectStore,
        analyzer: TextAnalyzer,
    ) -> None:
        super().__init__(config)
        self.source = source
        self.results = results
        self.analyzer = analyzer

    def result_key(self, kind: ResultKind, location: ObjectLocation) -> str:
        """Name a result object."""
        if self.config.naming == "deterministic":
            digest = hashlib.sha1(str(location).encode("utf-8")).hexdigest()
            stem = PurePosixPath(location.key).with_suffix("").as_posix().replace("/", "_")
            name = f"{int(digest, 16) % 1000:03d}-{location.bucket}-{stem}"
        else:
            name = f"{random.randint(0, 999):03d}-{datetime.now(timezone.utc).isoformat()}"
        return f"{self.config.result_prefix}{kind.folder}/{name}.json"

    async def read_records(self, location: ObjectLocation) -> list[TweetRecord]:
        """Fetch and parse one chunk."""
        body = await self.source.get_object(location.bucket, location.key)
        try:
            content = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RecordShapeError(f"{location} is not UTF-8 text: {e}") from e
        return self.config.record_schema.parse(content)

    @staticmethod
    def flatten(
        kind: ResultKind, records: list[TweetRecord], analysis: list[Any]
    ) -> list[BaseResult]:
        """Pair records with analysis entries by position."""
        if len(analysis) != len(records):
            raise AnalysisError(
                f"{kind.value} returned {len(analysis)} entries for {len(records)} records"
            )

        model = kind.result_model
        return [
            result
            for record, found in zip(records, analysis, strict=True)
            for result in model.flatten(record, found)
        ]

    async def _run_kind(
        self,
        kind: ResultKind,
        location: ObjectLocation,
        records: list[TweetRecord],
        texts: list[str],
        summary: AnalysisSummary,
    ) -> None:
        analysis = await self.analyzer.analyze(kind, texts)
        results = self.flatten(kind, records, analysis)
        summary.lines[kind.value] = len(results)

        key = self.result_key(kind, location)
        body = "".join(f"{r.model_dump_json()}\n" for r in results).encode("utf-8")
        await self.results.put_object(
            self.config.result_bucket, key, body, content_type="application/json"
        )
        summary.keys[kind.value] = key
        logger.info("Wrote %d %s lines to %s", len(results), kind.value, key)

    async def _process(self, location: ObjectLocation) -> AnalysisSummary:
        records = await self.read_records(location)
        summary = AnalysisSummary(location=location, records=len(records))

        if not records:
            logger.info("No records in %s, nothing to analyze", location)
            return summary

        texts = [record.text for record in records]
        failed: dict[str, BaseException] = {}
        for kind in self.config.kinds:
            try:
                await self._run_kind(kind, location, records, texts, summary)
            except (AnalysisError, StorageError) as e:
                logger.error("%s analysis failed for %s: %s", kind.value, location, e)
                failed[kind.value] = e

        if failed:
            summary.failed = sorted(failed)
            raise PartialAnalysisError(failed, summary)
        return summary

    async def process_object(self, location: ObjectLocation) -> AnalysisSummary:
        """Analyze one chunk object within the configured time budget."""
        logger.info("Analyzing %s", location)
        async with asyncio.timeout(self.config.timeout):
            summary = await self._process(location)

        logger.info(
            "Analyzed %d records from %s: %s", summary.records, location, summary.lines
        )
        return summary

    async def process_event(self, event: dict[str, Any]) -> list[AnalysisSummary]:
        """Analyze every chunk named in an S3 put notification."""
        locations = ObjectLocation.from_event(event)
        if not locations:
            logger.warning("Event contains no S3 records")
            return []

        return [await self.process_object(location) for location in locations]
