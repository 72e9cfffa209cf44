"""Error types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tweet_insights.analyzer.types import AnalysisSummary


class TweetInsightsError(Exception):
    """Base error."""


class ConfigurationError(TweetInsightsError, ValueError):
    """Invalid configuration, raised before any I/O."""


class RecordShapeError(TweetInsightsError, ValueError):
    """A row or header does not match the record schema."""

    def __init__(self, message: str, line: int | None = None, row: list[str] | None = None):
        self.line = line
        self.row = row
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class StorageError(TweetInsightsError):
    """Object storage failure."""

    def __init__(self, message: str, bucket: str, key: str):
        self.bucket = bucket
        self.key = key
        super().__init__(f"{message} (s3://{bucket}/{key})")


class AnalysisError(TweetInsightsError):
    """Text analysis service failure."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)


class PartialAnalysisError(AnalysisError):
    """One or more analysis kinds failed while the others were written."""

    def __init__(self, failed: dict[str, BaseException], summary: AnalysisSummary):
        self.failed = failed
        self.summary = summary
        kinds = ", ".join(sorted(failed))
        super().__init__(f"Analysis failed for {kinds} on {summary.location}")
