"""Athena client for creating result tables."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

import aioboto3
from botocore.exceptions import ClientError

from tweet_insights.catalog.config import CatalogConfig
from tweet_insights.catalog.ddl import get_table_query
from tweet_insights.common.component import ComponentFactory
from tweet_insights.common.config import RetryConfig
from tweet_insights.common.errors import TweetInsightsError
from tweet_insights.common.retry import error_code, retrying
from tweet_insights.model.results import ResultKind

logger = logging.getLogger(__name__)


class QueryError(TweetInsightsError):
    """Athena query did not succeed."""


class QueryState(str, Enum):
    """Athena query execution states."""

    QUEUED = "QUEUED"
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"

    @property
    def terminal(self) -> bool:
        return self in (QueryState.SUCCEEDED, QueryState.FAILED, QueryState.CANCELLED)


class AthenaCatalog(ComponentFactory[CatalogConfig]):
    """Creates the external tables the result objects are queried through."""

    _config_type = CatalogConfig

    def __init__(
        self,
        config: CatalogConfig,
        retry: RetryConfig | None = None,
        session: aioboto3.Session | None = None,
    ) -> None:
        super().__init__(config)
        self.retry = retry or RetryConfig()
        self.session = session or aioboto3.Session(region_name=config.region)

    async def execute_query(self, query: str) -> str:
        """Execute a query and wait for completion."""
        async with self.session.client("athena") as client:
            try:
                response = await retrying(self.retry)(
                    client.start_query_execution,
                    QueryString=query,
                    WorkGroup=self.config.workgroup,
                    QueryExecutionContext={"Database": self.config.database},
                    ResultConfiguration={"OutputLocation": self.config.output_location},
                )
            except ClientError as e:
                raise QueryError(f"Failed to start query: {error_code(e)}") from e

            execution_id = response["QueryExecutionId"]
            logger.debug("Query execution ID: %s", execution_id)

            async with asyncio.timeout(self.config.timeout):
                while True:
                    status_response = await retrying(self.retry)(
                        client.get_query_execution, QueryExecutionId=execution_id
                    )
                    status = status_response["QueryExecution"]["Status"]
                    state = QueryState(status["State"])

                    if state.terminal:
                        if state == QueryState.SUCCEEDED:
                            return execution_id
                        reason = status.get("StateChangeReason", "Unknown reason")
                        raise QueryError(f"Query {execution_id} {state.value}: {reason}")

                    await asyncio.sleep(self.config.poll_interval)

    async def create_tables(
        self, bucket: str, prefix: str = "", kinds: list[ResultKind] | None = None
    ) -> list[str]:
        """Create one table per result kind, returning the executed queries."""
        queries = []
        for kind in kinds or list(ResultKind):
            query = get_table_query(kind, self.config.database, bucket, prefix)
            await self.execute_query(query)
            logger.info("Created table %s.%s", self.config.database, kind.folder)
            queries.append(query)
        return queries
