"""Retry policy for AWS calls."""

from __future__ import annotations

import logging

import tenacity
from botocore.exceptions import (
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from tweet_insights.common.config import RetryConfig

logger = logging.getLogger(__name__)

TRANSIENT_ERROR_CODES = frozenset(
    {
        "ThrottlingException",
        "Throttling",
        "TooManyRequestsException",
        "RequestLimitExceeded",
        "ProvisionedThroughputExceededException",
        "SlowDown",
        "InternalServerException",
        "InternalServerError",
        "InternalError",
        "ServiceUnavailable",
        "ServiceUnavailableException",
        "RequestTimeout",
    }
)

_CONNECTION_ERRORS = (
    EndpointConnectionError,
    ConnectionClosedError,
    ConnectTimeoutError,
    ReadTimeoutError,
)


def error_code(error: ClientError) -> str:
    """Get the AWS error code of a client error."""
    return error.response.get("Error", {}).get("Code", "")


def is_transient(error: BaseException) -> bool:
    """Check whether an AWS error is worth retrying."""
    if isinstance(error, _CONNECTION_ERRORS):
        return True
    if isinstance(error, ClientError):
        status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode", 0)
        return error_code(error) in TRANSIENT_ERROR_CODES or status >= 500
    return False


def _log_retry(state: tenacity.RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome else None
    logger.warning(
        "Transient AWS error on attempt %d, retrying in %.1fs: %s",
        state.attempt_number,
        state.next_action.sleep if state.next_action else 0.0,
        exc,
    )


def retrying(config: RetryConfig) -> tenacity.AsyncRetrying:
    """Build an async retry controller from configuration."""
    return tenacity.AsyncRetrying(
        retry=tenacity.retry_if_exception(is_transient),
        wait=tenacity.wait_exponential(multiplier=1, min=config.wait_min, max=config.wait_max),
        stop=tenacity.stop_after_attempt(config.max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )
