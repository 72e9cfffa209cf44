import asyncio
import json
import logging
import os
import time
from typing import Any

from tweet_insights.analysis import ComprehendClient
from tweet_insights.analyzer import RecordAnalyzer
from tweet_insights.common import RootConfig
from tweet_insights.storage import S3Storage

# Setup logger
logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), "config", "default.yaml")

_config: RootConfig | None = None


def load_config() -> RootConfig:
    """Load configuration once per container."""
    global _config
    if _config is None:
        path = os.environ.get("TWEET_INSIGHTS_CONFIG", DEFAULT_CONFIG)
        logger.info(f"Loading configuration from {path}")
        _config = RootConfig.from_yaml(path)
        _config.logging.configure()
    return _config


async def process_event(event: dict[str, Any], config: RootConfig) -> dict[str, Any]:
    """Analyze every chunk announced by the event."""
    storage = S3Storage.from_config(config.storage, retry=config.retry)

    async with ComprehendClient.from_config(config.analysis, retry=config.retry) as client:
        analyzer = RecordAnalyzer.from_config(
            config.analyzer, source=storage, results=storage, analyzer=client
        )
        summaries = await analyzer.process_event(event)

    return {
        "statusCode": 200,
        "body": json.dumps([s.model_dump(mode="json") for s in summaries]),
    }


def lambda_handler(event: dict[str, Any], context: Any | None = None) -> dict[str, Any]:
    """AWS Lambda entry point.

    Errors are re-raised so the invocation fails and S3 redelivers the
    notification.
    """
    logger.info(f"Received event: {json.dumps(event)}")
    start = time.time()
    try:
        config = load_config()
        response = asyncio.run(process_event(event, config))
    except Exception as e:
        logger.error(f"Error processing event: {e}", exc_info=True)
        raise

    logger.info(f"Processing completed successfully in {time.time() - start:.2f} seconds")
    return response
