"""Split a tweet CSV into chunk objects for analysis."""

import asyncio
import logging
import os
import signal
import sys

from tweet_insights.common import ConfigurationError, RootConfig, TweetInsightsError
from tweet_insights.splitter import BatchSplitter
from tweet_insights.storage import LocalStorage, S3Storage

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), "config", "default.yaml")


def signal_handler(sig, frame):
    """Handle termination signals."""
    logger.info("Signal received, exiting gracefully...")
    sys.exit(0)


async def main(
    config: RootConfig,
    source: str,
    bucket: str | None = None,
    output_dir: str | None = None,
    **overrides,
) -> list[str]:
    """Split ``source`` into chunks in S3 or a local directory."""
    splitter_config = BatchSplitter.build_config(
        {**config.splitter, **{k: v for k, v in overrides.items() if v is not None}}
    )

    if output_dir:
        store = LocalStorage(output_dir)
        bucket = bucket or "."
    else:
        store = S3Storage.from_config(config.storage, retry=config.retry)

    splitter = BatchSplitter(splitter_config, store)
    return await splitter.split(source, bucket=bucket)


if __name__ == "__main__":
    import argparse
    import time

    parser = argparse.ArgumentParser(description="Split a tweet CSV into chunk objects")
    parser.add_argument("source", type=str, help="CSV file to split")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG, help="YAML config file")
    parser.add_argument("--bucket", type=str, default=None, help="Destination S3 bucket")
    parser.add_argument("--output-dir", type=str, default=None, help="Write chunks locally")
    parser.add_argument("--chunk-size", type=int, default=None, help="Rows per chunk")
    parser.add_argument("--prefix", type=str, default=None, help="Chunk name prefix")
    parser.add_argument("--key-prefix", type=str, default=None, help="Chunk key folder")
    args = parser.parse_args()

    # Register signal handlers
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        config = RootConfig.from_yaml(args.config)
        config.logging.configure()

        start = time.time()
        keys = asyncio.run(
            main(
                config,
                args.source,
                bucket=args.bucket,
                output_dir=args.output_dir,
                chunk_size=args.chunk_size,
                prefix=args.prefix,
                key_prefix=args.key_prefix,
            )
        )
        logger.info(f"Wrote {len(keys)} chunks in {time.time() - start:.2f} seconds")
    except ConfigurationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Invalid configuration: {e}")
        sys.exit(2)
    except TweetInsightsError as e:
        logger.error(f"Error splitting {args.source}: {e}", exc_info=True)
        sys.exit(1)
