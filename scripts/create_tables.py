"""Render, and optionally run, the Athena DDL for the result tables."""

import asyncio
import logging
import os

from tweet_insights.catalog import AthenaCatalog, get_table_query
from tweet_insights.common import ConfigurationError, RootConfig
from tweet_insights.model import ResultKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), "..", "config", "default.yaml")


def main(config: RootConfig, bucket: str, prefix: str = "", submit: bool = False) -> list[str]:
    """Generate CREATE TABLE queries for every result kind."""
    if not config.catalog:
        raise ConfigurationError("No catalog configuration")

    catalog = AthenaCatalog.from_config(config.catalog, retry=config.retry)
    if submit:
        return asyncio.run(catalog.create_tables(bucket, prefix))

    return [
        get_table_query(kind, catalog.config.database, bucket, prefix) for kind in ResultKind
    ]


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("bucket", type=str, help="Bucket holding the result objects")
    parser.add_argument("--prefix", type=str, default="", help="Result key prefix")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG, help="YAML config file")
    parser.add_argument("--submit", action="store_true", help="Run the queries on Athena")
    args = parser.parse_args()

    config = RootConfig.from_yaml(args.config)
    config.logging.configure()

    for query in main(config, args.bucket, args.prefix, args.submit):
        print(query + ";\n")
