"""Split a tweet CSV into fixed-size chunk objects."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

import pandas as pd
from pandas.errors import EmptyDataError, ParserError

from tweet_insights.common.component import ComponentFactory
from tweet_insights.common.errors import ConfigurationError, RecordShapeError
from tweet_insights.splitter.config import SplitterConfig
from tweet_insights.storage.types import ObjectStore

logger = logging.getLogger(__name__)


class BatchSplitter(ComponentFactory[SplitterConfig]):
    """Writes a header plus up to ``chunk_size`` rows per chunk object.

    The header line is copied from the source as-is. Data rows are parsed
    as strings and must have as many fields as the header.
    """

    _config_type = SplitterConfig

    def __init__(self, config: SplitterConfig, store: ObjectStore) -> None:
        super().__init__(config)
        self.store = store

    def chunk_key(self, index: int) -> str:
        return f"{self.config.key_prefix}{self.config.prefix}_{index}.csv"

    @staticmethod
    def check_frame(frame: pd.DataFrame, width: int) -> None:
        """Reject rows with fewer or more fields than the header."""
        if frame.shape[1] != width:
            raise RecordShapeError(
                f"expected {width} fields, got {frame.shape[1]}",
                line=int(frame.index[0]) + 2,
            )

        # keep_default_na=False leaves empty cells as "", so NaN means a short row
        short = frame.isna().any(axis=1)
        if short.any():
            index = int(short.idxmax())
            row = frame.loc[index].dropna().tolist()
            raise RecordShapeError(
                f"expected {width} fields, got {len(row)}", line=index + 2, row=row
            )

    async def split(self, source: str | Path, bucket: str | None = None) -> list[str]:
        """Split ``source`` and return the written keys in index order."""
        chunk_size = self.config.chunk_size
        if chunk_size < 1:
            raise ConfigurationError(f"chunk_size must be >= 1, got {chunk_size}")

        bucket = bucket or self.config.bucket
        if not bucket:
            raise ConfigurationError("No destination bucket configured")

        logger.info("Splitting %s into chunks of %d rows", source, chunk_size)
        keys = []
        with open(source, encoding=self.config.encoding, newline="") as handle:
            header = handle.readline().rstrip("\r\n")
            if not header:
                raise RecordShapeError(f"Source has no header row: {source}")
            width = len(next(csv.reader([header])))
            head = f"{header}\n"

            try:
                reader = pd.read_csv(
                    handle,
                    header=None,
                    chunksize=chunk_size,
                    dtype=str,
                    keep_default_na=False,
                )
            except EmptyDataError:
                logger.info("No data rows in %s", source)
                return keys
            except ParserError as e:
                raise RecordShapeError(f"Malformed row in {source}: {e}") from e

            with reader:
                try:
                    for frame in reader:
                        if frame.empty:
                            continue
                        self.check_frame(frame, width)

                        key = self.chunk_key(len(keys))
                        rows = frame.to_csv(header=False, index=False, lineterminator="\n")
                        body = (head + rows).encode("utf-8")
                        await self.store.put_object(bucket, key, body, content_type="text/csv")
                        keys.append(key)
                        logger.debug("Wrote chunk %s with %d rows", key, len(frame))
                except EmptyDataError:
                    logger.info("No data rows in %s", source)
                except ParserError as e:
                    raise RecordShapeError(f"Malformed row in {source}: {e}") from e

        logger.info("Wrote %d chunks to %s", len(keys), bucket)
        return keys
