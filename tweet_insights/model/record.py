"""Tweet records and the schema used to parse them."""

from __future__ import annotations

import csv
import io
import logging

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tweet_insights.common.config import BaseConfig
from tweet_insights.common.errors import RecordShapeError

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = ["id", "retweet_count", "favorite_count", "created_at", "text"]


class TweetRecord(BaseModel):
    """One tweet read from a chunk."""

    model_config = ConfigDict(frozen=True)

    tweet_id: str = Field(..., description="Tweet identifier")
    created_at: str = Field(..., description="Creation timestamp as read")
    text: str = Field(..., description="Tweet text")
    metadata: dict[str, str] = Field(
        default_factory=dict,
        description="Remaining columns, not used by the analysis",
    )


class RecordSchema(BaseConfig):
    """Named column layout of a tweet CSV."""

    columns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COLUMNS),
        description="Column names in file order",
        min_length=1,
    )
    id_field: str = Field(default="id", description="Column holding the tweet id")
    date_field: str = Field(default="created_at", description="Column holding the timestamp")
    text_field: str = Field(default="text", description="Column holding the tweet text")
    match_header: bool = Field(
        default=False,
        description="Require the header row to equal the column names",
    )

    @model_validator(mode="after")
    def validate_fields(self) -> RecordSchema:
        """Validate that the addressed fields are known columns."""
        if len(set(self.columns)) != len(self.columns):
            raise ValueError(f"Duplicate column names: {self.columns}")

        missing = [
            f for f in (self.id_field, self.date_field, self.text_field) if f not in self.columns
        ]
        if missing:
            raise ValueError(f"Fields {missing} are not in columns {self.columns}")
        return self

    def check_header(self, header: list[str]) -> None:
        """Validate a header row against the schema."""
        if len(header) != len(self.columns):
            raise RecordShapeError(
                f"Header has {len(header)} fields, expected {len(self.columns)}",
                line=1,
                row=header,
            )
        if self.match_header and [h.strip() for h in header] != self.columns:
            raise RecordShapeError(
                f"Header {header} does not match columns {self.columns}", line=1, row=header
            )

    def to_record(self, row: list[str], line: int | None = None) -> TweetRecord:
        """Build a record from one data row."""
        if len(row) != len(self.columns):
            raise RecordShapeError(
                f"Row has {len(row)} fields, expected {len(self.columns)}", line=line, row=row
            )

        values = dict(zip(self.columns, row, strict=True))
        addressed = {self.id_field, self.date_field, self.text_field}
        return TweetRecord(
            tweet_id=values[self.id_field],
            created_at=values[self.date_field],
            text=values[self.text_field],
            metadata={k: v for k, v in values.items() if k not in addressed},
        )

    def parse(self, content: str) -> list[TweetRecord]:
        """Parse CSV content, header first, into records."""
        reader = csv.reader(io.StringIO(content))

        header = next(reader, None)
        if header is None:
            raise RecordShapeError("Chunk has no header row")
        self.check_header(header)

        records = []
        for row in reader:
            if not row:
                # blank line
                continue
            records.append(self.to_record(row, line=reader.line_num))

        logger.debug("Parsed %d records", len(records))
        return records
