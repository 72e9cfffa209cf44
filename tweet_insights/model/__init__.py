from .findings import EntityFinding, KeyPhraseFinding, SentimentFinding
from .record import DEFAULT_COLUMNS, RecordSchema, TweetRecord
from .results import BaseResult, EntityResult, KeyPhraseResult, ResultKind, SentimentResult

__all__ = [
    "DEFAULT_COLUMNS",
    "BaseResult",
    "EntityFinding",
    "EntityResult",
    "KeyPhraseFinding",
    "KeyPhraseResult",
    "RecordSchema",
    "ResultKind",
    "SentimentFinding",
    "SentimentResult",
    "TweetRecord",
]
