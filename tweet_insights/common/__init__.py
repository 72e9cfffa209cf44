from .component import ComponentFactory
from .config import BaseConfig, LoggerConfig, RetryConfig, RootConfig
from .errors import (
    AnalysisError,
    ConfigurationError,
    PartialAnalysisError,
    RecordShapeError,
    StorageError,
    TweetInsightsError,
)

__all__ = [
    "AnalysisError",
    "BaseConfig",
    "ComponentFactory",
    "ConfigurationError",
    "LoggerConfig",
    "PartialAnalysisError",
    "RecordShapeError",
    "RetryConfig",
    "RootConfig",
    "StorageError",
    "TweetInsightsError",
]
