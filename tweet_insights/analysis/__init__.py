"""Text analysis package."""

from .client import ComprehendClient
from .config import MAX_BATCH_SIZE, AnalysisConfig

__all__ = ["MAX_BATCH_SIZE", "AnalysisConfig", "ComprehendClient"]
