from .component import RecordAnalyzer
from .config import AnalyzerConfig
from .types import AnalysisSummary

__all__ = ["AnalysisSummary", "AnalyzerConfig", "RecordAnalyzer"]
