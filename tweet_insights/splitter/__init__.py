from .component import BatchSplitter
from .config import SplitterConfig

__all__ = ["BatchSplitter", "SplitterConfig"]
