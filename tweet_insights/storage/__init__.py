"""Object storage backends."""

from .component import S3Storage
from .config import StorageConfig
from .local import LocalStorage
from .types import ObjectLocation, ObjectStore

__all__ = ["LocalStorage", "ObjectLocation", "ObjectStore", "S3Storage", "StorageConfig"]
