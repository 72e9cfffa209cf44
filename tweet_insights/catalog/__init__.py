from .client import AthenaCatalog, QueryError, QueryState
from .config import CatalogConfig
from .ddl import get_columns, get_table_query

__all__ = [
    "AthenaCatalog",
    "CatalogConfig",
    "QueryError",
    "QueryState",
    "get_columns",
    "get_table_query",
]
