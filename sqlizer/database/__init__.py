"""
SQL Server metadata access.
"""

from .models import ColumnMetadata
from .reader import (
    QueryExecutor,
    ReaderState,
    SchemaReader,
    TABLE_LOOKUP_CATALOG,
)

__all__ = [
    "ColumnMetadata",
    "QueryExecutor",
    "ReaderState",
    "SchemaReader",
    "TABLE_LOOKUP_CATALOG",
]
