"""
Schema reader for SQL Server tables.

Checks that the target database and table exist, then reads the table's
column metadata from ``INFORMATION_SCHEMA.COLUMNS``. All three queries run on
one connection, which is closed before :meth:`SchemaReader.read_columns`
returns.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from ..config import ConnectionParams
from ..errors import (
    DatabaseNotFoundError,
    QueryError,
    SqlizerError,
    TableNotFoundError,
)
from ..logging_config import get_logger
from .models import ColumnMetadata

logger = get_logger(__name__)

# The table probe only looks in this catalog, whatever database was requested
TABLE_LOOKUP_CATALOG = "UserManagement"

DATABASE_EXISTS_QUERY = """
SELECT CASE WHEN DB_ID(?) IS NOT NULL THEN 1 ELSE 0 END AS DatabaseExists
"""

TABLE_EXISTS_QUERY = f"""
SELECT CASE WHEN EXISTS (
    SELECT *
    FROM {TABLE_LOOKUP_CATALOG}.INFORMATION_SCHEMA.TABLES
    WHERE TABLE_NAME = ?
) THEN 1 ELSE 0 END AS TableExists
"""

COLUMNS_QUERY = """
SELECT *
FROM {database}.INFORMATION_SCHEMA.COLUMNS
WHERE TABLE_NAME = ?
ORDER BY ORDINAL_POSITION
"""


class QueryExecutor(Protocol):
    """Anything that can run a parameterized query and be closed."""

    def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        ...

    def close(self) -> None:
        ...


class ReaderState(Enum):
    """How far a read got."""

    IDLE = "idle"
    CONNECTED = "connected"
    DATABASE_CHECKED = "database_checked"
    TABLE_CHECKED = "table_checked"
    COLUMNS_FETCHED = "columns_fetched"


def quote_identifier(name: str) -> str:
    """Bracket-quote a SQL Server identifier."""
    return "[" + name.replace("]", "]]") + "]"


class SchemaReader:
    """Reads column metadata for one table."""

    def __init__(self, connect: Optional[Callable[[ConnectionParams], QueryExecutor]] = None):
        """
        Initialize the reader.

        Args:
            connect: Factory opening a query executor for connection
                parameters (default: the pyodbc connection)
        """
        if connect is None:
            from .connection import connect as pyodbc_connect

            connect = pyodbc_connect
        self._connect = connect
        self.state = ReaderState.IDLE

    def read_columns(
        self, params: ConnectionParams, database: str, table: str
    ) -> List[ColumnMetadata]:
        """
        Read the columns of ``table`` in ``database``.

        Args:
            params: Server connection parameters
            database: Target database name
            table: Target table name

        Returns:
            Column metadata ordered by ordinal position

        Raises:
            DatabaseConnectionError: If the server cannot be reached
            DatabaseNotFoundError: If the database does not exist
            TableNotFoundError: If the table does not exist
            QueryError: If any query fails
        """
        self.state = ReaderState.IDLE
        executor = self._connect(params)
        self.state = ReaderState.CONNECTED
        logger.debug("Connected to %s", params.server)

        try:
            if not self._database_exists(executor, database):
                raise DatabaseNotFoundError(database)
            self.state = ReaderState.DATABASE_CHECKED

            if not self._table_exists(executor, table):
                raise TableNotFoundError(table, TABLE_LOOKUP_CATALOG)
            self.state = ReaderState.TABLE_CHECKED

            columns = self._fetch_columns(executor, database, table)
            self.state = ReaderState.COLUMNS_FETCHED
        finally:
            executor.close()
            logger.debug("Connection to %s closed", params.server)

        logger.info("Read %d columns from %s.%s", len(columns), database, table)
        return columns

    def _database_exists(self, executor: QueryExecutor, database: str) -> bool:
        rows = self._run(executor, DATABASE_EXISTS_QUERY, (database,))
        return self._flag(rows, "DatabaseExists")

    def _table_exists(self, executor: QueryExecutor, table: str) -> bool:
        rows = self._run(executor, TABLE_EXISTS_QUERY, (table,))
        return self._flag(rows, "TableExists")

    def _fetch_columns(
        self, executor: QueryExecutor, database: str, table: str
    ) -> List[ColumnMetadata]:
        sql = COLUMNS_QUERY.format(database=quote_identifier(database))
        rows = self._run(executor, sql, (table,))
        try:
            columns = [ColumnMetadata.from_row(row) for row in rows]
        except (TypeError, ValueError) as e:
            raise QueryError(f"unexpected column metadata row: {e}") from e
        return sorted(columns, key=lambda column: column.ordinal_position)

    @staticmethod
    def _run(executor: QueryExecutor, sql: str, params: Sequence[Any]):
        try:
            return executor.execute(sql, params)
        except SqlizerError:
            raise
        except Exception as e:
            raise QueryError(str(e)) from e

    @staticmethod
    def _flag(rows: List[Dict[str, Any]], key: str) -> bool:
        if not rows:
            raise QueryError(f"existence probe returned no rows ({key})")
        return bool(rows[0].get(key))
