"""
pyodbc-backed query execution for SQL Server.
"""

from typing import Any, Dict, List, Sequence

import pyodbc

from ..config import ConnectionParams
from ..errors import DatabaseConnectionError, QueryError
from ..logging_config import get_logger

logger = get_logger(__name__)


def build_connection_string(params: ConnectionParams) -> str:
    """Build an ODBC connection string for a SQL Server instance."""
    parts = {
        "DRIVER": f"{{{params.driver}}}",
        "SERVER": params.server,
        "UID": params.user,
        "PWD": _quote_value(params.password),
    }
    return ";".join(f"{key}={value}" for key, value in parts.items())


def _quote_value(value: str) -> str:
    """Brace-quote an ODBC value that contains separators."""
    if any(ch in value for ch in ";{}=") or value != value.strip():
        return "{" + value.replace("}", "}}") + "}"
    return value


class PyodbcExecutor:
    """Runs parameterized queries on one open pyodbc connection."""

    def __init__(self, connection):
        self._connection = connection

    def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Execute a query and return its rows as dicts keyed by column name."""
        cursor = None
        try:
            cursor = self._connection.cursor()
            cursor.execute(sql, *params)

            if cursor.description is None:
                return []

            columns = [column[0] for column in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
        except pyodbc.Error as e:
            logger.error("Query failed: %s", e)
            raise QueryError(str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()

    def close(self) -> None:
        try:
            self._connection.close()
        except pyodbc.Error as e:
            logger.warning("Error closing connection: %s", e)


def connect(params: ConnectionParams) -> PyodbcExecutor:
    """
    Open a connection to the configured server.

    Raises:
        DatabaseConnectionError: If the server cannot be reached or the
            login is rejected
    """
    logger.info("Connecting to %s as %s", params.server, params.user)
    try:
        connection = pyodbc.connect(build_connection_string(params))
    except pyodbc.Error as e:
        logger.error("Connection to %s failed: %s", params.server, e)
        raise DatabaseConnectionError(str(e)) from e
    return PyodbcExecutor(connection)
