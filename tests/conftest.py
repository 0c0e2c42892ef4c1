"""Pytest configuration and fixtures."""

from typing import Any, Dict, List, Optional, Sequence

import pytest

from sqlizer.codegen.core.writer import SourceFormatter
from sqlizer.config import ConnectionParams
from sqlizer.database.models import ColumnMetadata
from sqlizer.errors import FormatError, ImportNormalizationError


class FakeExecutor:
    """Query executor answering the reader's three queries from canned rows."""

    def __init__(
        self,
        database_exists: bool = True,
        table_exists: bool = True,
        columns: Optional[List[Dict[str, Any]]] = None,
        fail_on: Optional[str] = None,
    ):
        self.database_exists = database_exists
        self.table_exists = table_exists
        self.columns = columns or []
        self.fail_on = fail_on
        self.calls: List[tuple] = []
        self.closed = False

    def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        kind = self._kind(sql)
        self.calls.append((kind, sql, tuple(params)))
        if kind == self.fail_on:
            raise RuntimeError(f"{kind} query failed")
        if kind == "database":
            return [{"DatabaseExists": int(self.database_exists)}]
        if kind == "table":
            return [{"TableExists": int(self.table_exists)}]
        return list(self.columns)

    def close(self) -> None:
        self.closed = True

    @property
    def kinds(self) -> List[str]:
        return [call[0] for call in self.calls]

    @staticmethod
    def _kind(sql: str) -> str:
        if "DB_ID" in sql:
            return "database"
        if "INFORMATION_SCHEMA.TABLES" in sql:
            return "table"
        if "INFORMATION_SCHEMA.COLUMNS" in sql:
            return "columns"
        raise AssertionError(f"unexpected query: {sql}")


class FakeFormatter(SourceFormatter):
    """Formatter that records calls instead of running Go tools."""

    def __init__(self, format_error: bool = False, import_error: bool = False):
        self.format_error = format_error
        self.import_error = import_error
        self.normalized_files: List[str] = []

    @property
    def file_extension(self) -> str:
        return ".go"

    def format_source(self, code: str) -> str:
        if self.format_error:
            raise FormatError("1:1: expected 'package', found 'EOF'")
        return code.replace("    ", "\t")

    def normalize_imports(self, code: str, filename: str) -> str:
        self.normalized_files.append(filename)
        if self.import_error:
            raise ImportNormalizationError("could not import example.com/missing")
        return code + "// imports normalized\n"


def column_row(
    name: str,
    data_type: str,
    position: int,
    table: str = "Users",
    nullable: str = "NO",
) -> Dict[str, Any]:
    """A row shaped like INFORMATION_SCHEMA.COLUMNS output."""
    return {
        "TABLE_CATALOG": "Accounts",
        "TABLE_SCHEMA": "dbo",
        "TABLE_NAME": table,
        "COLUMN_NAME": name,
        "ORDINAL_POSITION": position,
        "COLUMN_DEFAULT": None,
        "IS_NULLABLE": nullable,
        "DATA_TYPE": data_type,
        "CHARACTER_MAXIMUM_LENGTH": 50 if "char" in data_type else None,
        "CHARACTER_OCTET_LENGTH": 50 if "char" in data_type else None,
        "NUMERIC_PRECISION": 10 if data_type == "int" else None,
        "NUMERIC_PRECISION_RADIX": 10 if data_type == "int" else None,
        "NUMERIC_SCALE": 0 if data_type == "int" else None,
        "DATETIME_PRECISION": 3 if data_type == "datetime" else None,
        "CHARACTER_SET_CATALOG": None,
        "CHARACTER_SET_SCHEMA": None,
        "CHARACTER_SET_NAME": "iso_1" if "char" in data_type else None,
        "COLLATION_CATALOG": None,
        "COLLATION_SCHEMA": None,
        "COLLATION_NAME": "SQL_Latin1_General_CP1_CI_AS" if "char" in data_type else None,
        "DOMAIN_CATALOG": None,
        "DOMAIN_SCHEMA": None,
        "DOMAIN_NAME": None,
    }


@pytest.fixture
def params() -> ConnectionParams:
    return ConnectionParams(host="db.local", port=1433, user="sa", password="secret")


@pytest.fixture
def users_rows() -> List[Dict[str, Any]]:
    return [
        column_row("Id", "int", 1),
        column_row("Name", "varchar", 2),
        column_row("CreatedAt", "datetime", 3),
    ]


@pytest.fixture
def users_columns(users_rows) -> List[ColumnMetadata]:
    return [ColumnMetadata.from_row(row) for row in users_rows]


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """A config file with server settings and no environment overrides."""
    for key in ("HOST", "PORT", "USER", "PASS", "DRIVER"):
        monkeypatch.delenv(f"SQLIZER_SERVER_{key}", raising=False)
    path = tmp_path / "sqlizer.json"
    path.write_text(
        '{"server": {"host": "db.local", "port": 1433, "user": "sa", "pass": "secret"}}'
    )
    return path
