"""
SQL Server type mapping.

Maps the SQL type name of a column to a language-neutral field type. The
table is fixed; names that are not in it map to ``None``.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class SqlType(Enum):
    """SQL Server data types sqlizer knows how to map."""

    VARCHAR = "varchar"
    NVARCHAR = "nvarchar"
    CHAR = "char"
    INT = "int"
    FLOAT = "float"
    BIT = "bit"
    DATETIME = "datetime"
    BINARY = "binary"


class FieldType(Enum):
    """Field types shared by all target languages."""

    STRING = "string"
    INTEGER = "integer"  # 64-bit
    FLOAT = "float"  # 64-bit
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    BINARY = "binary"


SQL_TYPE_MAP: Mapping[SqlType, FieldType] = MappingProxyType(
    {
        SqlType.VARCHAR: FieldType.STRING,
        SqlType.NVARCHAR: FieldType.STRING,
        SqlType.CHAR: FieldType.STRING,
        SqlType.INT: FieldType.INTEGER,
        SqlType.FLOAT: FieldType.FLOAT,
        SqlType.BIT: FieldType.BOOLEAN,
        SqlType.DATETIME: FieldType.TIMESTAMP,
        SqlType.BINARY: FieldType.BINARY,
    }
)


def map_sql_type(data_type: Optional[str]) -> Optional[FieldType]:
    """
    Map a SQL Server type name to a field type.

    Args:
        data_type: ``DATA_TYPE`` value from INFORMATION_SCHEMA.COLUMNS

    Returns:
        The mapped field type, or None if the type is not in the table
    """
    if not data_type:
        return None
    try:
        sql_type = SqlType(data_type.strip().lower())
    except ValueError:
        return None
    return SQL_TYPE_MAP[sql_type]
