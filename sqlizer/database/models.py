"""
Row models for SQL Server metadata queries.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ColumnMetadata:
    """One row of ``INFORMATION_SCHEMA.COLUMNS``."""

    table_catalog: str
    table_schema: str
    table_name: str
    column_name: str
    ordinal_position: int
    is_nullable: str
    data_type: str
    column_default: Optional[str] = None
    character_maximum_length: Optional[int] = None
    character_octet_length: Optional[int] = None
    numeric_precision: Optional[int] = None
    numeric_precision_radix: Optional[int] = None
    numeric_scale: Optional[int] = None
    datetime_precision: Optional[int] = None
    character_set_catalog: Optional[str] = None
    character_set_schema: Optional[str] = None
    character_set_name: Optional[str] = None
    collation_catalog: Optional[str] = None
    collation_schema: Optional[str] = None
    collation_name: Optional[str] = None
    domain_catalog: Optional[str] = None
    domain_schema: Optional[str] = None
    domain_name: Optional[str] = None

    @property
    def nullable(self) -> bool:
        return str(self.is_nullable).upper() == "YES"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ColumnMetadata":
        """
        Build from a result row keyed by INFORMATION_SCHEMA column names.

        Keys are matched case-insensitively; unknown keys are ignored and
        missing optional facets default to None.
        """
        normalized = {str(key).lower(): value for key, value in row.items()}
        values = {}
        for f in fields(cls):
            if f.name in normalized:
                values[f.name] = normalized[f.name]
        values["ordinal_position"] = int(values.get("ordinal_position") or 0)
        return cls(**values)
