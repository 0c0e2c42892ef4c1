"""
Core schema representation for code generation.

Reduces the column metadata of one table into a :class:`GeneratedType`
that generators render.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ...database.models import ColumnMetadata
from .types import FieldType, map_sql_type


@dataclass(frozen=True)
class Attribute:
    """A single field of the generated type."""

    name: str
    type: Optional[FieldType]
    data_type: str = ""
    nullable: bool = False
    ordinal_position: int = 0

    @property
    def mapped(self) -> bool:
        return self.type is not None

    @property
    def serialized_name(self) -> str:
        """Name used for serialization tags."""
        return self.name.lower()


@dataclass
class GeneratedType:
    """A named type with one attribute per table column."""

    table_name: str
    attributes: List[Attribute] = field(default_factory=list)

    @property
    def unmapped_attributes(self) -> List[Attribute]:
        return [attr for attr in self.attributes if not attr.mapped]


def attribute_from_column(column: ColumnMetadata) -> Attribute:
    """Map one column to an attribute; unmapped SQL types leave the type unset."""
    return Attribute(
        name=column.column_name,
        type=map_sql_type(column.data_type),
        data_type=column.data_type,
        nullable=column.nullable,
        ordinal_position=column.ordinal_position,
    )


def build_generated_type(
    table_name: str, columns: Iterable[ColumnMetadata]
) -> GeneratedType:
    """
    Build the generated type for a table.

    Args:
        table_name: Table the columns were queried for
        columns: Column metadata rows, in any order

    Returns:
        GeneratedType with attributes ordered by ordinal position
    """
    ordered = sorted(columns, key=lambda column: column.ordinal_position)
    return GeneratedType(
        table_name=table_name,
        attributes=[attribute_from_column(column) for column in ordered],
    )
