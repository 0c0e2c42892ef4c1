"""
Go type system for code generation.

Maps field types to Go types and tracks the imports they need.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional

from ...core.schema import Attribute
from ...core.types import FieldType

# Rendered for attributes whose SQL type has no mapping
UNMAPPED_PLACEHOLDER = "interface{}"


@dataclass(frozen=True)
class GoType:
    """
    Immutable representation of a Go type.

    Carries the type name and the imports a file needs to use it.
    """

    name: str
    imports_needed: FrozenSet[str] = field(default_factory=frozenset)


GO_TYPE_MAP: Mapping[FieldType, GoType] = MappingProxyType(
    {
        FieldType.STRING: GoType("string"),
        FieldType.INTEGER: GoType("int64"),
        FieldType.FLOAT: GoType("float64"),
        FieldType.BOOLEAN: GoType("bool"),
        FieldType.TIMESTAMP: GoType("time.Time", frozenset({"time"})),
        FieldType.BINARY: GoType("[]byte"),
    }
)


class GoTypeMapper:
    """Maps attributes to Go types."""

    def map_field_type(self, field_type: Optional[FieldType]) -> Optional[GoType]:
        """Return the Go type for a field type, or None when it is unset."""
        if field_type is None:
            return None
        return GO_TYPE_MAP[field_type]

    def map_attribute(self, attr: Attribute) -> Optional[GoType]:
        return self.map_field_type(attr.type)

    def get_all_imports(self, attributes: Iterable[Attribute]) -> List[str]:
        """Sorted import paths needed by a set of attributes."""
        imports = set()
        for attr in attributes:
            go_type = self.map_attribute(attr)
            if go_type is not None:
                imports.update(go_type.imports_needed)
        return sorted(imports)
