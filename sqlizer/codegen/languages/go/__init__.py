"""
Go code generator module.

Generates Go structs with JSON tags from SQL Server table metadata.
"""

from .formatter import GoFormatter
from .generator import GoGenerator, create_go_generator
from .naming import create_go_sanitizer, go_package_name, go_tag_name
from .types import GO_TYPE_MAP, GoType, GoTypeMapper

__all__ = [
    "GoGenerator",
    "GoFormatter",
    "GoType",
    "GoTypeMapper",
    "GO_TYPE_MAP",
    "create_go_generator",
    "create_go_sanitizer",
    "go_package_name",
    "go_tag_name",
]
