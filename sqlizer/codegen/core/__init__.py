"""
Core code generation components.

Provides base classes and utilities used by language generators.
"""

from .generator import CodeGenerator, GenerationResult, generate_code
from .naming import NameSanitizer
from .schema import Attribute, GeneratedType, attribute_from_column, build_generated_type
from .templates import TemplateEngine, TemplateError, create_template_engine
from .types import FieldType, SqlType, SQL_TYPE_MAP, map_sql_type
from .writer import OutputWriter, SourceFormatter

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Type mapping
    "FieldType",
    "SqlType",
    "SQL_TYPE_MAP",
    "map_sql_type",
    # Schema
    "Attribute",
    "GeneratedType",
    "attribute_from_column",
    "build_generated_type",
    # Naming utilities
    "NameSanitizer",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Output
    "OutputWriter",
    "SourceFormatter",
]
