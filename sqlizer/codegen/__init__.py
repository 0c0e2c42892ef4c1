"""
sqlizer code generation module.

Generates Go types from SQL Server column metadata.
"""

from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.schema import Attribute, GeneratedType, build_generated_type
from .core.templates import TemplateError
from .core.types import FieldType, map_sql_type
from .core.writer import OutputWriter
from .languages.go import GoFormatter, GoGenerator, create_go_generator


def generate_from_columns(table_name, columns, config=None):
    """
    Generate Go code from column metadata.

    Args:
        table_name: Table the columns belong to
        columns: ColumnMetadata rows, in any order
        config: Generator configuration dict

    Returns:
        GenerationResult with generated code
    """
    generated_type = build_generated_type(table_name, columns)
    generator = create_go_generator(config)
    return generate_code(generator, generated_type)


__all__ = [
    "Attribute",
    "CodeGenerator",
    "FieldType",
    "GeneratedType",
    "GenerationResult",
    "GoFormatter",
    "GoGenerator",
    "OutputWriter",
    "TemplateError",
    "build_generated_type",
    "create_go_generator",
    "generate_code",
    "generate_from_columns",
    "map_sql_type",
]
