"""
Go code generator implementation.

Generates a Go struct with JSON tags from a table's columns.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.generator import CodeGenerator
from ...core.schema import Attribute, GeneratedType
from .naming import (
    create_go_sanitizer,
    go_package_name,
    go_tag_name,
    validate_go_package_name,
)
from .types import UNMAPPED_PLACEHOLDER, GoTypeMapper

logger = get_logger(__name__)

STRUCT_TEMPLATE = "struct.go.j2"


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with JSON tags."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize Go generator with configuration.

        Recognized config keys: ``package_name`` (default: derived from the
        table name), ``add_comments`` (default True).
        """
        super().__init__(config)

        self.sanitizer = create_go_sanitizer()
        self.type_mapper = GoTypeMapper()

        self.package_name = self.config.get("package_name")
        self.add_comments = self.config.get("add_comments", True)

    def get_template_directory(self) -> Path:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        return "go"

    @property
    def file_extension(self) -> str:
        return ".go"

    def resolve_package_name(self, table_name: str) -> str:
        return self.package_name or go_package_name(table_name)

    def generate(self, generated_type: GeneratedType) -> str:
        """Generate a Go source file declaring one struct for the table."""
        self.sanitizer.reset_used_names()

        struct_name = self.sanitizer.sanitize_name(generated_type.table_name)
        # Field names live in the struct's own scope
        self.sanitizer.reset_used_names()
        fields = [self._generate_field_data(attr) for attr in generated_type.attributes]

        context = {
            "table_name": generated_type.table_name,
            "package_name": self.resolve_package_name(generated_type.table_name),
            "imports": self.type_mapper.get_all_imports(generated_type.attributes),
            "struct_name": struct_name,
            "description": self._describe(generated_type, struct_name),
            "fields": fields,
        }

        logger.debug("Rendering %s for %s", STRUCT_TEMPLATE, struct_name)
        return self.render_template(STRUCT_TEMPLATE, context)

    def _generate_field_data(self, attr: Attribute) -> Dict[str, Any]:
        """Template data for one struct field."""
        go_type = self.type_mapper.map_attribute(attr)

        comment = None
        if go_type is None:
            type_name = UNMAPPED_PLACEHOLDER
            comment = f"unmapped SQL type: {attr.data_type}"
        else:
            type_name = go_type.name

        return {
            "name": self.sanitizer.sanitize_name(attr.name),
            "type": type_name,
            "json_name": go_tag_name(attr.serialized_name),
            "comment": comment,
        }

    def _describe(self, generated_type: GeneratedType, struct_name: str) -> Optional[str]:
        if not self.add_comments:
            return None
        return f"{struct_name} mirrors the columns of the {generated_type.table_name} table."

    def validate(self, generated_type: GeneratedType) -> List[str]:
        """Validate a type for Go generation."""
        warnings = super().validate(generated_type)

        package_name = self.resolve_package_name(generated_type.table_name)
        for error in validate_go_package_name(package_name):
            warnings.append(f"Package name {package_name!r}: {error}")

        for attr in generated_type.attributes:
            tag = go_tag_name(attr.serialized_name)
            if tag != attr.serialized_name:
                warnings.append(
                    f"Column {generated_type.table_name}.{attr.name} uses characters "
                    f"not allowed in a struct tag; json name is {tag!r}"
                )

        return warnings


def create_go_generator(config: Optional[Dict[str, Any]] = None) -> GoGenerator:
    """Create a Go generator with default configuration."""
    default_config = {
        "package_name": None,
        "add_comments": True,
    }

    merged_config = default_config.copy()
    if config:
        merged_config.update(config)

    return GoGenerator(merged_config)
