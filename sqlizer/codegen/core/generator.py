"""
Base generator interface for code generation targets.

Defines the contract a language generator implements.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .schema import GeneratedType
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for code generators."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize generator with optional configuration."""
        self.config = config or {}
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Template engine for this generator, created on first use."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(
                self.get_template_directory()
            )
        return self._template_engine

    @abstractmethod
    def generate(self, generated_type: GeneratedType) -> str:
        """
        Generate source code for a type.

        Args:
            generated_type: Type built from a table's columns

        Returns:
            Generated code as a string
        """
        pass

    def validate(self, generated_type: GeneratedType) -> List[str]:
        """
        Check a type for issues worth reporting.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if not generated_type.attributes:
            warnings.append(f"Table '{generated_type.table_name}' has no columns")

        for attr in generated_type.unmapped_attributes:
            warnings.append(
                f"Column {generated_type.table_name}.{attr.name} has unmapped "
                f"SQL type '{attr.data_type}'"
            )

        return warnings

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}


def generate_code(
    generator: CodeGenerator, generated_type: GeneratedType
) -> GenerationResult:
    """
    Generate code for a type and collect warnings and metadata.

    Args:
        generator: Code generator instance
        generated_type: Type to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata

    Raises:
        TemplateError: If the template cannot be loaded or rendered
    """
    warnings = generator.validate(generated_type)
    for warning in warnings:
        logger.warning(warning)

    code = generator.generate(generated_type)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "table_name": generated_type.table_name,
        "field_count": len(generated_type.attributes),
        "has_unmapped": bool(generated_type.unmapped_attributes),
    }
    logger.info(
        "Generated %s code for %s (%d fields)",
        generator.language_name,
        generated_type.table_name,
        metadata["field_count"],
    )

    return GenerationResult(code, warnings, metadata)
