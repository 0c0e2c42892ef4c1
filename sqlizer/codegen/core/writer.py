"""
Output writer for generated source files.

Formats generated code, writes it into a new directory named after the
table, and normalizes the file's imports in place.
"""

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ...errors import (
    DirectoryExistsError,
    FileWriteError,
    ImportNormalizationError,
)
from ...logging_config import get_logger

logger = get_logger(__name__)


class SourceFormatter(ABC):
    """Language tooling used by :class:`OutputWriter`."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        pass

    @abstractmethod
    def format_source(self, code: str) -> str:
        """
        Format source code in the language's canonical style.

        Raises:
            FormatError: If the code is not valid or cannot be formatted
        """
        pass

    @abstractmethod
    def normalize_imports(self, code: str, filename: str) -> str:
        """
        Add missing and remove unused imports.

        Raises:
            ImportNormalizationError: If imports cannot be resolved
        """
        pass


def atomic_write_text(path: Path, content: str) -> None:
    """Write a file via a temp file in the same directory and a rename."""
    fd, tmp_name = tempfile.mkstemp(
        dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        # mkstemp creates the file owner-only
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


class OutputWriter:
    """Writes generated code to ``<base_dir>/<table>/<table><ext>``."""

    def __init__(
        self,
        formatter: SourceFormatter,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize output writer.

        Args:
            formatter: Formatting and import tooling for the target language
            base_dir: Directory the table directory is created in (default cwd)
        """
        self.formatter = formatter
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()

    def output_path(self, table_name: str) -> Path:
        name = table_name.lower()
        return self.base_dir / name / f"{name}{self.formatter.file_extension}"

    def write(self, code: str, table_name: str) -> Path:
        """
        Format and write generated code for a table.

        Args:
            code: Rendered source code
            table_name: Table the code was generated for

        Returns:
            Path of the written file

        Raises:
            FormatError: If the code cannot be formatted (nothing is written)
            DirectoryExistsError: If the output directory already exists
            FileWriteError: If the directory or file cannot be written
            ImportNormalizationError: If imports cannot be normalized; the
                formatted file stays on disk
        """
        formatted = self.formatter.format_source(code)

        file_path = self.output_path(table_name)
        out_dir = file_path.parent

        try:
            out_dir.mkdir()
        except FileExistsError as e:
            raise DirectoryExistsError(out_dir) from e
        except OSError as e:
            raise FileWriteError(f"failed to create directory {out_dir}: {e}") from e
        logger.debug("Created output directory %s", out_dir)

        try:
            atomic_write_text(file_path, formatted)
        except OSError as e:
            raise FileWriteError(f"failed to write {file_path}: {e}") from e
        logger.info("Wrote %s", file_path)

        self._normalize_imports(file_path)
        return file_path

    def _normalize_imports(self, file_path: Path) -> None:
        try:
            source = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ImportNormalizationError(
                f"failed to read {file_path} for import normalization: {e}",
                path=file_path,
            ) from e

        try:
            normalized = self.formatter.normalize_imports(source, str(file_path))
        except ImportNormalizationError as e:
            e.path = file_path
            raise

        if normalized == source:
            logger.debug("Imports already normalized in %s", file_path)
            return

        try:
            atomic_write_text(file_path, normalized)
        except OSError as e:
            raise ImportNormalizationError(
                f"failed to rewrite {file_path}: {e}", path=file_path
            ) from e
        logger.debug("Normalized imports in %s", file_path)
