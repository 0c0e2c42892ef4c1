"""
Go source formatting through the Go toolchain.

``gofmt`` formats generated code and ``goimports`` normalizes its imports.
Both read source on stdin and write the result to stdout.
"""

import shutil
import subprocess
from typing import List, Optional

from ....errors import FormatError, ImportNormalizationError
from ....logging_config import get_logger
from ...core.writer import SourceFormatter

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 60


class GoToolError(Exception):
    """A Go tool is missing or exited with an error."""

    pass


class GoFormatter(SourceFormatter):
    """Runs ``gofmt`` and ``goimports``."""

    def __init__(
        self,
        gofmt: str = "gofmt",
        goimports: str = "goimports",
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the formatter.

        Args:
            gofmt: Name or path of the gofmt executable
            goimports: Name or path of the goimports executable
            timeout: Seconds to wait for each tool
        """
        self.gofmt = gofmt
        self.goimports = goimports
        self.timeout = timeout

    @property
    def file_extension(self) -> str:
        return ".go"

    def format_source(self, code: str) -> str:
        try:
            return self._run([self.gofmt], code)
        except GoToolError as e:
            raise FormatError(str(e)) from e

    def normalize_imports(self, code: str, filename: str) -> str:
        # -srcdir lets goimports resolve imports relative to the file's location
        try:
            return self._run([self.goimports, "-srcdir", filename], code)
        except GoToolError as e:
            raise ImportNormalizationError(str(e)) from e

    def _run(self, command: List[str], code: str) -> str:
        executable = shutil.which(command[0])
        if executable is None:
            raise GoToolError(f"{command[0]} not found on PATH")

        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                [executable, *command[1:]],
                input=code,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise GoToolError(f"{command[0]} timed out after {e.timeout}s") from e
        except OSError as e:
            raise GoToolError(f"failed to run {command[0]}: {e}") from e

        if completed.returncode != 0:
            message = completed.stderr.strip() or f"exit status {completed.returncode}"
            raise GoToolError(f"{command[0]}: {message}")

        return completed.stdout
