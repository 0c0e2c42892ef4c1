"""Logging setup for sqlizer.

Modules obtain their logger with :func:`get_logger` and the CLI calls
:func:`setup_logging` once at startup.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "sqlizer"
DEFAULT_LEVEL = logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``sqlizer`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, level: int | None = None) -> logging.Logger:
    """Configure the package logger to write through rich on stderr.

    Args:
        verbose: Log at DEBUG level when True.
        level: Explicit level, takes precedence over ``verbose``.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = logging.DEBUG if verbose else DEFAULT_LEVEL

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid stacking handlers when called more than once (tests, re-entry)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return logger
