"""Global logger configuration for the foldwise package."""

import logging
import sys

from foldwise.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]


def setup_logger(
    name: str = "foldwise",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the package root logger.

    Args:
        name: Root logger name; module loggers hang below it.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Falls back to ``settings.log_level``.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.log_level
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root = logging.getLogger(name)

    # Handlers are attached once, repeated calls only return the logger
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        root.addHandler(handler)
        root.setLevel(getattr(logging, level.upper()))
        root.propagate = False

    return root


def get_logger(module: str) -> logging.Logger:
    """Return a child of the package logger for ``module`` (a ``__name__``)."""
    if module == logger.name or module.startswith(logger.name + "."):
        return logging.getLogger(module)
    return logger.getChild(module)


logger = setup_logger()
