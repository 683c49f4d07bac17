"""Logging configuration for cursus_graph."""

import logging
from typing import Any, Optional, Union

from cursus_graph.utils.custom_logger import ROOT_LOGGER_NAME, CustomLogger
from cursus_graph.utils.custom_logger import get_logger as _get_logger

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Configure logging for cursus_graph.

    By default, the library uses a NullHandler (no output). Call this function
    to see progress information and the consistency warnings raised while
    validating a curriculum.

    Args:
        level: Log level - a logging constant or one of the names
            DEBUG, INFO, WARNING, ERROR, CRITICAL
        format_string: Custom log format string. If None, uses structured format
        handler: Custom logging handler. If None, uses StreamHandler (stderr)

    Example:
        Show consistency warnings on the console:
        >>> import cursus_graph
        >>> cursus_graph.setup_logging(level=logging.WARNING)

        Log everything to a file:
        >>> file_handler = logging.FileHandler('cursus_graph.log')
        >>> cursus_graph.setup_logging(level=logging.DEBUG, handler=file_handler)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(handler)


def get_logger(name: str, **items: Any) -> CustomLogger:
    """Get custom logger instance for a module.

    Args:
        name: Module name (usually __name__)
        **items: Default items to include in all log messages

    Returns:
        CustomLogger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Diagram written", path="cursus.mmd")
        # Output: msg="Diagram written" path="cursus.mmd"
    """
    return _get_logger(name, **items)


# Initialize default logger with NullHandler (no output by default)
_default_logger = logging.getLogger(ROOT_LOGGER_NAME)
_default_logger.addHandler(logging.NullHandler())
_default_logger.setLevel(logging.WARNING)
