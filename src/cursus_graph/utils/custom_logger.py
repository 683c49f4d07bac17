"""Structured key=value logger for cursus-graph."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

ROOT_LOGGER_NAME = "cursus_graph"


def _format_value(value: Any) -> str:
    """Render a log value, joining sequences of courses or concepts with commas."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(item) for item in value)
    return str(value)


@dataclass
class LogItem:
    """A single log item (key-value pair)."""

    name: str
    value: str

    def __str__(self):
        escaped = self.value.replace('"', '\\"')
        return f'{self.name}="{escaped}"'


class CustomLogger:
    """Structured logger with key-value pair support.

    Messages are emitted as ``msg="..." key="value"`` lines on a standard
    ``logging`` logger, so any handler installed by ``setup_logging`` or by
    the host application receives them.

    Example:
        >>> logger = CustomLogger("cursus_graph.graph.resolver")
        >>> logger.info("Dependencies resolved", courses=12, edges=17)
        # Output: msg="Dependencies resolved" courses="12" edges="17"
    """

    def __init__(self, name: str, **items: Any):
        """Initialize custom logger.

        Args:
            name: Logger name (typically module name)
            **items: Default items to include in all log messages
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.items: List[LogItem] = self._to_items(items)

    @staticmethod
    def _to_items(items: Dict[str, Any]) -> List[LogItem]:
        return [LogItem(key, _format_value(value)) for key, value in items.items()]

    def log(self, level: int, message: str, **items: Any) -> None:
        """Log a message with extra key-value pairs at the given level."""
        if not self.logger.isEnabledFor(level):
            return
        all_items = self.items + self._to_items(items)
        text = 'msg="' + message + '"'
        if all_items:
            text += " " + " ".join(map(str, all_items))
        self.logger.log(level, text)

    def debug(self, message: str, **items: Any) -> None:
        self.log(logging.DEBUG, message, **items)

    def info(self, message: str, **items: Any) -> None:
        self.log(logging.INFO, message, **items)

    def warning(self, message: str, **items: Any) -> None:
        self.log(logging.WARNING, message, **items)
