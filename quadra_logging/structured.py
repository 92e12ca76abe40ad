"""
Structured JSON Logger
======================

One JSON object per record, carried as the record message so any handler
(root handlers from basicConfig, pytest's caplog) sees the same document.

Handler policy:
- Root already configured: no own handler, records propagate to root
- Root unconfigured: one own stderr handler, propagation off

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "analyzer",
        "event": "analysis.adjacency",
        "message": "Rectangles have adjacency of type: proper",
        "metadata": {"row_index": 3, "adjacency_type": "proper"}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger for one component (logger ``quadra.<component>``).

    Example:
        >>> logger = StructuredLogger("analyzer")
        >>> logger.info(
        ...     event=LogEvent.ANALYSIS_CONTAINMENT,
        ...     message="Rectangle 2 is contained inside Rectangle 1",
        ...     metadata={'row_index': 0}
        ... )
    """

    def __init__(self, component: str, level: int = logging.INFO):
        self.component = component
        self.logger = logging.getLogger(f"quadra.{component}")
        self.logger.setLevel(level)

        if not self.logger.handlers and not logging.getLogger().handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)
            self.logger.propagate = False

    def _log(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            entry['metadata'] = metadata
        if exc_info is not None:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(level, json.dumps(entry, default=str), exc_info=exc_info)

    def debug(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """Log ERROR; exc_info is summarised in the entry and attached to the record."""
        self._log(logging.ERROR, event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """Pass-through formatter: the message is already a JSON document."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(component: str, level: int = logging.INFO) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("loader", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
