"""
Structured Logging for Quadra
=============================

Bounded Context: Observability

JSON-structured logging for rectangle analysis runs.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from quadra_logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="analyzer")
    >>> logger.info(
    ...     event=LogEvent.BATCH_COMPLETED,
    ...     message="Processed 5 rows",
    ...     metadata={'rows': 5}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
