"""
Logging Utilities

Logger factory and request context propagation for log records.
"""

import logging
from contextvars import ContextVar
from typing import Optional

# Context variable for request tracking
request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)


class RequestContextFilter(logging.Filter):
    """Add request context to log records"""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'request_id'):
            record.request_id = request_id.get() or '-'
        return True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger for the given module or component.

    Names outside the ``app`` namespace are nested under it so that
    they share the application handlers.
    """
    if not name:
        return logging.getLogger("app")
    if name == "app" or name.startswith("app."):
        return logging.getLogger(name)
    return logging.getLogger(f"app.{name}")

