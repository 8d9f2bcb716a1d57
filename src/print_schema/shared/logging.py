"""Structured logging utilities for Print Schema processing.

This module provides correlation-aware logging so that the reader, writer and
ticket builder can tag every record with the component that emitted it and the
caller's correlation ID (for example the printer a capabilities document was
fetched from).
"""

import logging
from typing import Any, Dict, MutableMapping, Optional, Tuple


class CorrelationLogger(logging.LoggerAdapter):
    """Logger adapter that adds correlation ID and component to every record."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name (typically __name__)
            correlation_id: Optional correlation ID for request tracking
            component: Component name for structured logging
        """
        super().__init__(logging.getLogger(name), {})
        self.correlation_id = correlation_id
        self.component = component or name.split(".")[-1]

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        """Merge correlation info into the ``extra`` mapping of a log call."""
        extra: Dict[str, Any] = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        if kwargs.get("extra"):
            extra.update(kwargs["extra"])
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, correlation_id: Optional[str]) -> "CorrelationLogger":
        """Return a logger for the same component with another correlation ID."""
        return CorrelationLogger(self.logger.name, correlation_id, self.component)


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger instance.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracking
        component: Component name for structured logging

    Returns:
        CorrelationLogger instance
    """
    return CorrelationLogger(name, correlation_id, component)
