"""Shared utilities for Print Schema processing.

This module provides the configuration objects and logging helpers used
across the reader, writer and ticket layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    PrintSchemaConfig,
    ReaderConfig,
    WriterConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "PrintSchemaConfig",
    "ReaderConfig",
    "WriterConfig",
    "CorrelationLogger",
    "get_logger",
]
