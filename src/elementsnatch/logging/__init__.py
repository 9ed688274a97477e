"""
Elementsnatch Logging Module.

Provides structured logging with Rich console output.
"""

from elementsnatch.logging.config import (
    SnatchLogger,
    console,
    get_logger,
    logger,
    setup_logging,
)
from elementsnatch.logging.formatters import (
    CompactFormatter,
    JSONFormatter,
    create_file_handler,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "SnatchLogger",
    "logger",
    "console",
    "JSONFormatter",
    "CompactFormatter",
    "create_file_handler",
]
