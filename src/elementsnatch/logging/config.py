"""
Logging Configuration - Structured logging with Rich console.

Provides pretty, structured logging for selector and serialization runs.
"""

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from elementsnatch.logging.formatters import CompactFormatter, create_file_handler

# Custom theme for Elementsnatch logs
SNATCH_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim",
        "menu": "bold green",
        "path": "bold magenta",
        "notice": "bold cyan",
    }
)

# Shared console instance, on stderr so stdout stays clean for piped output
console = Console(theme=SNATCH_THEME, stderr=True)


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO",
    show_path: bool = False,
    log_file: str | None = None,
    log_format: Literal["rich", "compact"] = "rich",
) -> None:
    """
    Configure logging with Rich console handler.

    Args:
        level: Logging level
        show_path: Show file path in log messages
        log_file: Optional path for a JSON-lines log file
        log_format: "rich" for the Rich handler, "compact" for single-line output
    """
    if log_format == "compact":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(CompactFormatter())
    else:
        handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=show_path,
            rich_tracebacks=True,
            markup=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    handlers: list[logging.Handler] = [handler]
    if log_file:
        handlers.append(create_file_handler(log_file))

    # Configure root elementsnatch logger
    snatch_logger = logging.getLogger("elementsnatch")
    snatch_logger.setLevel(level)
    snatch_logger.handlers = handlers
    snatch_logger.propagate = False

    for name in ["elementsnatch.dom", "elementsnatch.cli", "elementsnatch.menu"]:
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with elementsnatch prefix.

    Args:
        name: Logger name (will be prefixed with 'elementsnatch.')

    Returns:
        Configured logger
    """
    if not name.startswith("elementsnatch."):
        name = f"elementsnatch.{name}"
    return logging.getLogger(name)


class SnatchLogger:
    """
    Structured logger for Elementsnatch operations.

    Provides semantic logging methods for different operation types.
    """

    def __init__(self, name: str = "elementsnatch"):
        self._logger = get_logger(name)

    def menu(self, mode: str, item_count: int) -> None:
        """Log menu construction."""
        self._logger.info(f"[menu]Menu[/menu] ({mode}): {item_count} ancestors")

    def path(self, descendant: str, status: str = "found") -> None:
        """Log a synthesized path."""
        truncated = descendant[:80] + ("..." if len(descendant) > 80 else "")
        self._logger.debug(
            f"[path]Path[/path] ({status}): {truncated}", extra={"selector": descendant}
        )

    def copied(self, what: str, ok: bool) -> None:
        """Log clipboard result."""
        if ok:
            self._logger.info(f"[green]✓[/green] {what} copied")
        else:
            self._logger.warning(f"[warning]{what}: copy failed[/warning]")

    def serialized(self, node_count: int, group_count: int) -> None:
        """Log a finished serialization."""
        self._logger.debug(
            f"Rendered {node_count} nodes, {group_count} groups",
            extra={"node_count": node_count},
        )

    def truncated(self, max_nodes: int) -> None:
        """Log a serializer truncation."""
        self._logger.warning(f"[warning]Serialization truncated at {max_nodes} nodes[/warning]")

    def error(self, message: str, exc: Exception | None = None) -> None:
        """Log error."""
        self._logger.error(f"[error]{message}[/error]", exc_info=exc)

    def warning(self, message: str) -> None:
        """Log warning."""
        self._logger.warning(f"[warning]{message}[/warning]")

    def success(self, message: str) -> None:
        """Log success message."""
        self._logger.info(f"[green]✓[/green] {message}")

    def debug(self, message: str) -> None:
        """Log debug message."""
        self._logger.debug(message)

    def info(self, message: str) -> None:
        """Log info message."""
        self._logger.info(message)


# Default logger instance
logger = SnatchLogger()
