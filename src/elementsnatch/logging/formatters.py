"""
Log Formatters - Custom formatters for structured output.

Records may carry two extra fields, passed with `extra=`:
- selector: the selector path a record is about
- node_count: elements rendered by a serialization
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

CONTEXT_FIELDS = ("selector", "node_count")


def record_context(record: logging.LogRecord) -> dict:
    """Extra context fields present on a record."""
    return {field: getattr(record, field) for field in CONTEXT_FIELDS if hasattr(record, field)}


class JSONFormatter(logging.Formatter):
    """
    JSON-lines formatter, used for --log-file output.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class CompactFormatter(logging.Formatter):
    """
    Single-line console formatter; context fields follow the message.
    """

    LEVEL_SYMBOLS = {
        "DEBUG": "·",
        "INFO": "→",
        "WARNING": "⚠",
        "ERROR": "✗",
        "CRITICAL": "☠",
    }

    def format(self, record: logging.LogRecord) -> str:
        symbol = self.LEVEL_SYMBOLS.get(record.levelname, "?")
        line = f"{symbol} {record.getMessage()}"
        context = record_context(record)
        if context:
            line += " (" + ", ".join(f"{k}={v}" for k, v in context.items()) + ")"
        return line


def create_file_handler(path: str | Path, level: int = logging.DEBUG) -> logging.FileHandler:
    """
    Create a JSON-lines file handler, creating parent directories as needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler
