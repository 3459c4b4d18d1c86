"""Logging configuration for the alias registry."""

import logging
import sys
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


LOGGER_NAME = "linkalias"

# Level names as the in-page log display labels them
_LEVEL_LABELS = {
    logging.DEBUG: "info",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


@dataclass
class LogEntry:
    """A log record kept for display."""

    timestamp: datetime
    level: str
    message: str
    data: Optional[Dict[str, Any]] = field(default=None)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level,
            "message": self.message,
            "data": self.data,
        }


class LogBuffer(logging.Handler):
    """Keep the most recent log records in memory.

    Structured context passed as ``extra={"context": {...}}`` is stored as the
    entry's ``data``.
    """

    def __init__(self, capacity: int = 500, level: int = logging.NOTSET):
        super().__init__(level)
        self._entries: deque = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = LogEntry(
                timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
                level=_LEVEL_LABELS.get(record.levelno, "info"),
                message=record.getMessage(),
                data=getattr(record, "context", None),
            )
            # handle() already holds the handler lock
            self._entries.append(entry)
        except Exception:
            self.handleError(record)

    def entries(self) -> List[LogEntry]:
        """Return a copy of the buffered entries, oldest first."""
        self.acquire()
        try:
            return list(self._entries)
        finally:
            self.release()

    def clear(self) -> None:
        """Drop all buffered entries."""
        self.acquire()
        try:
            self._entries.clear()
        finally:
            self.release()


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    buffer_size: int = 0,
) -> logging.Logger:
    """Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        json_format: Whether to use JSON format
        buffer_size: Attach a LogBuffer of this capacity when positive

    Returns:
        Configured logger
    """
    # Convert level string to logging constant
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # Create logger
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Remove existing handlers
    logger.handlers.clear()

    # Create formatter
    if json_format:
        # JSON formatter for structured logging
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s"}'
        )
    else:
        # Standard formatter
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if buffer_size > 0:
        logger.addHandler(LogBuffer(capacity=buffer_size))

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def get_log_buffer(logger: Optional[logging.Logger] = None) -> Optional[LogBuffer]:
    """Return the LogBuffer attached to a logger, if any."""
    logger = logger or get_logger()
    for handler in logger.handlers:
        if isinstance(handler, LogBuffer):
            return handler
    return None
