"""Common utilities for the alias registry."""

from .validators import is_valid_url, is_valid_validity, is_valid_short_code
from .url_builder import build_short_url, format_time_remaining
from .logging_config import LogBuffer, LogEntry, setup_logging, get_logger, get_log_buffer

__all__ = [
    "is_valid_url",
    "is_valid_validity",
    "is_valid_short_code",
    "build_short_url",
    "format_time_remaining",
    "LogBuffer",
    "LogEntry",
    "setup_logging",
    "get_logger",
    "get_log_buffer",
]
