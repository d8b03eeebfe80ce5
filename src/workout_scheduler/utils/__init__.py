"""Utility helpers."""

from .log_sanitizer import (
    LogSanitizationFilter,
    configure_logging,
    get_sanitization_filter,
    install_log_sanitizer,
    sanitize_string,
)
from .time_utils import Interval, format_hhmm, parse_hhmm, to_local_naive

__all__ = [
    "LogSanitizationFilter",
    "configure_logging",
    "get_sanitization_filter",
    "install_log_sanitizer",
    "sanitize_string",
    "Interval",
    "format_hhmm",
    "parse_hhmm",
    "to_local_naive",
]
