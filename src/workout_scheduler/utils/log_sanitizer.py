"""Log sanitization filter to keep calendar credentials and PII out of logs.

Calendar integrations carry OAuth access tokens, and activity titles or
notes may contain e-mail addresses. This filter redacts:
- Google OAuth access and refresh tokens
- Bearer tokens and authorization headers
- JWT tokens
- Token, password and secret fields
- Email addresses

Usage:
    from workout_scheduler.utils.log_sanitizer import install_log_sanitizer

    # Apply to all loggers at application startup
    install_log_sanitizer()
"""

import logging
import re
from typing import Any


class LogSanitizationFilter(logging.Filter):
    """Logging filter that redacts sensitive information from log messages."""

    # Order matters - more specific patterns come before general ones
    PATTERNS: list[tuple[re.Pattern, str]] = [
        # Google OAuth access tokens (ya29.)
        (re.compile(r'\bya29\.[a-zA-Z0-9_\-\.]{10,}'), '[REDACTED_GOOGLE_TOKEN]'),

        # Google OAuth refresh tokens (1//...)
        (re.compile(r'\b1//[a-zA-Z0-9_\-]{10,}'), '[REDACTED_REFRESH_TOKEN]'),

        # JWT tokens - before Bearer
        (re.compile(r'\beyJ[a-zA-Z0-9_-]+\.eyJ[a-zA-Z0-9_-]+\.[a-zA-Z0-9_-]+'), '[REDACTED_JWT]'),

        # Bearer tokens in Authorization headers
        (re.compile(r'Bearer\s+(?!\[REDACTED)[a-zA-Z0-9_\-\.]+', re.IGNORECASE), 'Bearer [REDACTED_TOKEN]'),

        # Authorization header values (generic)
        (re.compile(r'(Authorization["\']?\s*[:=]\s*["\']?)(?!Bearer)[^"\'&\s]+', re.IGNORECASE), r'\1[REDACTED]'),

        # Password and secret fields
        (re.compile(r'(password["\']?\s*[:=]\s*["\']?)[^"\'&\s]+', re.IGNORECASE), r'\1[REDACTED]'),
        (re.compile(r'(client_secret["\']?\s*[:=]\s*["\']?)[^"\'&\s]+', re.IGNORECASE), r'\1[REDACTED]'),
        (re.compile(r'(secret["\']?\s*[:=]\s*["\']?)[^"\'&\s]+', re.IGNORECASE), r'\1[REDACTED]'),

        # Token fields
        (re.compile(r'(access_token["\']?\s*[:=]\s*["\']?)(?!\[REDACTED)[^"\'&\s]+', re.IGNORECASE), r'\1[REDACTED]'),
        (re.compile(r'(refresh_token["\']?\s*[:=]\s*["\']?)(?!\[REDACTED)[^"\'&\s]+', re.IGNORECASE), r'\1[REDACTED]'),

        # OAuth code (in URLs or params)
        (re.compile(r'(code["\']?\s*[:=]\s*["\']?)[a-zA-Z0-9_/-]{20,}', re.IGNORECASE), r'\1[REDACTED]'),

        # Email addresses
        (re.compile(r'\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b'), '[REDACTED_EMAIL]'),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize the log record in place and let it through."""
        if record.msg:
            record.msg = self._sanitize(str(record.msg))

        if record.args:
            record.args = self._sanitize_args(record.args)

        return True

    def _sanitize(self, text: str) -> str:
        for pattern, replacement in self.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def _sanitize_args(self, args: Any) -> Any:
        """Recursively sanitize log arguments."""
        if isinstance(args, str):
            return self._sanitize(args)
        elif isinstance(args, tuple):
            return tuple(self._sanitize_args(arg) for arg in args)
        elif isinstance(args, list):
            return [self._sanitize_args(arg) for arg in args]
        elif isinstance(args, dict):
            return {k: self._sanitize_args(v) for k, v in args.items()}
        else:
            # Only replace primitives whose string form actually changed
            str_val = str(args)
            sanitized = self._sanitize(str_val)
            return sanitized if sanitized != str_val else args


def install_log_sanitizer(logger_name: str | None = None) -> None:
    """Install the log sanitization filter on loggers.

    Args:
        logger_name: If provided, install only on the named logger.
                    If None, install on the root logger and its handlers.
    """
    sanitizer = LogSanitizationFilter()

    if logger_name:
        logging.getLogger(logger_name).addFilter(sanitizer)
        return

    root_logger = logging.getLogger()
    root_logger.addFilter(sanitizer)
    for handler in root_logger.handlers:
        handler.addFilter(sanitizer)


def configure_logging(level: str = "INFO") -> None:
    """Set up a basic stream handler and install the sanitizer on it."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    install_log_sanitizer()


def get_sanitization_filter() -> LogSanitizationFilter:
    """Get a new instance of the sanitization filter."""
    return LogSanitizationFilter()


def sanitize_string(text: str) -> str:
    """Sanitize a string without going through the logging system.

    Useful for error messages that might be returned to clients.
    """
    return LogSanitizationFilter()._sanitize(text)
