"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Automatic sanitization of sensitive fields (user passwords, DSNs)
- Context binding support

The log level comes from lightbnb.config.settings (LOG_LEVEL, default INFO).

Usage:
    >>> from lightbnb.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("repository.add_user.completed", table="users")
"""

import logging
import os
import re
from typing import Any, Dict, MutableMapping

import structlog
from structlog.types import EventDict, Processor

from lightbnb.config import get_settings

# Sensitive key patterns for sanitization
SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^DATABASE_URL$", re.IGNORECASE),
    re.compile(r"^dsn$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"


def _is_sensitive(key: str) -> bool:
    return any(pattern.match(key) for pattern in SENSITIVE_PATTERNS)


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Nested dictionaries are sanitized recursively.

    Example:
        >>> sanitize_for_logging({"password": "secret123", "email": "a@b.c"})
        {'password': '[REDACTED]', 'email': 'a@b.c'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if _is_sensitive(key):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that redacts sensitive fields in event_dict."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level() -> int:
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        # Settings validation failed; logging must still come up so the
        # failure itself can be reported.
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _configure_structlog() -> None:
    """Configure stdlib logging and structlog with JSON rendering."""
    level = _get_log_level()
    logging.basicConfig(format="%(message)s", level=level, handlers=[])

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(accessor="get_all_properties", limit=10)
        >>> logger.info("repository.query_started")
    """
    return structlog.get_logger().bind(**kwargs)
