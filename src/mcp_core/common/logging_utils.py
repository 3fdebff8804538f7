"""
Logging utilities for the command core.

This module provides:
- Structured loggers backed by structlog
- One-call configuration of stdlib logging and structlog
- Redaction of sensitive values in structured log events
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from enum import Enum
from typing import Any

import structlog


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"


DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d %(message)s"

# Default set of fields to redact
DEFAULT_REDACTED_FIELDS = {
    "api_key",
    "access_token",
    "client_secret",
    "password",
    "secret",
    "authorization",
    "credentials",
    "connection_string",
}


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.get_logger(name)  # type: ignore


def redact(value: str, mask: str = "***") -> str:
    """Redact a sensitive value, keeping two characters on each side."""
    if not value:
        return value

    if len(value) > 6:
        return f"{value[0:2]}{mask}{value[-2:]}"
    return mask


def redact_dict(
    data: MutableMapping[str, Any],
    redacted_fields: set[str] | None = None,
    mask: str = "***",
) -> dict[str, Any]:
    """Redact sensitive fields in a dictionary.

    Args:
        data: The dictionary to redact
        redacted_fields: The fields to redact
        mask: The mask to use

    Returns:
        The redacted dictionary
    """
    if redacted_fields is None:
        redacted_fields = DEFAULT_REDACTED_FIELDS

    result: dict[str, Any] = {}

    for key, value in data.items():
        if key.lower() in redacted_fields:
            result[key] = redact(value, mask) if isinstance(value, str) else mask
        elif isinstance(value, dict):
            result[key] = redact_dict(value, redacted_fields, mask)
        elif isinstance(value, list):
            result[key] = [
                (
                    redact_dict(item, redacted_fields, mask)
                    if isinstance(item, dict)
                    else item
                )
                for item in value
            ]
        else:
            result[key] = value

    return result


class RedactionProcessor:
    """structlog processor that redacts sensitive keys in the event dict."""

    def __init__(self, redacted_fields: set[str] | None = None, mask: str = "***"):
        self.redacted_fields = redacted_fields or DEFAULT_REDACTED_FIELDS
        self.mask = mask

    def __call__(
        self, logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        return redact_dict(event_dict, self.redacted_fields, self.mask)


def _renderer_for(log_format: LogFormat) -> Any:
    if log_format is LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    if log_format is LogFormat.CONSOLE:
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.KeyValueRenderer(key_order=["event"])


def configure_logging(
    level: int = logging.INFO,
    log_format: LogFormat | str = LogFormat.CONSOLE,
    log_file: str | None = None,
) -> None:
    """Configure stdlib logging and structlog together.

    Args:
        level: Logging level
        log_format: Renderer used for structured events
        log_file: Optional log file path
    """
    fmt = LogFormat(log_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=DEFAULT_LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            RedactionProcessor(),
            _renderer_for(fmt),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
