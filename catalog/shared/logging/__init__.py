"""Shared Logging Configuration.

Loguru-based logging module with:
- Structured JSON logging for production
- Colored console output for development
- Request/trace ID correlation
- Automatic sensitive data redaction
"""

from loguru import logger

from .config import (
    InterceptHandler,
    build_log_entry,
    configure_third_party_loggers,
    get_logger,
    setup_logger,
)

__all__ = [
    "logger",
    "setup_logger",
    "get_logger",
    "build_log_entry",
    "InterceptHandler",
    "configure_third_party_loggers",
]
