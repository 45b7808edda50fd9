"""Logger Configuration.

Loguru-based structured logging configuration.

This module configures a unified logger for the application:
- Loguru for application logs (pretty format, colors, structured data)
- Intercept handler for third-party library logs (uvicorn, fastapi)
- Request/trace ID correlation from context variables
"""

from __future__ import annotations

import json
import logging
import re
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger

from catalog.shared.context import request_id_var, trace_id_var

if TYPE_CHECKING:
    from catalog.core.config import Settings

# Placeholder IDs outside of a request
NO_TRACE = "-"

SENSITIVE_PATTERNS = re.compile(
    r"(password|token|secret|key|auth|credential|api_key|access_token|refresh_token)",
    re.IGNORECASE,
)

_settings_cache: Settings | None = None


def _get_settings() -> Settings:
    """Get settings lazily to avoid circular imports."""
    global _settings_cache
    if _settings_cache is None:
        from catalog.core.config import settings

        _settings_cache = settings
    return _settings_cache


class InterceptHandler(logging.Handler):
    """Handler for intercepting standard logging and redirecting to Loguru.

    Uvicorn, FastAPI and our own ``logging.getLogger`` users log through the
    standard module; this handler gives all of them the Loguru format.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Re-emit a standard logging record through Loguru.

        Args:
            record: Log record from standard logging
        """
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)

        frame = logging.currentframe()
        depth = 2

        if frame:
            while frame.f_code.co_filename == logging.__file__:
                if frame.f_back:
                    frame = frame.f_back
                    depth += 1
                else:
                    break

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _context_patcher(record: dict[str, Any]) -> None:
    """Inject request correlation IDs into every log record."""
    record["extra"].setdefault("trace_id", trace_id_var.get() or NO_TRACE)
    request_id = request_id_var.get()
    if request_id:
        record["extra"].setdefault("request_id", request_id)


def _redact_sensitive_value(key: str, value: Any) -> Any:
    """Redact sensitive values based on key name."""
    if SENSITIVE_PATTERNS.search(key):
        return "***REDACTED***"
    return value


def build_log_entry(record: dict[str, Any], service_name: str) -> dict[str, Any]:
    """Build the structured representation of a Loguru record.

    Args:
        record: Loguru log record
        service_name: Name of the service for log entries

    Returns:
        JSON-serializable dictionary
    """
    log_entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["extra"].get("name", record["name"]),
        "function": record["function"],
        "line": record["line"],
        "trace_id": record["extra"].get("trace_id", NO_TRACE),
        "service": service_name,
    }

    excluded_keys = {"trace_id", "name"}
    for key, value in record["extra"].items():
        if key not in excluded_keys:
            log_entry[key] = _redact_sensitive_value(key, value)

    if record.get("exception"):
        exc = record["exception"]
        log_entry["exception"] = {
            "type": exc.type.__name__ if exc.type else None,
            "value": str(exc.value) if exc.value else None,
        }

    return log_entry


def _create_json_sink(service_name: str) -> Any:
    """Create a JSON sink for stdout logging."""

    def json_sink(message: Any) -> None:
        entry = build_log_entry(message.record, service_name)
        sys.stdout.write(json.dumps(entry, ensure_ascii=False, default=str) + "\n")
        sys.stdout.flush()

    return json_sink


def setup_logger(settings: Settings | None = None) -> None:
    """Configure Loguru logger.

    Sets up:
    - Console handler with colored output (dev) or JSON format (prod)
    - Request/trace ID correlation
    - Third-party library log interception
    - Thread-safe logging with enqueue=True
    """
    settings = settings or _get_settings()

    logger.remove()
    logger.configure(patcher=_context_patcher)

    is_prod = settings.logging.format.lower() == "json"

    if is_prod:
        logger.add(
            _create_json_sink(settings.app.name),
            level=settings.logging.level.upper(),
            backtrace=True,
            diagnose=False,  # Don't expose internal state in production
            enqueue=True,
        )
    else:
        dev_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level> | "
            "<dim>trace_id={extra[trace_id]}</dim>"
        )
        logger.add(
            sys.stdout,
            format=dev_format,
            level=settings.logging.level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=settings.app.debug,
            enqueue=True,
        )

    configure_third_party_loggers()

    logger.info(
        "Logger configured",
        level=settings.logging.level,
        format="json" if is_prod else "console",
    )


def configure_third_party_loggers() -> None:
    """Route standard logging from libraries through Loguru.

    uvicorn.access is kept at WARNING because the tracing middleware already
    logs every request.
    """
    logging.root.handlers = []
    logging.root.setLevel(logging.INFO)

    for logger_name in ("", "uvicorn", "uvicorn.access", "uvicorn.error", "fastapi", "catalog"):
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers.clear()
        logging_logger.addHandler(InterceptHandler())
        logging_logger.propagate = False

        if logger_name == "uvicorn.access":
            logging_logger.setLevel(logging.WARNING)
        else:
            logging_logger.setLevel(logging.INFO)

    logger.debug("Third-party loggers configured")


def get_logger(name: str):
    """Get a logger with the specified name.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Loguru logger with bound name
    """
    return logger.bind(name=name)
