"""Structured logging with OTEL trace context.

Usage:
    from jsonrpc_envelope.telemetry.logging import get_logger

    logger = get_logger("parser")
    logger.debug("Message classified as invalid", code=-32600)
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from opentelemetry import trace

from jsonrpc_envelope.types import LogFormat, LogLevel

ROOT_LOGGER_NAME = "jsonrpc_envelope"

_RESERVED_ATTRS = frozenset(
    (
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    )
)

_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter with trace context injection.

    Formats log records as JSON with:
    - timestamp (ISO 8601)
    - level
    - component (logger name)
    - message
    - trace_id / span_id (if a span is recording)
    - Additional fields from extra
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            if ctx.is_valid:
                log_data["trace_id"] = format(ctx.trace_id, "032x")
                log_data["span_id"] = format(ctx.span_id, "016x")

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class EnvelopeLogger:
    """Thin wrapper over a stdlib logger accepting extra fields as kwargs."""

    def __init__(self, name: str, level: int = logging.INFO):
        """Initialize logger.

        Args:
            name: Component name, nested under the package namespace
            level: Logging level
        """
        self._logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
        self._logger.setLevel(level)

    @property
    def name(self) -> str:
        """Fully qualified logger name."""
        return self._logger.name

    def is_enabled_for(self, level: int) -> bool:
        """Check whether records at level would be emitted."""
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra=kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, **kwargs)


# Logger cache
_loggers: dict[str, EnvelopeLogger] = {}


def get_logger(name: str, level: int = logging.NOTSET) -> EnvelopeLogger:
    """Get or create a structured logger.

    Component loggers default to NOTSET so the level configured on the
    package root logger applies.

    Args:
        name: Logger name (component name)
        level: Logging level

    Returns:
        EnvelopeLogger instance
    """
    if name not in _loggers:
        _loggers[name] = EnvelopeLogger(name, level)
    return _loggers[name]


def configure_logging(config: Any = None, stream: Any = None) -> logging.Logger:
    """Attach a stderr handler to the package root logger.

    Args:
        config: LoggingConfig instance (INFO / json when omitted)
        stream: Output stream, defaults to sys.stderr

    Returns:
        The configured package root logger
    """
    level = LogLevel(config.level) if config else LogLevel.INFO
    log_format = LogFormat(config.format) if config else LogFormat.JSON

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_LEVELS[level])

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if log_format == LogFormat.JSON:
        handler.setFormatter(StructuredLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)
    return root


def reset_loggers() -> None:
    """Reset logger cache and root handlers (for testing)."""
    global _loggers  # noqa: PLW0603
    _loggers = {}
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
