"""Telemetry: structured logging."""

from .logging import (
    EnvelopeLogger,
    StructuredLogFormatter,
    configure_logging,
    get_logger,
    reset_loggers,
)

__all__ = [
    "EnvelopeLogger",
    "StructuredLogFormatter",
    "configure_logging",
    "get_logger",
    "reset_loggers",
]
