"""Tests for structured logging with trace context."""

import json
import logging
from io import StringIO

import pytest
from opentelemetry.sdk.trace import TracerProvider

from jsonrpc_envelope.config.models import LoggingConfig
from jsonrpc_envelope.protocol.parser import parse
from jsonrpc_envelope.telemetry.logging import (
    ROOT_LOGGER_NAME,
    EnvelopeLogger,
    StructuredLogFormatter,
    configure_logging,
    get_logger,
)
from jsonrpc_envelope.types import LogFormat, LogLevel


@pytest.fixture(autouse=True)
def reset_logger_state(clean_loggers):
    """Reset logger state before and after each test."""
    yield


def make_record(msg: str = "Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestStructuredLogFormatter:
    """Tests for StructuredLogFormatter."""

    def test_formats_as_json(self):
        """Test log record is formatted as JSON."""
        data = json.loads(StructuredLogFormatter().format(make_record()))
        assert data["message"] == "Test message"
        assert data["level"] == "INFO"
        assert data["component"] == "test"
        assert "T" in data["timestamp"]

    def test_includes_extra_fields(self):
        """Test extra fields are included in output."""
        record = make_record()
        record.code = -32600
        record.reason = "invalid jsonrpc version"
        data = json.loads(StructuredLogFormatter().format(record))
        assert data["code"] == -32600
        assert data["reason"] == "invalid jsonrpc version"

    def test_no_trace_context_without_span(self):
        data = json.loads(StructuredLogFormatter().format(make_record()))
        assert "trace_id" not in data

    def test_includes_trace_context(self):
        """Trace and span ids are injected when a span is recording."""
        tracer = TracerProvider().get_tracer(__name__)
        with tracer.start_as_current_span("parse") as span:
            data = json.loads(StructuredLogFormatter().format(make_record()))
            ctx = span.get_span_context()
        assert data["trace_id"] == format(ctx.trace_id, "032x")
        assert data["span_id"] == format(ctx.span_id, "016x")


class TestGetLogger:
    """Tests for get_logger."""

    def test_cached(self):
        assert get_logger("parser") is get_logger("parser")

    def test_namespaced(self):
        logger = get_logger("parser")
        assert isinstance(logger, EnvelopeLogger)
        assert logger.name == f"{ROOT_LOGGER_NAME}.parser"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self):
        stream = StringIO()
        configure_logging(LoggingConfig(level=LogLevel.DEBUG, format=LogFormat.JSON), stream=stream)
        get_logger("test").info("hello", variant="request")
        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "hello"
        assert data["component"] == f"{ROOT_LOGGER_NAME}.test"
        assert data["variant"] == "request"

    def test_text_output(self):
        stream = StringIO()
        configure_logging(LoggingConfig(level=LogLevel.INFO, format=LogFormat.TEXT), stream=stream)
        get_logger("test").warning("careful")
        assert stream.getvalue().strip() == f"WARNING [{ROOT_LOGGER_NAME}.test] careful"

    def test_level_filters(self):
        stream = StringIO()
        configure_logging(LoggingConfig(level=LogLevel.ERROR), stream=stream)
        get_logger("test").info("dropped")
        assert stream.getvalue() == ""

    def test_reconfigure_replaces_handler(self):
        configure_logging(LoggingConfig(), stream=StringIO())
        root = configure_logging(LoggingConfig(), stream=StringIO())
        assert len(root.handlers) == 1

    def test_parser_logs_invalid_messages_at_debug(self):
        stream = StringIO()
        configure_logging(LoggingConfig(level=LogLevel.DEBUG), stream=stream)
        parse('{"jsonrpc":"1.0","method":"m","id":1}')
        data = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert data["message"] == "Message classified as invalid"
        assert data["code"] == -32600
        assert data["reason"] == "invalid jsonrpc version"

    def test_parser_silent_at_info(self):
        stream = StringIO()
        configure_logging(LoggingConfig(level=LogLevel.INFO), stream=stream)
        parse("")
        assert stream.getvalue() == ""
