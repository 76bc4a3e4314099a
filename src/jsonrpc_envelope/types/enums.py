"""Shared enumerations for jsonrpc-envelope."""

from enum import Enum


class MessageKind(str, Enum):
    """Classification tag of a JSON-RPC envelope."""

    REQUEST = "request"
    NOTIFICATION = "notification"
    SUCCESS = "success"
    ERROR = "error"
    INVALID = "invalid"


class ErrorCondition(str, Enum):
    """Reserved JSON-RPC 2.0 error conditions."""

    PARSE_ERROR = "PARSE_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    METHOD_NOT_FOUND = "METHOD_NOT_FOUND"
    INVALID_PARAMS = "INVALID_PARAMS"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class LogLevel(str, Enum):
    """Log verbosity level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log output format."""

    JSON = "json"
    TEXT = "text"
