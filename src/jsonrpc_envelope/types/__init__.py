"""Shared types for jsonrpc-envelope.

Import from here rather than submodules:
    from jsonrpc_envelope.types import MessageKind, LogLevel
"""

from .enums import ErrorCondition, LogFormat, LogLevel, MessageKind
from .validation import ValidationIssue, ValidationResult

__all__ = [
    # Enums
    "MessageKind",
    "ErrorCondition",
    "LogLevel",
    "LogFormat",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]
