"""JSON-RPC 2.0 envelope model, builders and parser."""

from .builders import (
    MessageBuilder,
    build_batch,
    build_error,
    build_notification,
    build_request,
    build_success,
)
from .envelope import (
    JSONRPC_VERSION,
    Envelope,
    ErrorReply,
    Invalid,
    Notification,
    Request,
    Success,
)
from .ids import is_valid_id, rand_id, validate_id
from .parser import classify, parse, parse_batch, parse_batch_reply, parse_reply

__all__ = [
    # Envelope model
    "JSONRPC_VERSION",
    "Envelope",
    "Request",
    "Notification",
    "Success",
    "ErrorReply",
    "Invalid",
    # Ids
    "validate_id",
    "is_valid_id",
    "rand_id",
    # Builders
    "MessageBuilder",
    "build_request",
    "build_notification",
    "build_success",
    "build_error",
    "build_batch",
    # Parser
    "classify",
    "parse",
    "parse_batch",
    "parse_reply",
    "parse_batch_reply",
]
