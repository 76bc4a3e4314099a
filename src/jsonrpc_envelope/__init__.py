"""jsonrpc-envelope - JSON-RPC 2.0 message construction and classification.

Builders turn typed inputs into wire text; the parser turns arbitrary text
into tagged envelopes. Failures on both sides are returned as values.
"""

from jsonrpc_envelope.errors import (
    ErrorObject,
    error_from,
    error_with,
    internal_error,
    invalid_params,
    invalid_request,
    method_not_found,
    parse_error,
)
from jsonrpc_envelope.protocol import (
    Envelope,
    ErrorReply,
    Invalid,
    MessageBuilder,
    Notification,
    Request,
    Success,
    build_batch,
    build_error,
    build_notification,
    build_request,
    build_success,
    classify,
    is_valid_id,
    parse,
    parse_batch,
    parse_batch_reply,
    parse_reply,
    rand_id,
    validate_id,
)
from jsonrpc_envelope.types import ErrorCondition, MessageKind

__version__ = "1.0.0"
__all__ = [
    "__version__",
    # Envelopes
    "Envelope",
    "Request",
    "Notification",
    "Success",
    "ErrorReply",
    "Invalid",
    "MessageKind",
    # Builders
    "MessageBuilder",
    "build_request",
    "build_notification",
    "build_success",
    "build_error",
    "build_batch",
    # Parser
    "parse",
    "parse_batch",
    "parse_reply",
    "parse_batch_reply",
    "classify",
    # Errors
    "ErrorObject",
    "ErrorCondition",
    "parse_error",
    "invalid_request",
    "method_not_found",
    "invalid_params",
    "internal_error",
    "error_with",
    "error_from",
    # Ids
    "validate_id",
    "is_valid_id",
    "rand_id",
]
