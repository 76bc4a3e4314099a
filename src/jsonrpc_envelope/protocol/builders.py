"""Outbound message construction.

Every builder returns the serialized message on success and an ErrorObject
on failure. Nothing is raised for bad ids or unencodable payloads.
"""

from typing import Any

from jsonrpc_envelope.config.models import CodecConfig
from jsonrpc_envelope.errors import ErrorObject, internal_error
from jsonrpc_envelope.telemetry.logging import get_logger

from .codec import encode
from .envelope import ErrorReply, Notification, Request, Success
from .ids import normalize_id, validate_id

logger = get_logger("builders")

RESULT_REQUIRED_MESSAGE = "result is required"
METHOD_REQUIRED_MESSAGE = "method must be a non-empty string"


class MessageBuilder:
    """JSON-RPC 2.0 message builder bound to encoder settings."""

    def __init__(self, codec: CodecConfig | None = None):
        """Initialize builder.

        Args:
            codec: Encoder settings (defaults to CodecConfig())
        """
        self.codec = codec or CodecConfig()

    def request(self, id: Any, method: str, params: Any = None) -> str | ErrorObject:
        """Build a request, or a notification when id is None.

        Args:
            id: Request id (string, integer or None)
            method: Method name
            params: Optional parameters, omitted when None

        Returns:
            JSON text, or an Internal error object
        """
        err = validate_id(id)
        if err is not None:
            return self._reject(err, "request", id=repr(id))
        if not isinstance(method, str) or not method:
            return self._reject(internal_error(METHOD_REQUIRED_MESSAGE), "request")

        req_id = normalize_id(id)
        envelope: Request | Notification
        if req_id is None:
            envelope = Notification(method=method, params=params)
        else:
            envelope = Request(id=req_id, method=method, params=params)
        return self._marshal(envelope)

    def notification(self, method: str, params: Any = None) -> str | ErrorObject:
        """Build a notification (no id, no reply expected)."""
        return self.request(None, method, params)

    def success(self, id: Any, result: Any) -> str | ErrorObject:
        """Build a success reply.

        Args:
            id: Id of the request being answered
            result: Result payload; None is rejected

        Returns:
            JSON text, or an Internal error object
        """
        if result is None:
            return self._reject(internal_error(RESULT_REQUIRED_MESSAGE), "success")
        err = validate_id(id)
        if err is not None:
            return self._reject(err, "success", id=repr(id))
        return self._marshal(Success(id=normalize_id(id), result=result))

    def error(self, id: Any, error: ErrorObject) -> str | ErrorObject:
        """Build an error reply embedding the given error object verbatim.

        Args:
            id: Id of the request being answered, or None
            error: Error object to embed

        Returns:
            JSON text, or an Internal error object
        """
        err = validate_id(id)
        if err is not None:
            return self._reject(err, "error", id=repr(id))
        if not isinstance(error, ErrorObject):
            return self._reject(internal_error("error must be an ErrorObject"), "error")
        return self._marshal(ErrorReply(id=normalize_id(id), error=error))

    @staticmethod
    def batch(*fragments: str) -> str:
        """Join already-serialized messages into a batch array."""
        return "[" + ",".join(fragments) + "]"

    def _marshal(self, envelope: Request | Notification | Success | ErrorReply) -> str | ErrorObject:
        try:
            return encode(envelope.to_dict(), self.codec)
        except (TypeError, ValueError, RecursionError) as e:
            return self._reject(internal_error(str(e)), envelope.kind.value)

    @staticmethod
    def _reject(err: ErrorObject, variant: str, **context: Any) -> ErrorObject:
        logger.debug("Message construction failed", variant=variant, reason=err.data, **context)
        return err


_default_builder = MessageBuilder()


def build_request(id: Any, method: str, params: Any = None) -> str | ErrorObject:
    """Build a request message; id None yields a notification."""
    return _default_builder.request(id, method, params)


def build_notification(method: str, params: Any = None) -> str | ErrorObject:
    """Build a notification message."""
    return _default_builder.notification(method, params)


def build_success(id: Any, result: Any) -> str | ErrorObject:
    """Build a success reply; a None result is an Internal error."""
    return _default_builder.success(id, result)


def build_error(id: Any, error: ErrorObject) -> str | ErrorObject:
    """Build an error reply."""
    return _default_builder.error(id, error)


def build_batch(*fragments: str) -> str:
    """Build a batch from serialized fragments; no fragments gives ``[]``."""
    return MessageBuilder.batch(*fragments)
