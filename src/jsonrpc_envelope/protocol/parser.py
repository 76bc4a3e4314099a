"""Inbound message parsing and classification.

Classification order for a decoded object:

1. the value must be a JSON object
2. ``jsonrpc`` must be exactly ``"2.0"``
3. ``id`` must be a string, an integer or null
4. a non-empty ``method`` makes a Request (id set) or Notification (id null
   or missing); otherwise a non-null ``error`` makes an ErrorReply;
   otherwise a ``result`` key (even holding null) makes a Success
5. anything else is Invalid

Failures never raise. They come back as Invalid envelopes carrying a
catalog error: Parse error for undecodable text, Invalid Request for
everything else.
"""

from typing import Any

from jsonrpc_envelope.errors import ErrorObject, invalid_request, parse_error
from jsonrpc_envelope.telemetry.logging import get_logger
from jsonrpc_envelope.types import MessageKind

from .codec import decode
from .envelope import (
    JSONRPC_VERSION,
    Envelope,
    ErrorReply,
    Invalid,
    Notification,
    Request,
    Success,
)
from .ids import INVALID_ID_MESSAGE, RequestId, is_valid_id, normalize_id

logger = get_logger("parser")

EMPTY_MESSAGE = "empty message"
INVALID_VERSION_MESSAGE = "invalid jsonrpc version"
INVALID_OBJECT_MESSAGE = "invalid jsonrpc object"
NOT_AN_OBJECT_MESSAGE = "message must be a JSON object"
NOT_AN_ARRAY_MESSAGE = "batch must be a JSON array"
NOT_TEXT_MESSAGE = "message must be str or bytes"
METHOD_TYPE_MESSAGE = "method must be a string"
UNEXPECTED_BATCH_MESSAGE = "expected a single message, got a batch"


class _Rejected(Exception):
    """Internal short-circuit carrying the error of an Invalid envelope."""

    def __init__(self, error: ErrorObject, id: RequestId = None):
        super().__init__(error.message)
        self.error = error
        self.id = id

    def to_envelope(self) -> Invalid:
        return _invalid(self.error, self.id)


def _invalid(error: ErrorObject, id: RequestId = None) -> Invalid:
    logger.debug("Message classified as invalid", code=error.code, reason=error.data)
    return Invalid(error=error, id=id)


def _to_text(raw: Any) -> str:
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise _Rejected(parse_error(str(e))) from e
    if not isinstance(raw, str):
        raise _Rejected(invalid_request(NOT_TEXT_MESSAGE))
    return raw


def _looks_like_batch(text: str) -> bool:
    stripped = text.strip()
    return stripped.startswith("[") and stripped.endswith("]")


def _load(text: str) -> Any:
    if not text.strip():
        raise _Rejected(invalid_request(EMPTY_MESSAGE))
    try:
        return decode(text)
    except (ValueError, RecursionError) as e:
        raise _Rejected(parse_error(str(e))) from e


def _legal_id(obj: dict[str, Any]) -> RequestId:
    raw_id = obj.get("id")
    return normalize_id(raw_id) if is_valid_id(raw_id) else None


def _classify(obj: Any) -> Envelope:
    if not isinstance(obj, dict):
        raise _Rejected(invalid_request(NOT_AN_OBJECT_MESSAGE))

    version = obj.get("jsonrpc")
    if not isinstance(version, str) or version != JSONRPC_VERSION:
        raise _Rejected(invalid_request(INVALID_VERSION_MESSAGE), _legal_id(obj))

    raw_id = obj.get("id")
    if not is_valid_id(raw_id):
        raise _Rejected(invalid_request(INVALID_ID_MESSAGE))
    req_id = normalize_id(raw_id)

    method = obj.get("method")
    if method is not None and not isinstance(method, str):
        raise _Rejected(invalid_request(METHOD_TYPE_MESSAGE), req_id)

    if method:
        params = obj.get("params")
        if req_id is None:
            return Notification(method=method, params=params)
        return Request(id=req_id, method=method, params=params)

    if obj.get("error") is not None:
        try:
            error = ErrorObject.from_dict(obj["error"])
        except ValueError as e:
            raise _Rejected(invalid_request(str(e)), req_id) from e
        return ErrorReply(id=req_id, error=error)

    if "result" in obj:
        return Success(id=req_id, result=obj["result"])

    raise _Rejected(invalid_request(INVALID_OBJECT_MESSAGE), req_id)


def _as_reply(envelope: Envelope) -> Envelope:
    if envelope.kind in (MessageKind.REQUEST, MessageKind.NOTIFICATION):
        return _invalid(invalid_request(INVALID_OBJECT_MESSAGE), getattr(envelope, "id", None))
    return envelope


def classify(obj: Any) -> Envelope:
    """Classify an already decoded JSON value.

    Args:
        obj: Decoded JSON value

    Returns:
        Request, Notification, Success, ErrorReply or Invalid
    """
    try:
        return _classify(obj)
    except _Rejected as r:
        return r.to_envelope()


def _parse_single(text: str) -> Envelope:
    try:
        return _classify(_load(text))
    except _Rejected as r:
        return r.to_envelope()


def parse(raw: str | bytes) -> Envelope | list[Envelope]:
    """Parse one message, or a batch when the text is bracket-delimited.

    Args:
        raw: JSON text or UTF-8 bytes

    Returns:
        A single envelope, or a list of envelopes for batch input
    """
    try:
        text = _to_text(raw)
    except _Rejected as r:
        return r.to_envelope()

    if _looks_like_batch(text):
        return parse_batch(text)
    return _parse_single(text)


def parse_batch(raw: str | bytes) -> list[Envelope]:
    """Parse a batch; each element is classified independently.

    A batch whose outer array cannot be decoded collapses into a single
    Invalid element carrying Parse error.

    Args:
        raw: JSON array text or UTF-8 bytes

    Returns:
        List of envelopes, in input order
    """
    try:
        decoded = _load(_to_text(raw))
    except _Rejected as r:
        return [r.to_envelope()]

    if not isinstance(decoded, list):
        return [_invalid(invalid_request(NOT_AN_ARRAY_MESSAGE))]
    return [classify(item) for item in decoded]


def parse_reply(raw: str | bytes) -> Envelope:
    """Parse a single reply; requests and notifications are Invalid."""
    try:
        text = _to_text(raw)
    except _Rejected as r:
        return r.to_envelope()

    if _looks_like_batch(text):
        return _invalid(invalid_request(UNEXPECTED_BATCH_MESSAGE))
    return _as_reply(_parse_single(text))


def parse_batch_reply(raw: str | bytes) -> list[Envelope]:
    """Parse a batch of replies; request-shaped elements are Invalid."""
    return [_as_reply(envelope) for envelope in parse_batch(raw)]
