"""Envelope model: one frozen dataclass per message variant.

Each variant carries only the fields legal for it, and ``kind`` is fixed by
the class, so a Request never exposes ``result`` and a reply never exposes
``method``.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from jsonrpc_envelope.errors import ErrorObject
from jsonrpc_envelope.types import MessageKind

JSONRPC_VERSION = "2.0"


@dataclass(frozen=True)
class Envelope:
    """Base class of all classified messages.

    Envelopes compare by value. They hash only when every field hashes, so a
    Success carrying a dict result raises TypeError from hash().
    """

    kind: ClassVar[MessageKind]
    version: ClassVar[str] = JSONRPC_VERSION

    @property
    def is_valid(self) -> bool:
        """False only for Invalid envelopes."""
        return self.kind is not MessageKind.INVALID


@dataclass(frozen=True)
class Request(Envelope):
    """Method call expecting a reply."""

    kind: ClassVar[MessageKind] = MessageKind.REQUEST

    id: str | int
    method: str
    params: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Wire mapping; params omitted when None."""
        d: dict[str, Any] = {"jsonrpc": self.version, "method": self.method}
        if self.params is not None:
            d["params"] = self.params
        d["id"] = self.id
        return d


@dataclass(frozen=True)
class Notification(Envelope):
    """Method call without an id; no reply is expected."""

    kind: ClassVar[MessageKind] = MessageKind.NOTIFICATION

    method: str
    params: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Wire mapping; params omitted when None."""
        d: dict[str, Any] = {"jsonrpc": self.version, "method": self.method}
        if self.params is not None:
            d["params"] = self.params
        return d


@dataclass(frozen=True)
class Success(Envelope):
    """Successful reply. ``result`` may be None when the peer sent JSON null."""

    kind: ClassVar[MessageKind] = MessageKind.SUCCESS

    id: str | int | None
    result: Any

    def to_dict(self) -> dict[str, Any]:
        """Wire mapping; id omitted when None."""
        d: dict[str, Any] = {"jsonrpc": self.version, "result": self.result}
        if self.id is not None:
            d["id"] = self.id
        return d


@dataclass(frozen=True)
class ErrorReply(Envelope):
    """Error reply."""

    kind: ClassVar[MessageKind] = MessageKind.ERROR

    id: str | int | None
    error: ErrorObject

    def to_dict(self) -> dict[str, Any]:
        """Wire mapping; id is always present, null when unknown."""
        return {"jsonrpc": self.version, "error": self.error.to_dict(), "id": self.id}


@dataclass(frozen=True)
class Invalid(Envelope):
    """Message that failed decoding or validation.

    ``id`` holds the decoded id when it was legal, so a server can still
    address its error reply.
    """

    kind: ClassVar[MessageKind] = MessageKind.INVALID

    error: ErrorObject
    id: str | int | None = None
