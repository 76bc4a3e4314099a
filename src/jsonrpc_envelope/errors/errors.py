"""Error value types and the configuration exception."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class ErrorObject:
    """JSON-RPC 2.0 error member: ``{"code", "message", "data"?}``."""

    code: int
    message: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire mapping.

        Returns:
            Mapping with code, message and, when set, data
        """
        d: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            d["data"] = self.data
        return d

    def with_data(self, data: Any) -> "ErrorObject":
        """Return copy carrying the given data payload."""
        return replace(self, data=data)

    @classmethod
    def from_dict(cls, raw: Any) -> "ErrorObject":
        """Build an error object from a decoded ``error`` member.

        Args:
            raw: Decoded JSON value

        Returns:
            ErrorObject instance

        Raises:
            ValueError: If raw is not an object with integer code and string message
        """
        if not isinstance(raw, dict):
            raise ValueError("error member must be an object")
        code = raw.get("code")
        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError("error code must be an integer")
        message = raw.get("message")
        if not isinstance(message, str):
            raise ValueError("error message must be a string")
        return cls(code=code, message=message, data=raw.get("data"))


@dataclass(frozen=True)
class ErrorTemplate:
    """Template for a reserved JSON-RPC error."""

    code: int
    message: str
    detail: str | None = None


@dataclass(frozen=True)
class ConfigErrorTemplate:
    """Template for creating a ConfigError."""

    code: str
    message: str
    detail: str | None = None


@dataclass
class ConfigError(Exception):
    """Raised when the package configuration cannot be loaded."""

    code: str  # e.g., "CONFIG_INVALID"
    message: str
    detail: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message if self.detail is None else f"{self.message}: {self.detail}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and diagnostics.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
            "timestamp": self.timestamp.isoformat(),
        }
