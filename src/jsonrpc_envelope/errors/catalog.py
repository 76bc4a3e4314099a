"""Reserved JSON-RPC 2.0 error catalog.

The table is a read-only mapping of frozen templates. Every accessor returns
a fresh ErrorObject, optionally carrying a caller supplied ``data`` payload.
"""

from types import MappingProxyType
from typing import Any

from jsonrpc_envelope.types import ErrorCondition

from .errors import ErrorObject, ErrorTemplate

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# Code used when wrapping a native exception.
NATIVE_ERROR = -32701

_TEMPLATES = MappingProxyType(
    {
        ErrorCondition.PARSE_ERROR: ErrorTemplate(code=PARSE_ERROR, message="Parse error"),
        ErrorCondition.INVALID_REQUEST: ErrorTemplate(code=INVALID_REQUEST, message="Invalid Request"),
        ErrorCondition.METHOD_NOT_FOUND: ErrorTemplate(code=METHOD_NOT_FOUND, message="Method not found"),
        ErrorCondition.INVALID_PARAMS: ErrorTemplate(code=INVALID_PARAMS, message="Invalid params"),
        ErrorCondition.INTERNAL_ERROR: ErrorTemplate(code=INTERNAL_ERROR, message="Internal error"),
    }
)


class ErrorCatalog:
    """Read-only view over the reserved error table."""

    def __init__(self) -> None:
        """Bind the catalog to the static template table."""
        self._templates = _TEMPLATES
        self._by_code = MappingProxyType({t.code: c for c, t in _TEMPLATES.items()})

    @property
    def templates(self) -> MappingProxyType:
        """Read-only condition to template mapping."""
        return self._templates

    def get_template(self, condition: ErrorCondition) -> ErrorTemplate:
        """Get template by condition.

        Args:
            condition: Reserved error condition

        Returns:
            ErrorTemplate for the condition

        Raises:
            ValueError: If condition is not a reserved condition
        """
        try:
            return self._templates[ErrorCondition(condition)]
        except (KeyError, ValueError) as e:
            msg = f"Unknown error condition: {condition}"
            raise ValueError(msg) from e

    def list_codes(self) -> list[int]:
        """List all reserved error codes."""
        return [t.code for t in self._templates.values()]

    def condition_for(self, code: int) -> ErrorCondition | None:
        """Reverse lookup of a reserved code, None for application codes."""
        return self._by_code.get(code)

    def create(self, condition: ErrorCondition, data: Any = None) -> ErrorObject:
        """Create error object from template.

        Args:
            condition: Reserved error condition
            data: Optional free-form payload

        Returns:
            ErrorObject instance
        """
        template = self.get_template(condition)
        return ErrorObject(code=template.code, message=template.message, data=data)


_catalog = ErrorCatalog()


def get_error_catalog() -> ErrorCatalog:
    """Get the shared catalog instance."""
    return _catalog


def parse_error(data: Any = None) -> ErrorObject:
    """Invalid JSON was received."""
    return _catalog.create(ErrorCondition.PARSE_ERROR, data)


def invalid_request(data: Any = None) -> ErrorObject:
    """The JSON sent is not a valid envelope."""
    return _catalog.create(ErrorCondition.INVALID_REQUEST, data)


def method_not_found(data: Any = None) -> ErrorObject:
    """The method does not exist or is not available."""
    return _catalog.create(ErrorCondition.METHOD_NOT_FOUND, data)


def invalid_params(data: Any = None) -> ErrorObject:
    """Invalid method parameter(s)."""
    return _catalog.create(ErrorCondition.INVALID_PARAMS, data)


def internal_error(data: Any = None) -> ErrorObject:
    """Internal JSON-RPC error."""
    return _catalog.create(ErrorCondition.INTERNAL_ERROR, data)


def error_with(code: int, message: str, data: Any = None) -> ErrorObject:
    """Build an application-defined error object.

    Args:
        code: Error code, any integer
        message: Short description
        data: Optional free-form payload

    Returns:
        ErrorObject instance
    """
    return ErrorObject(code=code, message=message, data=data)


def error_from(exc: BaseException, code: int = NATIVE_ERROR) -> ErrorObject:
    """Wrap a native exception, using its text as the message."""
    return ErrorObject(code=code, message=str(exc))
