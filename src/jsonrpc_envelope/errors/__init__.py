"""Error catalog and structured errors."""

from .catalog import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    NATIVE_ERROR,
    PARSE_ERROR,
    ErrorCatalog,
    error_from,
    error_with,
    get_error_catalog,
    internal_error,
    invalid_params,
    invalid_request,
    method_not_found,
    parse_error,
)
from .errors import ConfigError, ConfigErrorTemplate, ErrorObject, ErrorTemplate
from .factory import create_error

__all__ = [
    # Core error types
    "ErrorObject",
    "ErrorTemplate",
    "ConfigErrorTemplate",
    "ConfigError",
    # Catalog
    "ErrorCatalog",
    "get_error_catalog",
    "parse_error",
    "invalid_request",
    "method_not_found",
    "invalid_params",
    "internal_error",
    "error_with",
    "error_from",
    # Codes
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "NATIVE_ERROR",
    # Config errors
    "create_error",
]
