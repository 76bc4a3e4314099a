"""Request id validation and generation.

Legal ids are strings, integers and null. Integral floats (``5.0``) are
accepted and normalized to ``int``; booleans are rejected even though
``bool`` subclasses ``int``.
"""

import math
import uuid
from typing import Any

from jsonrpc_envelope.errors import ErrorObject, internal_error

INVALID_ID_MESSAGE = "invalid id that MUST contain a String, Number, or NULL value"

RequestId = str | int | None


def is_valid_id(id: Any) -> bool:
    """Check whether a value is a legal JSON-RPC id."""
    if id is None or isinstance(id, str):
        return True
    if isinstance(id, bool):
        return False
    if isinstance(id, int):
        return True
    if isinstance(id, float):
        return math.isfinite(id) and id.is_integer()
    return False


def validate_id(id: Any) -> ErrorObject | None:
    """Validate an id.

    Args:
        id: Candidate id value

    Returns:
        None if the id is legal, otherwise an Internal error object
    """
    if is_valid_id(id):
        return None
    return internal_error(INVALID_ID_MESSAGE)


def normalize_id(id: Any) -> RequestId:
    """Collapse integral floats to int. Assumes ``is_valid_id(id)``."""
    if isinstance(id, float):
        return int(id)
    return id


def rand_id() -> str:
    """Return a random UUID4 string suitable as a request id."""
    return str(uuid.uuid4())
