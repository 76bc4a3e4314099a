"""JSON text codec shared by builders and parser."""

import json
from typing import Any

from jsonrpc_envelope.config.models import CodecConfig

DEFAULT_CODEC = CodecConfig()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def encode(payload: Any, config: CodecConfig | None = None) -> str:
    """Serialize to compact JSON text.

    Raises:
        TypeError: If payload holds a non-serializable value
        ValueError: If payload holds NaN or infinity
    """
    config = config or DEFAULT_CODEC
    return json.dumps(
        payload,
        ensure_ascii=config.ensure_ascii,
        separators=(",", ":"),
        allow_nan=False,
    )


def decode(text: str) -> Any:
    """Parse strict JSON text (NaN and Infinity are rejected).

    Raises:
        ValueError: If text is not valid JSON
    """
    return json.loads(text, parse_constant=_reject_constant)
