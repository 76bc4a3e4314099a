"""Configuration data models."""

from dataclasses import dataclass, field

from jsonrpc_envelope.types import LogFormat, LogLevel


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON


@dataclass(frozen=True)
class CodecConfig:
    """Encoder settings used by the message builders."""

    ensure_ascii: bool = False  # escape non-ASCII characters as \uXXXX


@dataclass
class EnvelopeConfig:
    """Root configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    codec: CodecConfig = field(default_factory=CodecConfig)
