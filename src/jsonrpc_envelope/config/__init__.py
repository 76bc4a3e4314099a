"""Configuration models and loader."""

from .loader import ConfigLoader, resolve_env_vars
from .models import CodecConfig, EnvelopeConfig, LoggingConfig

__all__ = [
    "ConfigLoader",
    "resolve_env_vars",
    "EnvelopeConfig",
    "LoggingConfig",
    "CodecConfig",
]
