"""Configuration loader."""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from jsonrpc_envelope.errors import create_error
from jsonrpc_envelope.types import LogFormat, LogLevel, ValidationIssue, ValidationResult

from .models import CodecConfig, EnvelopeConfig, LoggingConfig

CONFIG_PATH_ENV = "JSONRPC_ENVELOPE_CONFIG"
DEFAULT_CONFIG_FILE = "jsonrpc-envelope.yaml"

_VALID_KEYS = {"logging", "codec"}


def resolve_env_vars(value: str) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references

    Returns:
        String with env vars resolved

    Raises:
        ConfigError: If required var not set
    """
    pattern = r"\$\{([^}:]+)(?::([?-])([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)

        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        if operator == "?":
            error_msg = operand or f"Required environment variable {var_name} not set"
            raise create_error("CONFIG_INVALID", detail=error_msg)
        raise create_error(
            "CONFIG_INVALID",
            detail=f"Required environment variable {var_name} not set",
        )

    return re.sub(pattern, replacer, value)


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    if isinstance(data, str):
        return resolve_env_vars(data)
    return data


def _parse_bool(value: Any) -> bool | None:
    """Accept real booleans and the usual env-var spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off"):
            return False
    return None


class ConfigLoader:
    """Load and validate package configuration."""

    def __init__(self, logger: Any = None):
        """Initialize config loader.

        Args:
            logger: Optional EnvelopeLogger instance
        """
        self._config: EnvelopeConfig | None = None
        self._config_path: Path | None = None
        self._logger = logger

    @property
    def config(self) -> EnvelopeConfig | None:
        """Most recently loaded configuration."""
        return self._config

    @property
    def config_path(self) -> Path | None:
        """Path the current configuration was read from."""
        return self._config_path

    def load(self, path: str | Path | None = None, use_defaults: bool = True) -> EnvelopeConfig:
        """Load configuration from file.

        Resolution order if path not specified:
        1. JSONRPC_ENVELOPE_CONFIG environment variable
        2. ./jsonrpc-envelope.yaml
        3. If use_defaults=True and no file found, use default configuration

        Args:
            path: Optional path to config file
            use_defaults: If True, use default config when no file found

        Returns:
            Loaded EnvelopeConfig instance

        Raises:
            ConfigError: If file not found (when use_defaults=False) or invalid
        """
        if path is None:
            path = os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_FILE

        config_path = Path(path)

        if not config_path.exists():
            if use_defaults:
                if self._logger:
                    self._logger.info("No config file found, using default configuration")
                return self.load_defaults()
            raise create_error("CONFIG_NOT_FOUND", path=str(config_path))

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Invalid YAML in config file: {e}",
            ) from e

        if not isinstance(data, dict):
            raise create_error("CONFIG_INVALID", detail="Configuration root must be a mapping")

        data = _resolve_env_vars_recursive(data)
        return self.load_from_dict(data, config_path)

    def load_defaults(self) -> EnvelopeConfig:
        """Load default configuration without a file."""
        return self.load_from_dict({})

    def load_from_dict(self, data: dict[str, Any], config_path: Path | None = None) -> EnvelopeConfig:
        """Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            config_path: Optional path to config file (for tracking)

        Returns:
            Loaded EnvelopeConfig instance

        Raises:
            ConfigError: If configuration is invalid
        """
        validation = self.validate(data)
        if not validation.valid:
            error_messages = [f"- {issue.path}: {issue.message}" for issue in validation.errors]
            raise create_error(
                "CONFIG_INVALID",
                detail="Configuration validation failed:\n" + "\n".join(error_messages),
            )

        for issue in validation.warnings:
            if self._logger:
                self._logger.warning(issue.message, path=issue.path)

        config = self._dict_to_config(data)
        self._config = config
        self._config_path = config_path

        if self._logger:
            self._logger.debug("Configuration loaded", path=str(config_path) if config_path else None)

        return config

    def validate(self, data: dict[str, Any]) -> ValidationResult:
        """Validate config data without loading.

        Args:
            data: Configuration dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []

        for key in data:
            if key not in _VALID_KEYS:
                warnings.append(
                    ValidationIssue(
                        path=key,
                        message=f"Unknown configuration key: {key}",
                        severity="warning",
                    )
                )

        if data.get("logging") is not None:
            section = data["logging"]
            if not isinstance(section, dict):
                errors.append(ValidationIssue(path="logging", message="logging must be a mapping"))
            else:
                level = section.get("level")
                if level is not None and str(level).upper() not in LogLevel.__members__:
                    errors.append(
                        ValidationIssue(path="logging.level", message=f"Unknown log level: {level}")
                    )
                fmt = section.get("format")
                if fmt is not None and str(fmt).lower() not in {f.value for f in LogFormat}:
                    errors.append(
                        ValidationIssue(path="logging.format", message=f"Unknown log format: {fmt}")
                    )

        if data.get("codec") is not None:
            section = data["codec"]
            if not isinstance(section, dict):
                errors.append(ValidationIssue(path="codec", message="codec must be a mapping"))
            elif section.get("ensure_ascii") is not None and _parse_bool(section["ensure_ascii"]) is None:
                errors.append(
                    ValidationIssue(path="codec.ensure_ascii", message="ensure_ascii must be a boolean")
                )

        return ValidationResult(valid=len(errors) == 0, errors=errors, warnings=warnings)

    def _dict_to_config(self, data: dict[str, Any]) -> EnvelopeConfig:
        logging_data = data.get("logging") or {}
        codec_data = data.get("codec") or {}

        # A null value (e.g. "level:" with nothing after it) keeps the default.
        logging_config = LoggingConfig()
        if logging_data.get("level") is not None:
            logging_config.level = LogLevel[str(logging_data["level"]).upper()]
        if logging_data.get("format") is not None:
            logging_config.format = LogFormat(str(logging_data["format"]).lower())

        codec_config = CodecConfig()
        if codec_data.get("ensure_ascii") is not None:
            codec_config = CodecConfig(ensure_ascii=bool(_parse_bool(codec_data["ensure_ascii"])))

        return EnvelopeConfig(logging=logging_config, codec=codec_config)
