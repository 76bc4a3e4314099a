"""Factory for configuration errors."""

from typing import Any

from .errors import ConfigError, ConfigErrorTemplate

_CONFIG_TEMPLATES: dict[str, ConfigErrorTemplate] = {
    "CONFIG_INVALID": ConfigErrorTemplate(
        code="CONFIG_INVALID",
        message="Invalid configuration",
        detail="The configuration could not be parsed or failed validation",
    ),
    "CONFIG_NOT_FOUND": ConfigErrorTemplate(
        code="CONFIG_NOT_FOUND",
        message="Configuration file not found",
        detail="No configuration file exists at {path}",
    ),
}


def create_error(code: str, **context: Any) -> ConfigError:
    """Create a ConfigError from a registered code.

    Args:
        code: Error code
        **context: Context variables; ``detail`` overrides the template detail

    Returns:
        ConfigError instance

    Raises:
        ValueError: If error code not found
    """
    template = _CONFIG_TEMPLATES.get(code)
    if template is None:
        msg = f"Unknown error code: {code}"
        raise ValueError(msg)

    detail = context.pop("detail", None)
    if detail is None and template.detail is not None:
        try:
            detail = template.detail.format(**context)
        except KeyError:
            # Missing context variable - return template as-is
            detail = template.detail

    return ConfigError(code=template.code, message=template.message, detail=detail)
