"""Configuration loading for schema-messages.

Settings are resolved from three layers, lowest to highest precedence:
built-in defaults, ``SCHEMA_MESSAGES_*`` environment variables, and
explicit overrides passed by the caller.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from schema_messages.config.defaults import DEFAULT_VALIDATION_CONFIG, ENV_VAR_MAP
from schema_messages.config.settings import FacadeConfig
from schema_messages.config.validator import describe_config_errors
from schema_messages.lib.errors import ConfigError

logger = logging.getLogger(__name__)


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to appropriate type.

    Args:
        field_name: Name of the field (used to determine type)
        value: String value from environment variable

    Returns:
        Parsed value in correct type (int, bool, None or str)

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name == "max_errors":
        if value.strip().lower() in ("", "none", "all"):
            return None
        return int(value)
    elif field_name == "format_checking":
        return value.lower() in ("true", "1", "yes", "on")
    else:
        return value


def _get_env_values(env_vars: Mapping[str, str]) -> dict[str, Any]:
    """Collect field values from environment variables.

    Unparseable values are skipped with a warning.
    """
    values: dict[str, Any] = {}
    for field_name, env_var_name in ENV_VAR_MAP.items():
        if env_var_name not in env_vars:
            continue
        try:
            values[field_name] = _parse_env_value(field_name, env_vars[env_var_name])
        except ValueError:
            logger.warning(
                f"Ignoring invalid value for {env_var_name}: "
                f"{env_vars[env_var_name]!r}"
            )
    return values


def load_config(
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> FacadeConfig:
    """Build a FacadeConfig from defaults, environment and overrides.

    Args:
        overrides: Explicit field values, highest precedence
        env: Environment mapping (defaults to ``os.environ``)

    Returns:
        Validated FacadeConfig

    Raises:
        ConfigError: If the merged values do not form a valid config
    """
    merged: dict[str, Any] = dict(DEFAULT_VALIDATION_CONFIG)
    merged.update(_get_env_values(os.environ if env is None else env))
    if overrides:
        merged.update(overrides)

    try:
        config = FacadeConfig(**merged)
    except PydanticValidationError as e:
        fields = sorted({str(error["loc"][0]) for error in e.errors() if error.get("loc")})
        raise ConfigError(
            ", ".join(fields) or "schema_messages", "\n".join(describe_config_errors(e))
        ) from e

    logger.debug(
        f"Loaded config: draft={config.default_draft} "
        f"format_checking={config.format_checking} max_errors={config.max_errors}"
    )
    return config
