"""Readable descriptions of invalid FacadeConfig values."""

from pydantic import ValidationError as PydanticValidationError

from schema_messages.config.defaults import ENV_VAR_MAP


def describe_config_errors(exc: PydanticValidationError) -> list[str]:
    """Describe each invalid setting, naming where it can be set.

    Settings backed by an environment variable mention it, so a bad
    ``SCHEMA_MESSAGES_*`` value can be traced back, e.g.::

        max_errors (SCHEMA_MESSAGES_MAX_ERRORS): Input should be greater
        than or equal to 1, got 0

    Args:
        exc: Error raised while building a FacadeConfig

    Returns:
        One line per invalid setting
    """
    lines: list[str] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = str(loc[0]) if loc else "unknown"
        env_var = ENV_VAR_MAP.get(field)
        label = f"{field} ({env_var})" if env_var else field

        if error.get("type") == "extra_forbidden":
            lines.append(f"{label}: unknown setting")
            continue

        msg = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
        lines.append(f"{label}: {msg}, got {error.get('input')!r}")

    return lines or ["Invalid configuration"]
