"""Default configuration values for schema-messages."""

# Validation configuration defaults
DEFAULT_VALIDATION_CONFIG: dict[str, str | bool | int | None] = {
    "default_draft": "draft2020-12",
    "format_checking": True,
    "max_errors": None,  # report every failure
}

# Draft name -> jsonschema validator class name
SUPPORTED_DRAFTS: dict[str, str] = {
    "draft4": "Draft4Validator",
    "draft6": "Draft6Validator",
    "draft7": "Draft7Validator",
    "draft2019-09": "Draft201909Validator",
    "draft2020-12": "Draft202012Validator",
}

# Settings field -> environment variable
ENV_VAR_MAP: dict[str, str] = {
    "default_draft": "SCHEMA_MESSAGES_DEFAULT_DRAFT",
    "format_checking": "SCHEMA_MESSAGES_FORMAT_CHECKING",
    "max_errors": "SCHEMA_MESSAGES_MAX_ERRORS",
}
