"""Configuration loading and settings for schema-messages.

Main components:
- FacadeConfig: Validated settings model
- load_config: Merge defaults, SCHEMA_MESSAGES_* env vars and overrides
- describe_config_errors: Readable messages for invalid settings
"""

from schema_messages.config.loader import load_config
from schema_messages.config.settings import FacadeConfig
from schema_messages.config.validator import describe_config_errors

__all__ = [
    "FacadeConfig",
    "load_config",
    "describe_config_errors",
]
