"""schema-messages - readable JSON Schema validation errors.

Validates a JSON payload against a JSON Schema and turns the resulting
failure tree into a flat list of messages. Schema authors can replace
the default text per property and keyword with an ``errors`` object:

    {"properties": {"name": {"type": "string",
                             "errors": {"required": "Name is mandatory"}}},
     "required": ["name"]}

Main features:
- One message per leaf failure, including ``anyOf``/``oneOf`` branches
- Custom messages declared inside the schema
- Keyword specific default messages for everything else
"""

from schema_messages.config.settings import FacadeConfig
from schema_messages.facade import SchemaFacade, validate_schema
from schema_messages.lib.errors import ConfigError, SchemaMessagesError, SchemaParseError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "FacadeConfig",
    "SchemaFacade",
    "SchemaMessagesError",
    "SchemaParseError",
    "validate_schema",
]
