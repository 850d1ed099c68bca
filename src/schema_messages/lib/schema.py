"""Schema document parsing.

Turns schema text into a checked ``SchemaDocument`` and exposes the
parts message resolution needs: the decoded schema, the ``properties``
map, and the jsonschema validator class matching its draft.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from jsonschema import validators
from jsonschema.exceptions import SchemaError
from jsonschema.protocols import Validator

from schema_messages.config.defaults import SUPPORTED_DRAFTS
from schema_messages.lib.errors import SchemaParseError
from schema_messages.models.failure import PropertiesMap

logger = logging.getLogger(__name__)

DEFAULT_DRAFT = "draft2020-12"


def validator_class_for(schema: Any, default_draft: str = DEFAULT_DRAFT) -> type[Validator]:
    """Pick the jsonschema validator class for a decoded schema.

    Uses the schema's ``$schema`` keyword when it names a known
    metaschema, otherwise the validator for ``default_draft``.
    """
    default = getattr(validators, SUPPORTED_DRAFTS[default_draft])
    return validators.validator_for(schema, default=default)


class SchemaDocument:
    """A decoded, metaschema-checked JSON Schema."""

    def __init__(self, schema: dict[str, Any] | bool, validator_class: type[Validator]) -> None:
        self._schema = schema
        self.validator_class = validator_class

    @classmethod
    def from_json_string(
        cls, schema_contents: str, default_draft: str = DEFAULT_DRAFT
    ) -> SchemaDocument:
        """Parse schema text into a SchemaDocument.

        Args:
            schema_contents: JSON text of the schema
            default_draft: Draft assumed when the schema has no ``$schema``

        Returns:
            Parsed schema document

        Raises:
            SchemaParseError: If the text is not JSON, not an object or
                boolean, or is rejected by the metaschema
        """
        try:
            schema = json.loads(schema_contents)
        except (TypeError, ValueError) as e:
            raise SchemaParseError("Schema is not valid JSON", str(e)) from e

        if not isinstance(schema, (dict, bool)):
            raise SchemaParseError(
                "Schema must be a JSON object or boolean",
                f"got {type(schema).__name__}",
            )

        validator_class = validator_class_for(schema, default_draft)
        try:
            validator_class.check_schema(schema)
        except SchemaError as e:
            raise SchemaParseError("Schema is not a valid JSON Schema", e.message) from e

        logger.debug(f"Parsed schema with {validator_class.__name__}")
        return cls(schema, validator_class)

    def resolve(self) -> dict[str, Any] | bool:
        """Return the decoded schema value."""
        return self._schema

    @property
    def properties(self) -> PropertiesMap:
        """Return the top-level ``properties`` map, or an empty dict."""
        if not isinstance(self._schema, dict):
            return {}
        properties = self._schema.get("properties")
        if not isinstance(properties, dict):
            return {}
        return properties
