"""Entry point: validate a JSON payload and get readable error messages."""

from __future__ import annotations

import json
import threading
from typing import Any

from schema_messages.config.loader import load_config
from schema_messages.config.settings import FacadeConfig
from schema_messages.lib.flattener import iter_leaf_failures
from schema_messages.lib.logging_config import get_logger
from schema_messages.lib.resolver import resolve_messages
from schema_messages.lib.schema import SchemaDocument
from schema_messages.lib.validator import SchemaValidator

logger = get_logger(__name__)


def decode_payload(payload: str) -> Any:
    """Decode payload JSON, treating malformed text as ``None``."""
    try:
        return json.loads(payload)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug(f"Payload is not valid JSON, validating null instead: {e}")
        return None


class SchemaFacade:
    """Validates JSON payloads against JSON schemas.

    The underlying ``SchemaValidator`` is built on first use and shared
    afterwards. Schemas are parsed fresh on every call.

    Example:
        >>> facade = SchemaFacade()
        >>> facade.validate_schema('{"age": 3}', '{"properties": {"age": {"minimum": 5}}}')
        ['Property "age" error: Minimum value is "5"']
    """

    def __init__(self, config: FacadeConfig | None = None) -> None:
        """Initialize the facade.

        Args:
            config: Settings; loaded from defaults and environment when omitted
        """
        self.config = config if config is not None else load_config()
        self._validator: SchemaValidator | None = None
        self._validator_lock = threading.Lock()

    def _get_validator(self) -> SchemaValidator:
        if self._validator is None:
            with self._validator_lock:
                if self._validator is None:
                    logger.debug("Creating shared schema validator")
                    self._validator = SchemaValidator(
                        format_checking=self.config.format_checking,
                        max_errors=self.config.max_errors,
                    )
        return self._validator

    def validate_schema(self, payload: str, schema_contents: str) -> list[str] | None:
        """Validate ``payload`` against ``schema_contents``.

        Args:
            payload: JSON text of the instance; malformed text validates as null
            schema_contents: JSON text of the schema

        Returns:
            None when the payload is valid, otherwise one message per leaf
            failure in depth-first order

        Raises:
            SchemaParseError: If the schema text cannot be parsed
        """
        document = SchemaDocument.from_json_string(
            schema_contents, default_draft=self.config.default_draft
        )
        validator = self._get_validator()

        outcome = validator.validate(decode_payload(payload), document)
        if outcome.is_valid:
            return None

        messages = resolve_messages(iter_leaf_failures(outcome.errors), document.properties)
        logger.debug(f"Resolved {len(messages)} validation message(s)")
        return messages


_default_facade: SchemaFacade | None = None
_default_facade_lock = threading.Lock()


def get_default_facade() -> SchemaFacade:
    """Return the process-wide facade, creating it on first use."""
    global _default_facade
    if _default_facade is None:
        with _default_facade_lock:
            if _default_facade is None:
                _default_facade = SchemaFacade()
    return _default_facade


def validate_schema(payload: str, schema_contents: str) -> list[str] | None:
    """Validate with the process-wide facade. See ``SchemaFacade.validate_schema``."""
    return get_default_facade().validate_schema(payload, schema_contents)
