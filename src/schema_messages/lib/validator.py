"""Structural validation backed by jsonschema.

``SchemaValidator`` runs a jsonschema validator over a decoded instance
and converts the resulting ``jsonschema.ValidationError`` objects into a
``ValidationFailure`` tree. Keyword arguments are normalized into the
small vocabulary the message resolver understands (``missing``,
``expected``/``used``, ``min``/``max`` ...), and errors that jsonschema
groups per object (``required``, ``additionalProperties: false``) are
split into one failure per property.
"""

from __future__ import annotations

import itertools
import logging
import re
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from schema_messages.lib.schema import SchemaDocument
from schema_messages.models.failure import ValidationFailure, ValidationOutcome

logger = logging.getLogger(__name__)

# Keyword reported for values rejected by a ``false`` schema
FALSE_SCHEMA_KEYWORD = "$schema"

ArgsBuilder = Callable[[Any, Any], dict[str, Any]]


def json_type(instance: Any) -> str:
    """Return the JSON type name of a decoded value."""
    if instance is None:
        return "null"
    if isinstance(instance, bool):
        return "boolean"
    if isinstance(instance, int):
        return "integer"
    if isinstance(instance, float):
        return "number"
    if isinstance(instance, str):
        return "string"
    if isinstance(instance, list):
        return "array"
    if isinstance(instance, dict):
        return "object"
    return type(instance).__name__


def _expected_types(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)


def _size(instance: Any) -> int | None:
    try:
        return len(instance)
    except TypeError:
        return None


_ARGS_BUILDERS: dict[str, ArgsBuilder] = {
    "type": lambda value, instance: {
        "expected": _expected_types(value),
        "used": json_type(instance),
    },
    "enum": lambda value, instance: {"expected": list(value)},
    "const": lambda value, instance: {"expected": value},
    "pattern": lambda value, instance: {"pattern": value},
    "format": lambda value, instance: {"format": value},
    "minimum": lambda value, instance: {"min": value},
    "exclusiveMinimum": lambda value, instance: {"min": value},
    "maximum": lambda value, instance: {"max": value},
    "exclusiveMaximum": lambda value, instance: {"max": value},
    "minItems": lambda value, instance: {"min": value, "count": _size(instance)},
    "maxItems": lambda value, instance: {"max": value, "count": _size(instance)},
    "minLength": lambda value, instance: {"min": value, "length": _size(instance)},
    "maxLength": lambda value, instance: {"max": value, "length": _size(instance)},
    "multipleOf": lambda value, instance: {"divisor": value},
}


def keyword_args(error: JsonSchemaValidationError) -> dict[str, Any]:
    """Build resolver-facing keyword arguments for a jsonschema error.

    Keywords without a known argument shape get an empty mapping.
    """
    builder = _ARGS_BUILDERS.get(str(error.validator))
    if builder is None:
        return {}
    return builder(error.validator_value, error.instance)


def _missing_properties(error: JsonSchemaValidationError) -> list[str]:
    instance = error.instance if isinstance(error.instance, dict) else {}
    return [name for name in error.validator_value if name not in instance]


def _additional_properties(error: JsonSchemaValidationError) -> list[str]:
    instance = error.instance if isinstance(error.instance, dict) else {}
    schema = error.schema if isinstance(error.schema, dict) else {}
    properties = schema.get("properties", {})
    patterns = list(schema.get("patternProperties", {}))

    extras: list[str] = []
    for name in instance:
        if name in properties:
            continue
        if any(re.search(pattern, name) for pattern in patterns):
            continue
        extras.append(name)
    return extras


def convert_error(error: JsonSchemaValidationError) -> list[ValidationFailure]:
    """Convert one jsonschema error into one or more failures."""
    pointer = list(error.absolute_path)

    if error.validator is None:
        # ``false`` subschema: the path already points at the rejected value
        return [
            ValidationFailure(
                keyword=FALSE_SCHEMA_KEYWORD,
                data_pointer=pointer,
                keyword_args={"schema": False},
            )
        ]

    keyword = str(error.validator)

    if keyword == "additionalProperties" and error.validator_value is False:
        extras = _additional_properties(error) or [None]
        return [
            ValidationFailure(
                keyword=FALSE_SCHEMA_KEYWORD,
                data_pointer=pointer if name is None else [*pointer, name],
                keyword_args={"schema": False},
            )
            for name in extras
        ]

    if keyword == "required":
        return [
            ValidationFailure(
                keyword=keyword,
                data_pointer=pointer,
                keyword_args={"missing": name},
            )
            for name in _missing_properties(error)
        ]

    if error.context:
        return [
            ValidationFailure(
                keyword=keyword,
                data_pointer=pointer,
                keyword_args=keyword_args(error),
                sub_errors=list(iter_failures(error.context)),
            )
        ]

    return [
        ValidationFailure(
            keyword=keyword,
            data_pointer=pointer,
            keyword_args=keyword_args(error),
        )
    ]


def iter_failures(errors: Iterable[JsonSchemaValidationError]) -> Iterator[ValidationFailure]:
    """Convert sibling jsonschema errors into failures, in order.

    jsonschema reports one ``required`` error per missing property, all
    sharing the same instance and schema location. The first of them
    already expands to every missing property, so the rest are skipped.
    """
    seen_required: set[tuple[tuple[Any, ...], tuple[Any, ...]]] = set()
    for error in errors:
        if error.validator == "required":
            key = (tuple(error.absolute_path), tuple(error.absolute_schema_path))
            if key in seen_required:
                continue
            seen_required.add(key)
        yield from convert_error(error)


class SchemaValidator:
    """Validates decoded instances against parsed schema documents.

    Holds only settings, so a single instance can be shared by every
    caller and thread.
    """

    def __init__(self, format_checking: bool = True, max_errors: int | None = None) -> None:
        """Initialize the validator.

        Args:
            format_checking: Assert ``format`` using the draft's format checker
            max_errors: Stop after this many top-level failures (None = all)
        """
        self._format_checking = format_checking
        self._max_errors = max_errors

    def validate(self, instance: Any, document: SchemaDocument) -> ValidationOutcome:
        """Validate ``instance`` against ``document``.

        Args:
            instance: Decoded JSON value (``None`` for null or undecodable payloads)
            document: Parsed schema document

        Returns:
            ValidationOutcome with top-level failures in encounter order
        """
        validator_class = document.validator_class
        if self._format_checking:
            validator = validator_class(
                document.resolve(), format_checker=validator_class.FORMAT_CHECKER
            )
        else:
            validator = validator_class(document.resolve())

        failures = iter_failures(validator.iter_errors(instance))
        errors = list(itertools.islice(failures, self._max_errors))

        if not errors:
            return ValidationOutcome.valid()

        logger.debug(f"Validation produced {len(errors)} top-level failure(s)")
        return ValidationOutcome.invalid(errors)
