"""Message resolution for leaf validation failures.

Each leaf failure is attributed to a property where possible. When the
schema declares a custom message for that property and keyword, e.g.::

    {"properties": {"age": {"type": "integer",
                            "errors": {"type": "Age must be a number"}}}}

that message wins. Otherwise a default message is built from the
failure's keyword and keyword arguments.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from schema_messages.models.failure import PropertiesMap, ValidationFailure

PROPERTY_ERROR_TEMPLATE = 'Property "{name}" error: {message}'
UNKNOWN_KEYWORD_TEMPLATE = 'Unknown validation error for keyword "{keyword}"'

# Key inside a property descriptor holding keyword -> custom message
CUSTOM_ERRORS_KEY = "errors"

MessageBuilder = Callable[[Mapping[str, Any]], str]


def render_value(value: Any) -> str:
    """Render a JSON scalar the way it reads in the schema."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_property_error(name: str, message: str) -> str:
    """Prefix ``message`` with the property it belongs to."""
    return PROPERTY_ERROR_TEMPLATE.format(name=name, message=message)


def _has(args: Mapping[str, Any], *names: str) -> bool:
    return all(args.get(name) is not None for name in names)


def infer_property_name(failure: ValidationFailure) -> str | None:
    """Work out which property a leaf failure refers to.

    A single-segment data pointer names the property directly. Failing
    that, a failure with exactly one keyword argument (``required``'s
    ``missing``) is attributed to that argument's value. Anything else
    is not attributed.
    """
    if len(failure.data_pointer) == 1:
        return str(failure.data_pointer[0])

    if len(failure.keyword_args) == 1:
        value = next(iter(failure.keyword_args.values()))
        if value is None or isinstance(value, (list, tuple, dict)):
            return None
        return render_value(value)

    return None


def _lookup(container: Any, key: str) -> Any:
    if not isinstance(container, Mapping):
        return None
    return container.get(key)


def lookup_custom_message(
    properties: PropertiesMap | None, name: str | None, keyword: str
) -> str | None:
    """Find the schema author's message for ``name`` and ``keyword``.

    Walks ``properties -> name -> errors -> keyword``; any missing link,
    or a link that is not an object, yields None.
    """
    if name is None:
        return None
    descriptor = _lookup(properties, name)
    errors = _lookup(descriptor, CUSTOM_ERRORS_KEY)
    message = _lookup(errors, keyword)
    return message if isinstance(message, str) else None


def _required_message(args: Mapping[str, Any]) -> str:
    message = "Property is missing"
    if _has(args, "missing"):
        return format_property_error(render_value(args["missing"]), message)
    return message


def _type_message(args: Mapping[str, Any]) -> str:
    if _has(args, "expected", "used"):
        return 'Unexpected type. Expected "{}" ("{}" used)'.format(
            render_value(args["expected"]), render_value(args["used"])
        )
    return "Unexpected property type"


def _schema_message(args: Mapping[str, Any]) -> str:
    if args.get("schema") is False:
        return "Additional (unexpected) property."
    return "Unexpected property error"


def _enum_message(args: Mapping[str, Any]) -> str:
    if not _has(args, "expected"):
        return "Invalid value."
    expected = args["expected"]
    if not isinstance(expected, (list, tuple)):
        expected = [expected]
    return 'Expected values are "{}"'.format('", "'.join(render_value(v) for v in expected))


def _single_arg(arg: str, template: str, fallback: str) -> MessageBuilder:
    def build(args: Mapping[str, Any]) -> str:
        if _has(args, arg):
            return template.format(render_value(args[arg]))
        return fallback

    return build


DEFAULT_MESSAGE_BUILDERS: dict[str, MessageBuilder] = {
    "required": _required_message,
    "type": _type_message,
    "$schema": _schema_message,
    "pattern": _single_arg(
        "pattern", 'Value does not match pattern "{}"', "Invalid string format"
    ),
    "format": _single_arg(
        "format", 'Value does not match format "{}"', "Invalid string format"
    ),
    "enum": _enum_message,
    "maximum": _single_arg(
        "max", 'Maximum value is "{}"', "Invalid value - greater than maximum."
    ),
    "minimum": _single_arg(
        "min", 'Minimum value is "{}"', "Invalid value - less than minimum."
    ),
    "minItems": _single_arg(
        "min", 'Minimum items count is "{}"', "Invalid items count - less than minimum."
    ),
    "maxItems": _single_arg(
        "max", 'Maximum items count is "{}"', "Invalid items count - more than maximum."
    ),
}

# Builders that already name the property and must not be prefixed again
SELF_PREFIXED_KEYWORDS = frozenset({"required"})


def _unknown_keyword_message(keyword: str) -> MessageBuilder:
    return lambda args: UNKNOWN_KEYWORD_TEMPLATE.format(keyword=keyword)


def default_message(failure: ValidationFailure) -> str:
    """Build the generic message for a leaf failure.

    Unknown keywords resolve to a generic message, so this never fails.
    """
    builder = DEFAULT_MESSAGE_BUILDERS.get(failure.keyword) or _unknown_keyword_message(
        failure.keyword
    )
    message = builder(failure.keyword_args)

    if failure.keyword in SELF_PREFIXED_KEYWORDS:
        return message
    if len(failure.data_pointer) == 1:
        return format_property_error(str(failure.data_pointer[0]), message)
    return message


def resolve_message(failure: ValidationFailure, properties: PropertiesMap | None) -> str:
    """Turn a leaf failure into its final message.

    Args:
        failure: Leaf validation failure
        properties: The schema's top-level ``properties`` map

    Returns:
        Custom message when the schema declares one, default otherwise
    """
    name = infer_property_name(failure)
    custom = lookup_custom_message(properties, name, failure.keyword)
    if name is not None and custom is not None:
        return format_property_error(name, custom)
    return default_message(failure)


def resolve_messages(
    failures: Iterable[ValidationFailure], properties: PropertiesMap | None
) -> list[str]:
    """Resolve leaf failures to messages, keeping their order."""
    return [resolve_message(failure, properties) for failure in failures]
