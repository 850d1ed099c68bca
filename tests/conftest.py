"""Pytest configuration and shared fixtures for schema-messages tests."""

import json
import os
from collections.abc import Generator
from typing import Any

import pytest

from schema_messages.config.settings import FacadeConfig
from schema_messages.facade import SchemaFacade


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Yields:
        Dictionary of original environment variables

    Cleanup:
        Restores original environment after test
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def facade() -> SchemaFacade:
    """Facade with default settings, independent of the environment."""
    return SchemaFacade(FacadeConfig())


@pytest.fixture
def person_schema() -> dict[str, Any]:
    """Object schema with custom messages on some properties."""
    return {
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "errors": {"required": "Name is mandatory"},
            },
            "age": {
                "type": "integer",
                "minimum": 0,
                "maximum": 150,
                "errors": {"type": "Age must be a whole number"},
            },
            "email": {"type": "string", "format": "email"},
            "color": {"enum": ["red", "green"]},
            "tags": {"type": "array", "minItems": 1, "maxItems": 3},
        },
        "required": ["name", "age"],
        "additionalProperties": False,
    }


@pytest.fixture
def person_schema_text(person_schema: dict[str, Any]) -> str:
    """person_schema serialized as JSON text."""
    return json.dumps(person_schema)


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
