"""Validation failure tree and outcome models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Schema-side ``properties`` object: property name -> property descriptor
PropertiesMap = Mapping[str, Any]


class ValidationFailure(BaseModel):
    """A single node in a validation failure tree.

    A node with sub errors is composite: it only groups the failures of
    sub-schemas (``anyOf``, ``oneOf``) and is never reported itself.
    Leaf nodes each turn into exactly one message.
    """

    model_config = ConfigDict(frozen=True)

    keyword: str = Field(..., description="Schema keyword that was violated")
    data_pointer: list[str | int] = Field(
        default_factory=list,
        description="Path of the offending value from the instance root",
    )
    keyword_args: dict[str, Any] = Field(
        default_factory=dict,
        description="Keyword specific details (expected/used, missing, min...)",
    )
    sub_errors: list[ValidationFailure] = Field(default_factory=list)

    @property
    def is_composite(self) -> bool:
        """Whether this failure only aggregates sub-schema failures."""
        return bool(self.sub_errors)


class ValidationOutcome(BaseModel):
    """Result of validating one instance against one schema."""

    model_config = ConfigDict(frozen=True)

    errors: list[ValidationFailure] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no failure was reported."""
        return not self.errors

    @classmethod
    def valid(cls) -> ValidationOutcome:
        """Create an outcome without failures."""
        return cls()

    @classmethod
    def invalid(cls, errors: list[ValidationFailure]) -> ValidationOutcome:
        """Create an outcome from top-level failures.

        Raises:
            ValueError: If ``errors`` is empty
        """
        if not errors:
            raise ValueError("An invalid outcome needs at least one failure")
        return cls(errors=errors)
