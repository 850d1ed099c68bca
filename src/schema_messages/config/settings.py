"""Settings model for schema-messages."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schema_messages.config.defaults import DEFAULT_VALIDATION_CONFIG, SUPPORTED_DRAFTS


class FacadeConfig(BaseModel):
    """Settings for the validation facade.

    Controls which metaschema is assumed when a schema has no ``$schema``
    keyword, whether ``format`` is asserted, and how many top-level
    failures are collected per call.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_draft: str = Field(
        default=str(DEFAULT_VALIDATION_CONFIG["default_draft"]),
        description="Draft used for schemas without a $schema keyword",
    )
    format_checking: bool = Field(
        default=bool(DEFAULT_VALIDATION_CONFIG["format_checking"]),
        description="Assert the format keyword instead of annotating only",
    )
    max_errors: int | None = Field(
        default=None,
        ge=1,
        description="Stop after this many top-level failures (None = all)",
    )

    @field_validator("default_draft")
    @classmethod
    def validate_default_draft(cls, v: str) -> str:
        """Validate that the draft is one jsonschema ships a validator for."""
        normalized = v.strip().lower()
        if normalized not in SUPPORTED_DRAFTS:
            raise ValueError(
                f"Unsupported draft '{v}'. "
                f"Supported: {', '.join(SUPPORTED_DRAFTS)}"
            )
        return normalized
