"""Custom exception hierarchy for schema-messages."""


class SchemaMessagesError(Exception):
    """Base exception for all schema-messages errors.

    Validation failures are reported as messages, never raised. Only
    caller mistakes (bad schema text, bad configuration) end up here.
    """

    pass


class SchemaParseError(SchemaMessagesError):
    """Exception raised when schema text cannot be turned into a schema.

    Raised when the text is not valid JSON, when it does not decode to an
    object or a boolean, or when the metaschema rejects it.

    Attributes:
        message: Human-readable error message
        reason: Underlying parser or metaschema message
    """

    def __init__(self, message: str, reason: str | None = None) -> None:
        """Initialize SchemaParseError with a message and optional reason.

        Args:
            message: Descriptive error message
            reason: Text of the underlying decoder or metaschema error
        """
        self.message = message
        self.reason = reason
        full_message = message if reason is None else f"{message}: {reason}"
        super().__init__(full_message)


class ConfigError(SchemaMessagesError):
    """Exception raised for configuration errors.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")
