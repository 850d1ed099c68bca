"""Core helpers: schema parsing, validation, flattening and message resolution."""
