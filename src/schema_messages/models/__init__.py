"""Data models shared across schema-messages."""
