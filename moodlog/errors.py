"""Exceptions raised by MoodLog."""


class MoodlogError(Exception):
    """Base class for MoodLog errors."""


class ValidationError(MoodlogError):
    """User input was rejected before any state changed."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class ConfigError(MoodlogError):
    """Configuration file could not be read."""
