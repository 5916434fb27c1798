"""
Custom exceptions for the bt_string_utils package.

These exceptions provide more specific error handling and better debugging
information than generic Python exceptions.
"""


class StringUtilsError(Exception):
    """Base exception for all bt_string_utils errors."""
    pass


class InvalidArgumentError(StringUtilsError, ValueError):
    """Out-of-range or wrongly typed arguments (zero group count, empty separator)."""
    pass


class ChunkingError(StringUtilsError):
    """Chunking-related errors (text that cannot be cut within the requested bounds)."""
    pass


class ValidationError(StringUtilsError):
    """Content validation errors (groups that do not reproduce their input)."""
    pass


class ConfigurationError(StringUtilsError):
    """Configuration-related errors (invalid settings, bad environment values)."""
    pass
