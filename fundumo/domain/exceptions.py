"""
Custom exception classes for the fundumo application.

These exceptions provide more specific error handling and better error messages
for the failure scenarios the stores and the persistence layer distinguish.
"""


class FundumoError(Exception):
    """Base class for all fundumo errors."""


class ValidationError(FundumoError, ValueError):
    """Raised when user input is missing a required field after sanitation."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class PersistenceError(FundumoError):
    """Base class for key-value persistence failures."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"{key}: {reason}")


class PersistenceReadError(PersistenceError):
    """Raised inside the storage adapter when a key cannot be read or parsed."""


class PersistenceWriteError(PersistenceError):
    """Raised inside the storage adapter when a key cannot be written or removed."""


class ConfigurationError(ValueError):
    """Raised when there's an error in configuration parsing or validation."""

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")
