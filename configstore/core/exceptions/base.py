"""
Base exception classes for the configstore package.
"""


class ConfigStoreError(Exception):
    """Base exception for all configstore errors."""
    pass


class ValidationError(ConfigStoreError):
    """Raised when a configuration item is malformed."""

    def __init__(self, field: str, value: str = None, message: str = None):
        self.field = field
        self.value = value
        error_msg = f"Validation error for field '{field}'"
        if value:
            error_msg += f" with value '{value}'"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)


class NotFoundError(ConfigStoreError):
    """Base exception for lookups of unknown entities."""

    def __init__(self, entity_type: str, identifier: str = None):
        self.entity_type = entity_type
        self.identifier = identifier
        message = f"{entity_type} not found"
        if identifier:
            message += f" with identifier '{identifier}'"
        super().__init__(message)
