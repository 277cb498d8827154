"""
Source exceptions.

These never escape a loader call. Loaders wrap them in an error provider so
they surface only when that provider is queried.
"""

from .base import ConfigStoreError


class SourceError(ConfigStoreError):
    """Base exception for failures reading a configuration source."""
    pass


class DecodeError(SourceError):
    """Raised when file content cannot be decoded into configuration items."""

    def __init__(self, reason: str, source: str = None):
        self.reason = reason
        self.source = source
        message = "Failed to decode configuration items"
        if source:
            message += f" from '{source}'"
        message += f": {reason}"
        super().__init__(message)


class NestedDirectoryError(SourceError):
    """Raised when a file tree holds more than one level of sub-directories."""

    def __init__(self, subdir: str, nested: str):
        self.subdir = subdir
        self.nested = nested
        super().__init__(
            f"subdir {subdir}: encountered nested directory {nested}, max 1 level of nesting"
        )


class ProviderFactoryError(SourceError):
    """Raised by the error provider standing in for an unknown factory."""

    def __init__(self, factory: str, argument: str = ""):
        self.factory = factory
        self.argument = argument
        super().__init__(f"failed to instantiate provider factory '{factory}'")
