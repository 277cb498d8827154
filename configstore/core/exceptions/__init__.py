"""
Core exceptions for configstore.

This module provides all exception classes used throughout the package,
organized by concern and with a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    ConfigStoreError,
    ValidationError,
    NotFoundError
)

# Store exceptions
from .store import (
    WiringError,
    ProviderConflictError,
    ProviderFactoryConflictError,
    ProviderNotFoundError,
    ProviderError
)

# Source exceptions
from .source import (
    SourceError,
    DecodeError,
    NestedDirectoryError,
    ProviderFactoryError
)

__all__ = [
    # Base exceptions
    'ConfigStoreError',
    'ValidationError',
    'NotFoundError',

    # Store exceptions
    'WiringError',
    'ProviderConflictError',
    'ProviderFactoryConflictError',
    'ProviderNotFoundError',
    'ProviderError',

    # Source exceptions
    'SourceError',
    'DecodeError',
    'NestedDirectoryError',
    'ProviderFactoryError'
]
