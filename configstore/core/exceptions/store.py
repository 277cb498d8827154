"""
Store specific exceptions.

Wiring errors are raised synchronously by the registration calls and indicate
a programming mistake: an embedding application should log them and exit,
never retry. Query errors are raised when a registered provider is invoked.
"""

from .base import ConfigStoreError, NotFoundError


class WiringError(ConfigStoreError):
    """Base exception for name collisions detected while wiring providers."""
    pass


class ProviderConflictError(WiringError):
    """Raised when a provider name is registered twice without override."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"conflict on configuration provider: {name}")


class ProviderFactoryConflictError(WiringError):
    """Raised when a provider factory name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"conflict on configuration provider factory: {name}")


class ProviderNotFoundError(NotFoundError):
    """Raised when looking up a provider name that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("Configuration provider", name)


class ProviderError(ConfigStoreError):
    """Raised when a registered provider fails to produce its items."""

    def __init__(self, name: str, cause: Exception):
        self.name = name
        self.cause = cause
        super().__init__(f"configuration provider '{name}' failed: {cause}")
