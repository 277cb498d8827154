"""
Core configuration store components.

This module provides the foundational components of configstore:
- Item / ItemList: the configuration data model
- ConfigProvider: provider interface and the in-memory and error providers
- Store: the provider registry and change notification fan-out
"""

from .item import Item, ItemList
from .provider import Provider, ConfigProvider, ErrorProvider, InMemoryProvider
from .registry import (
    Store, ProviderFactory, register_provider_factory, get_provider_factory,
    list_provider_factories, active_store
)

__all__ = [
    # Items
    'Item',
    'ItemList',

    # Providers
    'Provider',
    'ConfigProvider',
    'ErrorProvider',
    'InMemoryProvider',

    # Registry
    'Store',
    'ProviderFactory',
    'register_provider_factory',
    'get_provider_factory',
    'list_provider_factories',
    'active_store'
]
