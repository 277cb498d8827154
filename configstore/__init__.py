"""
Runtime configuration aggregation.

Providers (files, directory trees, environment variables, in-memory
overrides, custom callables) are registered under unique names into a Store.
Each provider yields prioritized key/value items, and watchers get signalled
whenever a provider announces a change.

The module level functions below operate on the active store: the store
running `init_from_environment` in the current context, otherwise the
process-wide default store returned by `get()`. Every one of them is also
available as a method of an explicitly constructed `Store`.
"""

from typing import Optional
import queue

from configstore.core import (
    Item, ItemList, Provider, ConfigProvider, ErrorProvider, InMemoryProvider,
    Store, register_provider_factory, active_store
)
from configstore.core.registry import get, new
from configstore.providers import (
    EnvVariableProvider, FilePoller, DecodeFn, with_priority, with_automatic_binding
)


def register_provider(name: str, provider: Provider):
    active_store().register_provider(name, provider)


def register(name: str, provider: ConfigProvider):
    active_store().register(name, provider)


def allow_provider_override():
    active_store().allow_provider_override()


def init_from_environment():
    """
    Instantiate providers from CONFIGURATION_FROM into the active store.

    Example: CONFIGURATION_FROM=file:/etc/app.yaml,filelist:/etc/app.d,filetree:/etc/app.tree
    """
    active_store().init_from_environment()


def watch() -> queue.Queue:
    return active_store().watch()


def notify_watchers():
    active_store().notify_watchers()


def in_memory(name: str) -> InMemoryProvider:
    return active_store().in_memory(name)


def file(filename: str):
    active_store().file(filename)


def file_refresh(filename: str, interval: float = None) -> Optional[FilePoller]:
    return active_store().file_refresh(filename, interval=interval)


def file_custom(filename: str, decode: DecodeFn):
    active_store().file_custom(filename, decode)


def file_custom_refresh(filename: str, decode: DecodeFn,
                        interval: float = None) -> Optional[FilePoller]:
    return active_store().file_custom_refresh(filename, decode, interval=interval)


def file_list(dirname: str):
    active_store().file_list(dirname)


def file_tree(dirname: str):
    active_store().file_tree(dirname)


def env_variable(*opts, name: str = "environ") -> EnvVariableProvider:
    return active_store().env_variable(*opts, name=name)


# Built-in factories for init_from_environment
register_provider_factory("file", file)
register_provider_factory("filelist", file_list)
register_provider_factory("filetree", file_tree)


__all__ = [
    'Item',
    'ItemList',
    'Provider',
    'ConfigProvider',
    'ErrorProvider',
    'InMemoryProvider',
    'EnvVariableProvider',
    'FilePoller',
    'Store',
    'get',
    'new',
    'register_provider',
    'register',
    'allow_provider_override',
    'register_provider_factory',
    'init_from_environment',
    'watch',
    'notify_watchers',
    'in_memory',
    'file',
    'file_refresh',
    'file_custom',
    'file_custom_refresh',
    'file_list',
    'file_tree',
    'env_variable',
    'with_priority',
    'with_automatic_binding'
]
