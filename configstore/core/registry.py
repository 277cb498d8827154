"""
Configuration store: the provider registry and change notification fan-out.

The Store keeps named providers, hands out watch queues to consumers and
wakes them when a provider announces a change. Provider factories are kept in
a process-wide registry so `init_from_environment` can instantiate providers
by name from the CONFIGURATION_FROM environment variable.
"""

import contextvars
import os
import queue
import threading
from typing import Callable, Dict, List, Optional, TYPE_CHECKING

from configstore.config import Config
from configstore.core.exceptions import (
    ProviderConflictError,
    ProviderError,
    ProviderFactoryConflictError,
    ProviderFactoryError,
    ProviderNotFoundError
)
from configstore.core.item import ItemList
from configstore.core.provider import ConfigProvider, ErrorProvider, InMemoryProvider, Provider
from configstore.logger import get_configstore_logger
from configstore.providers import environ, file as file_loader, tree

if TYPE_CHECKING:
    from configstore.providers.environ import EnvVariableOptions, EnvVariableProvider
    from configstore.providers.file import DecodeFn, FilePoller

ProviderFactory = Callable[[str], None]

_factories_lock = threading.Lock()
_provider_factories: Dict[str, ProviderFactory] = {}

# Store currently dispatching init_from_environment, if any
_active_store: contextvars.ContextVar[Optional["Store"]] = contextvars.ContextVar(
    "configstore_active_store", default=None
)

logger = get_configstore_logger().bind(component="ProviderFactories")


def register_provider_factory(name: str, factory: ProviderFactory):
    """
    Register a factory so that init_from_environment can instantiate providers
    via name + argument.

    Raises
    ------
    ProviderFactoryConflictError
        If a factory is already registered under this name.
    """
    with _factories_lock:
        if name in _provider_factories:
            raise ProviderFactoryConflictError(name)
        _provider_factories[name] = factory
    logger.debug("Provider factory registered", factory=name)


def get_provider_factory(name: str) -> Optional[ProviderFactory]:
    with _factories_lock:
        return _provider_factories.get(name)


def list_provider_factories() -> List[str]:
    with _factories_lock:
        return list(_provider_factories.keys())


class Store:
    """
    Registry of named configuration providers.

    Provider map, watcher list and poller list each have their own lock,
    held only while reading or mutating that structure. Providers are never
    invoked under a store lock.
    """

    def __init__(self):
        self.logger = get_configstore_logger().bind(component="Store")

        self._providers: Dict[str, Provider] = {}
        self._providers_lock = threading.Lock()
        self._allow_provider_override = False

        self._watchers: List[queue.Queue] = []
        self._watchers_lock = threading.Lock()

        self._pollers: List["FilePoller"] = []
        self._pollers_lock = threading.Lock()

    def clear(self) -> "Store":
        """
        Drop every provider and disable override.

        File pollers feeding the dropped providers are stopped. Watchers and
        factories are kept.
        """
        with self._providers_lock:
            self._providers = {}
            self._allow_provider_override = False
        self.stop_polling()
        return self

    # Registration

    def register_provider(self, name: str, provider: Provider):
        """
        Register a provider callable under a unique name.

        Raises
        ------
        ProviderConflictError
            If the name is taken and override has not been allowed.
        """
        with self._providers_lock:
            if name in self._providers and not self._allow_provider_override:
                raise ProviderConflictError(name)
            self._providers[name] = provider
        self.logger.debug("Provider registered", provider=name)

    def register(self, name: str, provider: ConfigProvider):
        """Register a ConfigProvider object under a unique name."""
        self.register_provider(name, provider.items)

    def allow_provider_override(self):
        """
        Allow multiple calls to register_provider() with the same name.

        Useful for controlled test cases, not recommended in a real application.
        """
        self.logger.warning("configstore: ATTENTION: PROVIDER OVERRIDE ALLOWED/ENABLED")
        with self._providers_lock:
            self._allow_provider_override = True

    def error_provider(self, name: str, error: Exception):
        """Register a provider which always raises the given error."""
        self.logger.warning("Registering failing provider", provider=name, error=str(error))
        self.register(name, ErrorProvider(error))

    def in_memory(self, name: str) -> InMemoryProvider:
        """Register an empty InMemoryProvider under the given name and return it."""
        inmem = InMemoryProvider()
        self.register(name, inmem)
        return inmem

    def init_from_environment(self):
        """
        Instantiate providers from the CONFIGURATION_FROM environment variable.

        The variable holds comma separated `factory[:argument]` directives,
        e.g. `file:/etc/app.yaml,filelist:/etc/app.d`. Unknown factories are
        registered as failing providers named `factory:argument`.
        """
        cfg = os.getenv(Config.CONFIG_ENV_VAR, "")
        if not cfg.strip():
            return

        token = _active_store.set(self)
        try:
            for directive in cfg.split(","):
                if not directive.strip():
                    continue
                name, _, arg = directive.partition(":")
                name = name.strip()
                arg = arg.strip()

                factory = get_provider_factory(name)
                if factory is None:
                    self.error_provider(f"{name}:{arg}", ProviderFactoryError(name, arg))
                    continue

                self.logger.info("Instantiating provider", factory=name, argument=arg)
                factory(arg)
        finally:
            _active_store.reset(token)

    # Queries

    def get_provider(self, name: str) -> Provider:
        with self._providers_lock:
            provider = self._providers.get(name)
        if provider is None:
            raise ProviderNotFoundError(name)
        return provider

    def provider_names(self) -> List[str]:
        """Registered provider names, in registration order."""
        with self._providers_lock:
            return list(self._providers.keys())

    def get_item_list(self) -> ItemList:
        """
        Invoke every provider and concatenate their items in registration order.

        Raises
        ------
        ProviderError
            Wrapping the error of the first provider that fails.
        """
        with self._providers_lock:
            providers = list(self._providers.items())

        items = []
        for name, provider in providers:
            try:
                items.extend(provider())
            except Exception as e:
                raise ProviderError(name, e) from e
        return ItemList(items)

    # Notification

    def watch(self) -> queue.Queue:
        """
        Return a queue which gets a pending signal every time a provider
        notifies of a configuration change.

        The queue holds at most one signal: consumers should re-read the
        whole configuration on wake up rather than count signals.
        """
        watcher = queue.Queue(maxsize=1)
        with self._watchers_lock:
            self._watchers.append(watcher)
        return watcher

    def notify_watchers(self):
        """Signal every watch queue, skipping those with a pending signal."""
        with self._watchers_lock:
            watchers = list(self._watchers)
        for watcher in watchers:
            try:
                watcher.put_nowait(True)
            except queue.Full:
                pass

    # Built-in loaders

    def file(self, filename: str):
        """Register a provider reading items from the given file once."""
        self._file(filename, False, None, None)

    def file_refresh(self, filename: str, interval: float = None) -> Optional["FilePoller"]:
        """Register a provider reading from the given file, polled for changes."""
        return self._file(filename, True, None, interval)

    def file_custom(self, filename: str, decode: "DecodeFn"):
        """Register a provider reading the given file once with a custom decoder."""
        self._file(filename, False, decode, None)

    def file_custom_refresh(self, filename: str, decode: "DecodeFn",
                            interval: float = None) -> Optional["FilePoller"]:
        """Register a provider reading the given file with a custom decoder, polled for changes."""
        return self._file(filename, True, decode, interval)

    def _file(self, filename, refresh, decode, interval):
        poller = file_loader.load_file(self, filename, refresh=refresh, decode=decode, interval=interval)
        if poller is not None:
            with self._pollers_lock:
                self._pollers.append(poller)
        return poller

    def file_list(self, dirname: str):
        """Register one file provider per entry of the given directory."""
        file_loader.load_file_list(self, dirname)

    def file_tree(self, dirname: str):
        """Register a provider reading raw items from the given directory tree."""
        tree.load_file_tree(self, dirname)

    def env_variable(self, *opts: "EnvVariableOptions", name: str = "environ") -> "EnvVariableProvider":
        """Register a provider binding environment variables to item keys."""
        provider = environ.EnvVariableProvider(*opts)
        self.register(name, provider)
        return provider

    def stop_polling(self, timeout: float = None):
        """Stop every file poller started through this store."""
        with self._pollers_lock:
            pollers, self._pollers = self._pollers, []
        for poller in pollers:
            poller.stop(timeout=timeout)


_store = Store()


def get() -> Store:
    """Return the process-wide default store."""
    return _store


def new() -> Store:
    return Store()


def active_store() -> Store:
    """The store running init_from_environment in this context, else the default store."""
    store = _active_store.get()
    return store if store is not None else _store
