"""
Environment variable provider.

Binds environment variable names to item keys. The environment is read again
on every call to `items`, so the provider always reflects live values.
"""

import os
import threading
from typing import Callable, Dict

from configstore.core.exceptions import ValidationError
from configstore.core.item import Item, ItemList
from configstore.core.provider import ConfigProvider, InMemoryProvider
from configstore.logger import get_configstore_logger

ENV_SEPARATOR = "_"

logger = get_configstore_logger().bind(component="EnvVariableProvider")


class EnvVariableProvider(ConfigProvider):
    """
    Provider materializing bound environment variables as items.

    Parameters
    ----------
    *opts : EnvVariableOptions
        Configuration functions applied in order, see `with_priority` and
        `with_automatic_binding`.
    """

    def __init__(self, *opts: "EnvVariableOptions"):
        self._in_memory = InMemoryProvider()
        self._bindings: Dict[str, str] = {}
        self._lock = threading.Lock()
        self.priority = 0

        for opt in opts:
            opt(self)

    @property
    def bindings(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._bindings)

    def bind_env(self, environment_variable: str, item_key: str):
        """Bind an environment variable to an item key, replacing any previous binding."""
        if not item_key:
            raise ValidationError("item_key", environment_variable, "binding needs a non-empty item key")
        with self._lock:
            self._bindings[environment_variable] = item_key

    def items(self) -> ItemList:
        environ = dict(os.environ)
        with self._lock:
            bindings = dict(self._bindings)

        items = [
            Item(bindings[variable], value, self.priority)
            for variable, value in environ.items()
            if variable in bindings
        ]
        self._in_memory.replace(items)
        return self._in_memory.items()


EnvVariableOptions = Callable[[EnvVariableProvider], None]


def with_priority(priority: int) -> EnvVariableOptions:
    """Set the priority of every item produced by the provider."""
    def apply(provider: EnvVariableProvider):
        provider.priority = priority
    return apply


def derive_key(variable: str, prefix: str, key_separator: str) -> str:
    """
    Turn an environment variable name into an item key.

    `APP_DB_HOST` with prefix `APP` and separator `.` gives `db.host`.
    """
    key = variable[len(prefix):]
    if key.startswith(ENV_SEPARATOR):
        key = key[len(ENV_SEPARATOR):]
    return key.replace(ENV_SEPARATOR, key_separator).lower()


def with_automatic_binding(prefix: str, key_separator: str) -> EnvVariableOptions:
    """
    Bind every variable currently set whose name starts with `prefix`.

    The environment is scanned once, when the option is applied; variables
    appearing later need an explicit `bind_env`.
    """
    def apply(provider: EnvVariableProvider):
        for variable in list(os.environ):
            if not variable.startswith(prefix):
                continue
            key = derive_key(variable, prefix, key_separator)
            if not key:
                logger.debug("Skipping variable with empty item key", variable=variable)
                continue
            provider.bind_env(variable, key)
    return apply
