"""
Configuration provider base classes and implementations.

A provider is anything that can be invoked repeatedly to produce the current
ItemList of one source, raising an exception when it cannot. The store keeps
plain callables; ConfigProvider objects are registered through their bound
`items` method.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable
import threading

from .item import Item, ItemList

Provider = Callable[[], ItemList]


class ConfigProvider(ABC):
    """
    Abstract base class for object-style configuration providers.

    Implementations must be safe for concurrent calls to `items`.
    """

    @abstractmethod
    def items(self) -> ItemList:
        """Produce the current item list, or raise."""
        pass


class ErrorProvider(ConfigProvider):
    """
    Provider which always fails with the error it was built with.

    Loaders register one in place of the real provider when a source cannot
    be read, so the failure shows up at query time.
    """

    def __init__(self, error: Exception):
        self.error = error

    def items(self) -> ItemList:
        # Drop the frames of earlier queries, the traceback would grow on every raise
        raise self.error.with_traceback(None)


class InMemoryProvider(ConfigProvider):
    """
    In-memory configuration provider.

    Holds a list of items behind a lock. Every built-in loader populates one
    of these and registers it in the store.
    """

    def __init__(self, items: Iterable[Item] = ()):
        self._items = list(items)
        self._lock = threading.Lock()

    def add(self, *items: Item) -> "InMemoryProvider":
        """Append items to the in-memory list."""
        with self._lock:
            self._items.extend(items)
        return self

    def replace(self, items: Iterable[Item]):
        """Swap the whole item list."""
        new_items = list(items)
        with self._lock:
            self._items = new_items

    def items(self) -> ItemList:
        """Snapshot of the current items."""
        with self._lock:
            return ItemList(list(self._items))
