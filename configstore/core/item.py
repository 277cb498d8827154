"""
Configuration item model.

An Item is the unit of configuration data: a key, a value and a priority used
by the resolution layer to pick a winner among items sharing the same key.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List

from .exceptions import ValidationError


@dataclass(frozen=True)
class Item:
    """Immutable key/value/priority triple."""
    key: str
    value: Any = ""
    priority: int = 0

    def __post_init__(self):
        if not isinstance(self.key, str) or not self.key:
            raise ValidationError("key", self.key, "item key must be a non-empty string")
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise ValidationError("priority", self.priority, "item priority must be an integer")

    def __str__(self) -> str:
        return f"{self.key}={self.value} (priority {self.priority})"


@dataclass
class ItemList:
    """
    Ordered items returned by a single provider call.

    Order reflects the source, not priority: winner selection happens outside
    the store.
    """
    items: List[Item] = field(default_factory=list)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    def __add__(self, other: "ItemList") -> "ItemList":
        return ItemList(self.items + list(other))

    def keys(self) -> List[str]:
        """Distinct item keys, in first-seen order."""
        return list(dict.fromkeys(it.key for it in self.items))

    def get_all(self, key: str) -> List[Item]:
        """All items for a key, in source order."""
        return [it for it in self.items if it.key == key]
