"""
Default decoder for item list files.

Files hold a YAML (or JSON, a subset of it) list of mappings:

    - key: db_host
      value: localhost
      priority: 10
"""

from typing import Any, List

import yaml

from configstore.core.exceptions import DecodeError, ValidationError
from configstore.core.item import Item


def decode_items(data: bytes) -> List[Item]:
    """
    Decode raw file content into configuration items.

    Raises
    ------
    DecodeError
        If the content is not a list of well-formed item mappings.
    """
    try:
        doc = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise DecodeError(str(e)) from e

    if doc is None:
        return []
    if not isinstance(doc, list):
        raise DecodeError(f"expected a list of items, got {type(doc).__name__}")

    return [_decode_item(index, entry) for index, entry in enumerate(doc)]


def _decode_item(index: int, entry: Any) -> Item:
    if not isinstance(entry, dict):
        raise DecodeError(f"item {index}: expected a mapping, got {type(entry).__name__}")

    value = entry.get("value")
    if value is None:
        value = ""
    elif not isinstance(value, str):
        raise DecodeError(f"item {index}: value must be a string, got {type(value).__name__}")

    try:
        return Item(entry.get("key"), value, entry.get("priority", 0))
    except ValidationError as e:
        raise DecodeError(f"item {index}: {e}") from e
