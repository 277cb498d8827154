"""
Directory tree loader.

Top level files become items keyed by their own name. Files inside a
sub-directory become items keyed by the sub-directory name, so they compete
for the same key. File content is the raw value, with no envelope.
Capitalization of a file's name sets its priority: capitalized files win.
"""

import os
from typing import List, TYPE_CHECKING

from configstore.config import Config
from configstore.core.exceptions import NestedDirectoryError
from configstore.core.item import Item
from configstore.logger import get_configstore_logger

if TYPE_CHECKING:
    from configstore.core.registry import Store

logger = get_configstore_logger().bind(component="FileTreeLoader")


def item_priority(basename: str) -> int:
    if basename[:1].isupper():
        return Config.HIGH_PRIORITY
    return Config.LOW_PRIORITY


def read_item(path: str, basename: str, item_key: str) -> Item:
    with open(path, "rb") as f:
        content = f.read()
    # Raw bytes kept as-is, undecodable ones survive as surrogates
    return Item(item_key, content.decode("utf-8", errors="surrogateescape"), item_priority(basename))


def browse_dir(path: str, basename: str) -> List[Item]:
    """Read every file of a sub-directory as an item keyed by the sub-directory name."""
    items = []
    for name in sorted(os.listdir(path)):
        filename = os.path.join(path, name)
        if os.path.isdir(filename):
            raise NestedDirectoryError(basename, name)
        items.append(read_item(filename, name, basename))
    return items


def read_tree(dirname: str) -> List[Item]:
    items = []
    for name in sorted(os.listdir(dirname)):
        filename = os.path.join(dirname, name)
        if os.path.isdir(filename):
            items.extend(browse_dir(filename, name))
        else:
            items.append(read_item(filename, name, name))
    return items


def load_file_tree(store: "Store", dirname: str):
    """
    Register a provider named `filetree:<dirname>` with the tree's items.

    Any failure while walking the tree registers a failing provider instead:
    partial trees are never exposed.
    """
    if not dirname:
        return

    provider_name = f"filetree:{dirname}"

    try:
        items = read_tree(dirname)
    except (OSError, NestedDirectoryError) as e:
        store.error_provider(provider_name, e)
        return

    inmem = store.in_memory(provider_name)
    logger.info("Configuration from file tree", dirname=dirname, items=len(items))
    inmem.add(*items)
