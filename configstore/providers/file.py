"""
File based configuration loaders.

`load_file` reads one item list file into an in-memory provider named
`file:<filename>`, optionally keeping it fresh with a FilePoller.
`load_file_list` does the same for every entry of a directory.
"""

import os
import threading
from typing import Callable, List, Optional, TYPE_CHECKING

from configstore.config import Config
from configstore.core.item import Item
from configstore.core.provider import InMemoryProvider
from configstore.logger import get_configstore_logger
from configstore.providers.decode import decode_items

if TYPE_CHECKING:
    from configstore.core.registry import Store

DecodeFn = Callable[[bytes], List[Item]]

logger = get_configstore_logger().bind(component="FileLoader")


def read_file(filename: str, decode: Optional[DecodeFn] = None) -> List[Item]:
    """Read a file and decode its content, with the default decoder if none is given."""
    with open(filename, "rb") as f:
        data = f.read()
    if decode is not None:
        return list(decode(data))
    return decode_items(data)


class FilePoller:
    """
    Background task re-reading a file whenever its modification time advances.

    Errors during a cycle are skipped: the provider keeps its last good items
    and the file is tried again at the next tick. On a successful reload the
    provider's items are swapped and the store's watchers are notified.
    """

    def __init__(self, store: "Store", filename: str, provider: InMemoryProvider,
                 decode: Optional[DecodeFn] = None, interval: float = None,
                 last_modified: float = 0.0):
        self.store = store
        self.filename = filename
        self.provider = provider
        self.decode = decode
        self.interval = interval if interval is not None else Config.REFRESH_INTERVAL
        self.logger = logger.bind(filename=filename)

        self._last_modified = last_modified
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self):
        if self.is_running():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._poll_loop,
            name=f"FilePoller-{self.filename}",
            daemon=True
        )
        self._thread.start()
        self.logger.debug("File poller started", interval=self.interval)

    def stop(self, timeout: float = None):
        """Stop polling and wait for the background thread to exit."""
        self._stop_event.set()
        if self._thread and self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=timeout)
        self.logger.debug("File poller stopped")

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _poll_loop(self):
        while not self._stop_event.wait(self.interval):
            self.poll()

    def poll(self) -> bool:
        """
        Run one refresh cycle.

        Returns
        -------
        bool
            True if the file changed and the provider was reloaded
        """
        try:
            mtime = os.stat(self.filename).st_mtime
        except OSError as e:
            self.logger.debug("Skipping refresh, cannot stat file", error=str(e))
            return False

        if mtime <= self._last_modified:
            return False

        try:
            items = read_file(self.filename, self.decode)
        except Exception as e:
            self.logger.debug("Skipping refresh, cannot load file", error=str(e))
            return False

        self._last_modified = mtime
        self.provider.replace(items)
        self.logger.info("Configuration file reloaded", items=len(items))
        self.store.notify_watchers()
        return True


def load_file(store: "Store", filename: str, refresh: bool = False,
              decode: Optional[DecodeFn] = None, interval: float = None) -> Optional[FilePoller]:
    """
    Register a provider named `file:<filename>` holding the file's items.

    A file that cannot be read or decoded is registered as a failing
    provider instead. With `refresh`, a started FilePoller is returned.
    """
    if not filename:
        return None

    provider_name = f"file:{filename}"

    try:
        last_modified = os.stat(filename).st_mtime
        items = read_file(filename, decode)
    except Exception as e:
        store.error_provider(provider_name, e)
        return None

    inmem = store.in_memory(provider_name)
    logger.info("Configuration from file", filename=filename)
    inmem.add(*items)

    if not refresh:
        return None

    poller = FilePoller(store, filename, inmem, decode=decode, interval=interval,
                        last_modified=last_modified)
    poller.start()
    return poller


def load_file_list(store: "Store", dirname: str):
    """
    Register one `file:<path>` provider per entry of the directory.

    Entries are decoded with the default item list decoder.
    """
    if not dirname:
        return

    try:
        entries = sorted(os.listdir(dirname))
    except OSError as e:
        store.error_provider(f"filelist:{dirname}", e)
        return

    for entry in entries:
        store.file(os.path.join(dirname, entry))
