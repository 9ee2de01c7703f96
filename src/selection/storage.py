"""Local key-value storage for selection sets.

Values are stored as JSON text under string keys, the same shape a
browser's local storage uses. Two stores are provided:

- ``MemoryStore``: process-local, used in tests and ephemeral sessions.
- ``JsonFileStore``: a single JSON file on disk, shared by every process
  that points at the same path.

Stores notify subscribers synchronously after each write made through
them. Writes made by another process are picked up by ``StoreWatcher``,
which polls the file at a bounded interval; that interval is the longest
a subscriber can go without hearing about a change from elsewhere.
Concurrent writers are last-write-wins; there is no merge or version check.

Limitation: ``JsonFileStore`` rewrites the whole file on every write. Each
write re-reads the file first, so writes that follow one another keep every
key. Two processes writing at the same moment can still lose an update, even
to different keys, because the later rewrite is based on a file that lacks
the other process's change. Browser local storage only loses updates to the
same key.
"""

import json
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from config import config
from config.logging_config import get_logger
from src.errors import StorageCorrupt

logger = get_logger("storage")

# Called with the changed key, or None when any key may have changed
ChangeCallback = Callable[[Optional[str]], None]


class LocalStore:
    """Base class for string-valued key-value stores with change notification."""

    def __init__(self):
        self._subscribers: List[ChangeCallback] = []

    def get_raw(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_raw(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> List[str]:
        raise NotImplementedError

    def get_json(self, key: str) -> Any:
        """
        Read and decode a JSON value.

        Returns:
            Decoded value, or None when the key is absent.

        Raises:
            StorageCorrupt: If the stored text is not valid JSON.
        """
        raw = self.get_raw(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise StorageCorrupt(key, str(e))

    def set_json(self, key: str, value: Any) -> None:
        """Encode and store a JSON value."""
        self.set_raw(key, json.dumps(value))

    def snapshot(self) -> Dict[str, str]:
        """Copy of every key and its raw value."""
        snapshot = {}
        for key in self.keys():
            raw = self.get_raw(key)
            if raw is not None:
                snapshot[key] = raw
        return snapshot

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """
        Register a change callback.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify(self, key: Optional[str]) -> None:
        """Tell subscribers that a key changed."""
        for callback in list(self._subscribers):
            callback(key)


class MemoryStore(LocalStore):
    """In-process store backed by a dictionary."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        super().__init__()
        self._data: Dict[str, str] = dict(initial or {})

    def get_raw(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_raw(self, key: str, value: str) -> None:
        self._data[key] = value
        self.notify(key)

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self.notify(key)

    def keys(self) -> List[str]:
        return list(self._data.keys())


class JsonFileStore(LocalStore):
    """
    Store persisted as one JSON object in a file.

    Every read goes to disk so a value written by another process is seen
    on the next access. Writes replace the file atomically.
    """

    def __init__(self, path: Optional[Path] = None):
        super().__init__()
        self.path = Path(path or config.storage.path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Local storage file {self.path} is unreadable, treating as empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Local storage file {self.path} does not hold an object, treating as empty")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".local_storage", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_name, self.path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def signature(self) -> Optional[Tuple[int, int]]:
        """(mtime_ns, size) of the backing file, or None if it does not exist."""
        try:
            stat = self.path.stat()
        except FileNotFoundError:
            return None
        return (stat.st_mtime_ns, stat.st_size)

    def get_raw(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_raw(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        self.notify(key)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
            self.notify(key)

    def keys(self) -> List[str]:
        return list(self._read_all().keys())

    def snapshot(self) -> Dict[str, str]:
        return self._read_all()


class StoreWatcher:
    """
    Detects changes another process made to a ``JsonFileStore``.

    Call ``poll()`` from the host's event loop; it checks the file at most
    once per ``poll_interval`` seconds and notifies the store's subscribers
    for every key whose value changed. Changes written through the watched
    store itself are already notified by the store and are not repeated.
    """

    def __init__(
        self,
        store: JsonFileStore,
        poll_interval: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.store = store
        self.poll_interval = poll_interval if poll_interval is not None else config.storage.poll_interval_seconds
        self._clock = clock
        self._last_check: Optional[float] = None
        self._signature = store.signature()
        self._snapshot = store.snapshot()
        self._unsubscribe = store.subscribe(self._on_local_change)

    @property
    def staleness_window(self) -> float:
        """Longest time a change from another process can go unnoticed."""
        return self.poll_interval

    def _on_local_change(self, key: Optional[str]) -> None:
        self._signature = self.store.signature()
        self._snapshot = self.store.snapshot()

    def poll(self) -> List[str]:
        """Run ``check()`` if the poll interval has elapsed."""
        now = self._clock()
        if self._last_check is not None and now - self._last_check < self.poll_interval:
            return []
        self._last_check = now
        return self.check()

    def check(self) -> List[str]:
        """
        Compare the file against the last seen contents.

        Returns:
            Keys whose values changed, in sorted order.
        """
        signature = self.store.signature()
        if signature == self._signature:
            return []

        current = self.store.snapshot()
        changed = sorted(
            key for key in set(current) | set(self._snapshot)
            if current.get(key) != self._snapshot.get(key)
        )
        self._signature = signature
        self._snapshot = current

        for key in changed:
            logger.debug(f"External change detected for key '{key}'")
            self.store.notify(key)
        return changed

    def close(self) -> None:
        """Stop listening to the store."""
        self._unsubscribe()
