"""Persisted, optionally capacity-bounded sets of supplier ids.

Favorites are unbounded; the compare list holds at most three suppliers.
Every operation reads the current stored value and writes straight back,
so there is no in-memory copy to go stale. Unreadable stored data is
treated as an empty set and never surfaces to the caller.
"""

from typing import Callable, List, Optional

from config import config
from config.logging_config import get_logger
from src.errors import CapacityExceeded, StorageCorrupt
from src.selection.storage import LocalStore

logger = get_logger("selection")


class BoundedSelectionSet:
    """
    Ordered set of unique ids persisted under one storage key.

    Usage:
        compare = BoundedSelectionSet(store, "compare", capacity=3)
        compare.add("supplier-1")      # True
        compare.add("supplier-1")      # False, already present
        compare.toggle("supplier-1")   # False, removed
    """

    def __init__(self, store: LocalStore, key: str, capacity: Optional[int] = None):
        """
        Initialize a selection set.

        Args:
            store: Storage backend shared with other sets.
            key: Storage key for this set.
            capacity: Maximum number of ids, or None for unbounded.
        """
        if capacity is not None and capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity}")
        self.store = store
        self.key = key
        self.capacity = capacity

    @property
    def is_bounded(self) -> bool:
        return self.capacity is not None

    def get(self) -> List[str]:
        """Get stored ids in insertion order; empty when absent or unreadable."""
        try:
            value = self.store.get_json(self.key)
        except StorageCorrupt as e:
            logger.warning(f"{e}; treating '{self.key}' as empty")
            return []

        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            logger.warning(f"Stored value for '{self.key}' is not a list of ids; treating as empty")
            return []

        ids: List[str] = []
        for item in value:
            if item not in ids:
                ids.append(item)
        return ids

    def count(self) -> int:
        return len(self.get())

    def has(self, item_id: str) -> bool:
        return item_id in self.get()

    def can_add(self) -> bool:
        """True if there is room for another id."""
        return self._has_room(self.get())

    def _has_room(self, current: List[str]) -> bool:
        return self.capacity is None or len(current) < self.capacity

    def _check_capacity(self, current: List[str]) -> None:
        if not self._has_room(current):
            raise CapacityExceeded(self.key, self.capacity)

    def add(self, item_id: str) -> bool:
        """
        Add an id.

        Returns:
            True if the id was added; False if it was already present or
            the set is full (the set is left unchanged).
        """
        current = self.get()
        if item_id in current:
            return False

        try:
            self._check_capacity(current)
        except CapacityExceeded as e:
            logger.info(f"Rejected '{item_id}': {e}")
            return False

        self._save(current + [item_id])
        return True

    def remove(self, item_id: str) -> None:
        """Remove an id if present. The result is always written back."""
        current = self.get()
        self._save([item for item in current if item != item_id])

    def toggle(self, item_id: str) -> bool:
        """
        Remove the id if present, otherwise try to add it.

        Returns:
            True if the id is now in the set, False otherwise.
        """
        if self.has(item_id):
            self.remove(item_id)
            return False
        return self.add(item_id)

    def clear(self) -> None:
        """Empty the set."""
        self.store.remove(self.key)

    def subscribe(self, callback: Callable[[List[str]], None]) -> Callable[[], None]:
        """
        Call ``callback`` with the current ids whenever this set may have changed.

        Returns:
            A function that removes the subscription.
        """
        def on_change(key: Optional[str]) -> None:
            if key is None or key == self.key:
                callback(self.get())

        return self.store.subscribe(on_change)

    def _save(self, ids: List[str]) -> None:
        self.store.set_json(self.key, ids)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, str) and self.has(item_id)


def favorites(store: LocalStore) -> BoundedSelectionSet:
    """The user's favorite suppliers (unbounded)."""
    return BoundedSelectionSet(store, config.storage.favorites_key)


def compare_suppliers(store: LocalStore) -> BoundedSelectionSet:
    """Suppliers queued for side-by-side comparison (at most three)."""
    return BoundedSelectionSet(
        store,
        config.storage.compare_key,
        capacity=config.storage.compare_capacity,
    )
