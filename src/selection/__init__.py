"""Selection module: favorites and compare lists persisted in local storage."""

from .storage import (
    LocalStore,
    MemoryStore,
    JsonFileStore,
    StoreWatcher,
)
from .selection_set import (
    BoundedSelectionSet,
    favorites,
    compare_suppliers,
)
from .actions import (
    ActionOutcome,
    SupplierActionState,
    SupplierActions,
)

__all__ = [
    # Storage
    "LocalStore",
    "MemoryStore",
    "JsonFileStore",
    "StoreWatcher",
    # Sets
    "BoundedSelectionSet",
    "favorites",
    "compare_suppliers",
    # Actions
    "ActionOutcome",
    "SupplierActionState",
    "SupplierActions",
]
