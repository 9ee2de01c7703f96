"""Per-supplier favorite and compare actions.

Wraps the two selection sets with the behavior of the supplier action
buttons: each toggle reports the new state together with the notice to
show the user.
"""

from dataclasses import dataclass
from typing import Optional

from src.errors import CapacityExceeded
from src.selection.selection_set import BoundedSelectionSet, compare_suppliers, favorites
from src.selection.storage import LocalStore


@dataclass(frozen=True)
class ActionOutcome:
    """Result of one action button press."""

    active: bool
    message: str
    ok: bool = True
    error: Optional[CapacityExceeded] = None


@dataclass(frozen=True)
class SupplierActionState:
    """Button states for one supplier."""

    is_favorited: bool
    is_comparing: bool
    can_add_to_compare: bool


class SupplierActions:
    """Favorite / compare toggles for supplier cards and detail pages."""

    def __init__(
        self,
        favorites_set: BoundedSelectionSet,
        compare_set: BoundedSelectionSet,
    ):
        self.favorites = favorites_set
        self.compare = compare_set

    @classmethod
    def from_store(cls, store: LocalStore) -> "SupplierActions":
        return cls(favorites(store), compare_suppliers(store))

    def state(self, supplier_id: str) -> SupplierActionState:
        """Current button states; a supplier already compared can always be toggled."""
        is_comparing = self.compare.has(supplier_id)
        return SupplierActionState(
            is_favorited=self.favorites.has(supplier_id),
            is_comparing=is_comparing,
            can_add_to_compare=self.compare.can_add() or is_comparing,
        )

    def toggle_favorite(self, supplier_id: str) -> ActionOutcome:
        was_added = self.favorites.toggle(supplier_id)
        return ActionOutcome(
            active=was_added,
            message="Added to favorites" if was_added else "Removed from favorites",
        )

    def toggle_compare(self, supplier_id: str) -> ActionOutcome:
        if self.compare.has(supplier_id):
            self.compare.remove(supplier_id)
            return ActionOutcome(active=False, message="Removed from comparison")

        if self.compare.add(supplier_id):
            return ActionOutcome(active=True, message="Added to comparison")

        capacity = self.compare.capacity or 0
        return ActionOutcome(
            active=False,
            message=f"You can only compare up to {capacity} suppliers",
            ok=False,
            error=CapacityExceeded(self.compare.key, capacity),
        )

    def favorites_count(self) -> int:
        return self.favorites.count()

    def compare_count(self) -> int:
        return self.compare.count()
