"""Tests for bounded selection sets (favorites and compare)."""

import json

import pytest

from src.selection.selection_set import BoundedSelectionSet, compare_suppliers, favorites
from src.selection.storage import MemoryStore


class TestCompareCapacity:
    """Tests for the three-supplier compare list."""

    def test_fourth_add_is_rejected(self, memory_store):
        """Test that adding beyond capacity returns False and leaves the set unchanged."""
        compare = compare_suppliers(memory_store)

        assert compare.add("A") is True
        assert compare.add("B") is True
        assert compare.add("C") is True
        assert compare.add("D") is False

        assert compare.get() == ["A", "B", "C"]
        assert compare.count() == 3
        assert compare.can_add() is False

    def test_remove_frees_a_slot(self, memory_store):
        compare = compare_suppliers(memory_store)
        for item in ("A", "B", "C"):
            compare.add(item)

        compare.remove("B")

        assert compare.can_add() is True
        assert compare.add("D") is True
        assert compare.get() == ["A", "C", "D"]

    def test_toggle_on_full_set_is_rejected(self, memory_store):
        compare = compare_suppliers(memory_store)
        for item in ("A", "B", "C"):
            compare.add(item)

        assert compare.toggle("D") is False
        assert "D" not in compare

    def test_rejection_is_logged(self, memory_store, caplog):
        compare = BoundedSelectionSet(memory_store, "compare", capacity=1)
        compare.add("A")

        with caplog.at_level("INFO", logger="supplier_directory"):
            compare.add("B")

        assert "Maximum of 1 reached for 'compare'" in caplog.text

    def test_invalid_capacity(self, memory_store):
        with pytest.raises(ValueError):
            BoundedSelectionSet(memory_store, "compare", capacity=0)


class TestSetOperations:
    """Tests for add, remove, toggle and clear."""

    def test_add_is_idempotent(self, memory_store):
        """Test that adding an id twice stores it once."""
        favs = favorites(memory_store)

        assert favs.add("A") is True
        assert favs.add("A") is False
        assert favs.get() == ["A"]

    def test_favorites_are_unbounded(self, memory_store):
        favs = favorites(memory_store)
        for i in range(50):
            assert favs.add(f"supplier-{i}")

        assert favs.count() == 50
        assert favs.is_bounded is False
        assert favs.can_add() is True

    def test_toggle_twice_restores_state(self, memory_store):
        """Test toggle symmetry on both an absent and a present id."""
        favs = favorites(memory_store)
        favs.add("A")
        before = favs.get()

        assert favs.toggle("B") is True
        assert favs.toggle("B") is False
        assert favs.get() == before

        assert favs.toggle("A") is False
        assert favs.toggle("A") is True
        assert set(favs.get()) == set(before)

    def test_insertion_order_is_kept(self, memory_store):
        favs = favorites(memory_store)
        for item in ("C", "A", "B"):
            favs.add(item)
        assert favs.get() == ["C", "A", "B"]

    def test_remove_missing_id_still_writes(self, memory_store):
        favs = favorites(memory_store)
        favs.remove("nope")
        assert memory_store.get_raw("favorites") == "[]"

    def test_clear(self, memory_store):
        favs = favorites(memory_store)
        favs.add("A")
        favs.clear()

        assert favs.get() == []
        assert memory_store.get_raw("favorites") is None

    def test_membership_and_length(self, memory_store):
        favs = favorites(memory_store)
        favs.add("A")

        assert "A" in favs
        assert "B" not in favs
        assert 42 not in favs
        assert len(favs) == 1

    def test_sets_use_separate_keys(self, memory_store):
        favorites(memory_store).add("A")
        compare_suppliers(memory_store).add("B")

        assert json.loads(memory_store.get_raw("favorites")) == ["A"]
        assert json.loads(memory_store.get_raw("compare")) == ["B"]

    def test_no_in_memory_copy(self, memory_store):
        """Test that two set objects on one store see each other's writes."""
        first = favorites(memory_store)
        second = favorites(memory_store)

        first.add("A")
        assert second.has("A")


class TestCorruptStorage:
    """Tests for recovering from unreadable stored values."""

    @pytest.mark.parametrize(
        "raw",
        ["{not json", '{"a": 1}', '"just a string"', "[1, 2, 3]", "null"],
    )
    def test_unreadable_value_reads_as_empty(self, raw):
        store = MemoryStore({"favorites": raw})
        favs = favorites(store)

        assert favs.get() == []
        assert favs.count() == 0

    def test_corrupt_value_is_overwritten_on_add(self):
        store = MemoryStore({"compare": "{not json"})
        compare = compare_suppliers(store)

        assert compare.add("A") is True
        assert json.loads(store.get_raw("compare")) == ["A"]

    def test_corruption_is_logged(self, caplog):
        store = MemoryStore({"favorites": "{not json"})

        with caplog.at_level("WARNING", logger="supplier_directory"):
            favorites(store).get()

        assert "treating 'favorites' as empty" in caplog.text

    def test_duplicate_ids_in_storage_are_collapsed(self):
        store = MemoryStore({"favorites": '["A", "B", "A"]'})
        assert favorites(store).get() == ["A", "B"]

    def test_overfull_stored_compare_list_rejects_adds(self):
        """Test that a stored list already over capacity accepts no more ids."""
        store = MemoryStore({"compare": '["A", "B", "C", "D"]'})
        compare = compare_suppliers(store)

        assert compare.add("E") is False
        assert compare.count() == 4


class TestSubscribe:
    """Tests for change notifications."""

    def test_callback_receives_current_ids(self, memory_store):
        favs = favorites(memory_store)
        seen = []
        favs.subscribe(seen.append)

        favs.add("A")
        favs.add("B")
        favs.remove("A")

        assert seen == [["A"], ["A", "B"], ["B"]]

    def test_other_keys_do_not_notify(self, memory_store):
        seen = []
        favorites(memory_store).subscribe(seen.append)

        compare_suppliers(memory_store).add("A")

        assert seen == []

    def test_unsubscribe(self, memory_store):
        favs = favorites(memory_store)
        seen = []
        unsubscribe = favs.subscribe(seen.append)
        unsubscribe()

        favs.add("A")
        assert seen == []
