"""Unit tests for OverrideStore."""
from __future__ import annotations

from ease.builders.store import OverrideStore


class TestOverrideStore:
    def test_set_and_get(self) -> None:
        store = OverrideStore()
        store.set("a", 1)
        assert store.get("a") == 1
        assert "a" in store

    def test_last_write_wins(self) -> None:
        store = OverrideStore()
        store.set("a", 1)
        store.set("a", 2)
        assert store.get("a") == 2
        assert len(store) == 1

    def test_reassignment_keeps_position(self) -> None:
        store = OverrideStore()
        store.set("a", 1)
        store.set("b", 2)
        store.set("a", 3)
        assert list(store) == ["a", "b"]

    def test_remove_present(self) -> None:
        store = OverrideStore()
        store.set("a", 1)
        assert store.remove("a") is True
        assert "a" not in store

    def test_remove_absent_is_noop(self) -> None:
        store = OverrideStore()
        assert store.remove("missing") is False
        assert len(store) == 0

    def test_remove_key_holding_none(self) -> None:
        store = OverrideStore()
        store.set("a", None)
        assert store.remove("a") is True

    def test_get_default(self) -> None:
        assert OverrideStore().get("a", "fallback") == "fallback"

    def test_snapshot_is_a_copy(self) -> None:
        store = OverrideStore()
        store.set("a", 1)
        snap = store.snapshot()
        snap["a"] = 99
        assert store.get("a") == 1

    def test_items_in_insertion_order(self) -> None:
        store = OverrideStore()
        store.set("b", 2)
        store.set("a", 1)
        assert list(store.items()) == [("b", 2), ("a", 1)]

    def test_nested_flag_follows_last_write(self) -> None:
        store = OverrideStore()
        store.set("a", [1], nested=True)
        store.set("b", 2)
        assert store.is_nested("a")
        assert store.nested_keys() == frozenset({"a"})
        store.set("a", [3])
        assert not store.is_nested("a")

    def test_remove_clears_nested_flag(self) -> None:
        store = OverrideStore()
        store.set("a", [1], nested=True)
        store.remove("a")
        store.set("a", [2])
        assert store.nested_keys() == frozenset()
