"""Builders – OverrideStore, the ordered key → value map behind a builder."""
from __future__ import annotations

from collections.abc import ItemsView, Iterator
from typing import Any


class OverrideStore:
    """Ordered mapping of field key to pending override value.

    Last write wins: setting a key again replaces its value and keeps its
    original position. Removing an absent key is a no-op.

    Keys whose value was produced by finalizing nested builders are flagged
    so that materialization can hand each build its own copy of them.
    """

    __slots__ = ("_values", "_nested")

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._nested: set[str] = set()

    def set(self, key: str, value: Any, *, nested: bool = False) -> None:
        self._values[key] = value
        if nested:
            self._nested.add(key)
        else:
            self._nested.discard(key)

    def remove(self, key: str) -> bool:
        """Drop *key*; return whether it was present."""
        self._nested.discard(key)
        return self._values.pop(key, _ABSENT) is not _ABSENT

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def is_nested(self, key: str) -> bool:
        return key in self._nested

    def nested_keys(self) -> frozenset[str]:
        return frozenset(self._nested)

    def items(self) -> ItemsView[str, Any]:
        return self._values.items()

    def snapshot(self) -> dict[str, Any]:
        """Return a shallow copy of the current overrides."""
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"OverrideStore({self._values!r})"


_ABSENT = object()

__all__ = ["OverrideStore"]
