"""Builders – DynamicBuilder, an open builder without a baseline."""
from __future__ import annotations

from typing import Any, TypeVar

from ease.builders.builder import Builder

T = TypeVar("T")


class DynamicBuilder(Builder[T]):
    """Builder for ad-hoc composition when no concrete sub-class exists::

        user = DynamicBuilder(User).with_(lambda u: u.full_name, "John Doe").build()
    """

    def __init__(self, target: type[T], **kwargs: Any) -> None:
        super().__init__(target, **kwargs)

    def that_is_valid(self) -> DynamicBuilder[T]:
        return self


__all__ = ["DynamicBuilder"]
