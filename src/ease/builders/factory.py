"""Builders – BuilderFactory, the ``A.user`` style entry point.

Register concrete builders once and reach them by name::

    @A.register()
    class UserBuilder(Builder[User]):
        ...

    A.user.that_is_valid().build()   # blank builder, then baseline
    A.valid("user").build()          # same thing
    A.dynamic(Point).with_("x", 1).build()
"""
from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, TypeVar

from ease.builders.builder import Builder
from ease.builders.dynamic import DynamicBuilder

T = TypeVar("T")
BuilderT = TypeVar("BuilderT", bound=type[Builder[Any]])

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def default_name(builder_cls: type) -> str:
    """``TeamMemberBuilder`` → ``team_member``."""
    name = builder_cls.__name__
    if name.endswith("Builder") and name != "Builder":
        name = name[: -len("Builder")]
    return _CAMEL.sub("_", name).lower()


class BuilderFactory:
    """Name → builder class registry handing out fresh builders."""

    def __init__(self) -> None:
        self._builders: dict[str, type[Builder[Any]]] = {}

    def register(self, name: str | None = None) -> Callable[[BuilderT], BuilderT]:
        def decorator(builder_cls: BuilderT) -> BuilderT:
            key = name or default_name(builder_cls)
            existing = self._builders.get(key)
            if existing is not None and existing is not builder_cls:
                raise ValueError(f"builder name {key!r} already registered to {existing.__name__}")
            self._builders[key] = builder_cls
            return builder_cls

        return decorator

    def unregister(self, name: str) -> None:
        self._builders.pop(name, None)

    @property
    def names(self) -> list[str]:
        return sorted(self._builders)

    def blank(self, name_or_cls: str | type[Builder[Any]]) -> Builder[Any]:
        """A fresh builder with no overrides."""
        return self._resolve(name_or_cls)()

    def valid(self, name_or_cls: str | type[Builder[Any]]) -> Builder[Any]:
        """A fresh builder pre-populated by ``that_is_valid()``."""
        return self.blank(name_or_cls).that_is_valid()

    def dynamic(self, target: type[T], **kwargs: Any) -> DynamicBuilder[T]:
        """An open builder for *target* with no baseline."""
        return DynamicBuilder(target, **kwargs)

    def _resolve(self, name_or_cls: str | type[Builder[Any]]) -> type[Builder[Any]]:
        if isinstance(name_or_cls, str):
            try:
                return self._builders[name_or_cls]
            except KeyError:
                raise AttributeError(
                    f"no builder registered as {name_or_cls!r}; known: {', '.join(self.names) or '(none)'}"
                ) from None
        return name_or_cls

    def __getattr__(self, name: str) -> Builder[Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.blank(name)

    def __contains__(self, name: object) -> bool:
        return name in self._builders


A = BuilderFactory()

__all__ = ["A", "BuilderFactory", "default_name"]
