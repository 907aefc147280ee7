"""Builders – field resolution.

A *field* can be named three ways when talking to a builder:

* a plain string key, returned unchanged::

      builder.with_("email", "a@b.c")

* an accessor callable that performs one direct attribute read::

      builder.with_(lambda u: u.email, "a@b.c")

* a :class:`FieldRef` taken from :func:`fields_of`::

      F = fields_of(User)
      builder.with_(F.email, "a@b.c")

Accessors are resolved by calling them once with a recording probe, so no
source inspection is needed and ``operator.attrgetter("email")`` works too.
Anything other than a single attribute read (method calls, arithmetic,
indexing, chained reads) raises :class:`InvalidAccessorError` at the call
site.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, Generic, TypeVar, Union

from ease.errors import InvalidAccessorError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class FieldRef(Generic[T]):
    """A typed reference to one field of ``owner``."""

    owner: type[T]
    name: str

    def __str__(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"


FieldLike = Union[str, FieldRef[Any], Callable[[Any], Any]]


class FieldPath(Generic[T]):
    """Attribute access yields :class:`FieldRef` objects for ``owner``."""

    __slots__ = ("_owner",)

    def __init__(self, owner: type[T]) -> None:
        object.__setattr__(self, "_owner", owner)

    def __getattr__(self, name: str) -> FieldRef[T]:
        if name.startswith("__"):
            raise AttributeError(name)
        declared = field_names(self._owner)
        if declared is not None and name not in declared:
            raise InvalidAccessorError(
                f"{self._owner.__qualname__}.{name}",
                f"{self._owner.__qualname__} has no field {name!r}",
            )
        return FieldRef(self._owner, name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("FieldPath is read-only")

    def __repr__(self) -> str:
        return f"fields_of({self._owner.__qualname__})"


def fields_of(owner: type[T]) -> FieldPath[T]:
    """Return a :class:`FieldPath` for ``owner``."""
    return FieldPath(owner)


def is_namedtuple(target: Any) -> bool:
    return isinstance(target, type) and issubclass(target, tuple) and hasattr(target, "_fields")


def field_names(target: Any) -> tuple[str, ...] | None:
    """Declared field names of a dataclass or namedtuple target, ``None`` otherwise."""
    if isinstance(target, type) and dataclasses.is_dataclass(target):
        return tuple(f.name for f in dataclasses.fields(target))
    if is_namedtuple(target):
        return tuple(target._fields)
    return None


def field_default(target: Any, name: str) -> Any:
    """Zero value for ``name``: the declared default if any, else ``None``."""
    if is_namedtuple(target):
        return target._field_defaults.get(name)
    if not (isinstance(target, type) and dataclasses.is_dataclass(target)):
        return None
    for f in dataclasses.fields(target):
        if f.name != name:
            continue
        if f.default is not dataclasses.MISSING:
            return f.default
        if f.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
            return f.default_factory()  # type: ignore[misc]
        return None
    return None


# ---------------------------------------------------------------------------
# Accessor probing
# ---------------------------------------------------------------------------


class _BadRead(Exception):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class _Read:
    """Value handed back by the probe for an attribute read."""

    __slots__ = ("_ease_probe", "_ease_name")

    def __init__(self, probe: _Probe, name: str) -> None:
        self._ease_probe = probe
        self._ease_name = name

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        raise _BadRead(f"chained read {self._ease_name}.{name}")

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        raise _BadRead(f"call of {self._ease_name}()")

    def __getitem__(self, key: Any) -> Any:
        raise _BadRead(f"indexing of {self._ease_name}")

    def __bool__(self) -> bool:
        raise _BadRead(f"truth test of {self._ease_name}")

    def __iter__(self) -> Any:
        raise _BadRead(f"iteration over {self._ease_name}")


class _Probe:
    """Stand-in instance that records attribute reads."""

    __slots__ = ("_ease_reads",)

    def __init__(self) -> None:
        self._ease_reads: list[str] = []

    def __getattr__(self, name: str) -> _Read:
        if name.startswith("__"):
            raise AttributeError(name)
        self._ease_reads.append(name)
        return _Read(self, name)


def _probe(accessor: Callable[[Any], Any]) -> str:
    probe = _Probe()
    try:
        result = accessor(probe)
    except _BadRead as exc:
        raise InvalidAccessorError(accessor, exc.reason) from None
    except Exception as exc:
        raise InvalidAccessorError(
            accessor, f"not a direct field read ({type(exc).__name__}: {exc})", cause=exc
        ) from exc

    if not probe._ease_reads:
        raise InvalidAccessorError(accessor, "reads no field")
    if len(probe._ease_reads) > 1:
        raise InvalidAccessorError(accessor, f"reads several fields {probe._ease_reads}")
    if not isinstance(result, _Read) or result._ease_probe is not probe:
        raise InvalidAccessorError(accessor, "does not return the field it reads")
    return result._ease_name


# ---------------------------------------------------------------------------
# Public resolver
# ---------------------------------------------------------------------------


def resolve_key(field: FieldLike, target: type | None = None) -> str:
    """Resolve ``field`` into the string key used by the override store.

    When ``target`` is a dataclass or namedtuple, accessors and field refs are checked
    against its declared fields. Plain strings are returned unchanged so
    that custom factories can use keys the target does not declare.
    """
    if isinstance(field, str):
        if not field.strip():
            raise InvalidAccessorError(field, "empty key")
        return field

    if isinstance(field, FieldRef):
        if target is not None and not (
            isinstance(target, type) and issubclass(target, field.owner)
        ):
            raise InvalidAccessorError(
                field, f"belongs to {field.owner.__qualname__}, not {target.__qualname__}"
            )
        name = field.name
    elif callable(field):
        name = _probe(field)
    else:
        raise InvalidAccessorError(field, "expected a str key, FieldRef or accessor callable")

    declared = field_names(target)
    if declared is not None and name not in declared:
        owner = target.__qualname__  # type: ignore[union-attr]
        raise InvalidAccessorError(field, f"{owner} has no field {name!r}")
    return name


__all__ = [
    "FieldLike",
    "FieldPath",
    "FieldRef",
    "field_default",
    "field_names",
    "fields_of",
    "is_namedtuple",
    "resolve_key",
]
