"""Builders – Builder[T], the fluent override engine.

Sub-class per target type and describe a valid baseline::

    @dataclasses.dataclass
    class User:
        full_name: str | None = None
        email: str | None = None

    class UserBuilder(Builder[User]):
        def that_is_valid(self) -> "UserBuilder":
            return self.with_(lambda u: u.full_name, "Jane Doe").with_(
                lambda u: u.email, "jane@example.com"
            )

    user = UserBuilder().that_is_valid().ignore(lambda u: u.email).build()

A builder is a mutable session: every ``with_*``/``ignore`` call changes it in
place and returns it, and every :meth:`Builder.build` materializes a fresh
instance from the overrides held at that moment.
"""
from __future__ import annotations

import abc
import typing
from collections.abc import Callable, Iterable
from typing import Any, ClassVar, Generic, TypeVar

from ease.builders.fields import FieldLike, field_default, resolve_key
from ease.builders.materializer import apply_overrides, default_instance
from ease.builders.store import OverrideStore
from ease.config import get_settings
from ease.errors import MissingOverrideForRequiredFieldError
from ease.observability.logging import get_logger

T = TypeVar("T")
B = TypeVar("B", bound="Builder[Any]")

_MISSING: Any = object()


def _infer_target(cls: type) -> type | None:
    """Find ``X`` in a ``Builder[X]`` base anywhere in the MRO of *cls*."""
    for klass in cls.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            origin = typing.get_origin(base)
            if not (isinstance(origin, type) and issubclass(origin, Builder)):
                continue
            args = typing.get_args(base)
            if args and isinstance(args[0], type):
                return args[0]
    return None


class Builder(abc.ABC, Generic[T]):
    """Generic fluent builder base for constructing test objects.

    The target type comes from, in order: the ``target`` argument, the
    ``target`` class attribute, or the ``Builder[X]`` parameterisation.

    Args:
        target: Type to build.
        factory: Replaces the default creation strategy. Called with the
            builder; it may read overrides with :meth:`get` and may call
            :meth:`apply_overrides` itself.
        strict: Enforce ``required`` fields at build time. ``None`` defers to
            :class:`~ease.config.BuilderSettings`.
        copy_overrides: Give every build its own deep copy of values produced
            by nested builders. ``None`` defers to settings. Plain ``with_``
            values are always written by identity.
        required: Extra required fields (keys or accessors).
    """

    target: ClassVar[type | None] = None
    required: ClassVar[frozenset[str]] = frozenset()

    def __init__(
        self,
        target: type[T] | None = None,
        *,
        factory: InstanceFactory | None = None,
        strict: bool | None = None,
        copy_overrides: bool | None = None,
        required: Iterable[FieldLike] = (),
    ) -> None:
        resolved = target or type(self).target or _infer_target(type(self))
        if resolved is None:
            raise TypeError(
                f"{type(self).__name__} has no target type; "
                "parameterise Builder[X] or pass target="
            )
        self._target: type[T] = resolved
        self._store = OverrideStore()
        self._factory = factory
        self._strict = strict
        self._copy_overrides = copy_overrides
        self._required = frozenset(type(self).required) | {
            resolve_key(f, self._target) for f in required
        }

    # ------------------------------------------------------------------
    # Fluent API
    # ------------------------------------------------------------------

    def with_(self: B, field: FieldLike, value: Any) -> B:
        """Set *field* to *value*, replacing any earlier override."""
        if isinstance(value, Builder):
            raise TypeError(
                f"with_() got a builder for {field!r}; use with_builder() to attach nested builders"
            )
        if isinstance(value, (list, tuple)) and any(isinstance(v, Builder) for v in value):
            raise TypeError(
                f"with_() got a sequence of builders for {field!r}; use with_many() instead"
            )
        key = self._key(field)
        self._store.set(key, value)
        get_logger(__name__).debug("builder.override_set", builder=type(self).__name__, field=key)
        return self

    def with_builder(self: B, field: FieldLike, builder: Builder[Any]) -> B:
        """Build *builder* now and store the result under *field*."""
        key = self._key(field)
        self._store.set(key, self._finalize(key, builder), nested=True)
        return self

    def with_many(self: B, field: FieldLike, *builders: Builder[Any]) -> B:
        """Build each of *builders* in order and store the list under *field*."""
        key = self._key(field)
        self._store.set(key, [self._finalize(key, b) for b in builders], nested=True)
        return self

    def ignore(self: B, field: FieldLike) -> B:
        """Remove the override for *field*; a no-op when none is set."""
        key = self._key(field)
        if self._store.remove(key):
            get_logger(__name__).debug("builder.override_removed", builder=type(self).__name__, field=key)
        return self

    having = with_
    for_ = with_
    having_builder = with_builder
    having_many = with_many
    ignore_property = ignore

    # ------------------------------------------------------------------
    # Read back
    # ------------------------------------------------------------------

    def get(self, field: FieldLike, default: Any = _MISSING) -> Any:
        """Return the pending value for *field*.

        Falls back to *default*, then to the target's declared default for
        the field, then to ``None``.
        """
        key = self._key(field)
        if key in self._store:
            return self._store.get(key)
        if default is not _MISSING:
            return default
        return field_default(self._target, key)

    def has(self, field: FieldLike) -> bool:
        return self._key(field) in self._store

    @property
    def overrides(self) -> dict[str, Any]:
        """Return a snapshot of the current overrides."""
        return self._store.snapshot()

    @property
    def target_type(self) -> type[T]:
        return self._target

    # ------------------------------------------------------------------
    # Valid-state baseline
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def that_is_valid(self: B) -> B:
        """Populate a plausible value for every field and return ``self``."""

    # ------------------------------------------------------------------
    # Materialization
    # ------------------------------------------------------------------

    def create_instance(self) -> T:
        """Produce the finished instance from the current overrides.

        Uses the injected factory when present, otherwise the target's
        zero-argument constructor followed by :meth:`apply_overrides`.
        Sub-classes may override this instead of passing ``factory=``.
        """
        if self._factory is not None:
            return self._factory(self)
        return self.apply_overrides(default_instance(self._target))

    def apply_overrides(self, instance: T) -> T:
        """Write every current override onto *instance* in insertion order."""
        copy_keys = self._store.nested_keys() if self._copies_values() else frozenset()
        return apply_overrides(instance, list(self._store.items()), copy_keys=copy_keys)

    def build(self) -> T:
        """Materialize a new ``T``; the overrides are left untouched."""
        if self._is_strict():
            missing = self._required - set(self._store)
            if missing:
                raise MissingOverrideForRequiredFieldError(self._target, missing)
        instance = self.create_instance()
        get_logger(__name__).debug(
            "builder.materialized",
            builder=type(self).__name__,
            target=self._target.__qualname__,
            overrides=len(self._store),
        )
        return instance

    def __call__(self) -> T:
        return self.build()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _key(self, field: FieldLike) -> str:
        return resolve_key(field, self._target)

    def _finalize(self, key: str, builder: Builder[Any]) -> Any:
        if not isinstance(builder, Builder):
            raise TypeError(f"expected a Builder for {key!r}, got {type(builder).__name__}")
        value = builder.build()
        get_logger(__name__).debug(
            "builder.nested_built",
            builder=type(self).__name__,
            field=key,
            nested=type(builder).__name__,
        )
        return value

    def _is_strict(self) -> bool:
        return get_settings().strict if self._strict is None else self._strict

    def _copies_values(self) -> bool:
        return get_settings().copy_overrides if self._copy_overrides is None else self._copy_overrides

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}(target={self._target.__qualname__}, overrides={self._store.snapshot()!r})"


InstanceFactory = Callable[[Builder[Any]], Any]


__all__ = ["Builder", "InstanceFactory"]
