"""Builders – default instance creation and override application."""
from __future__ import annotations

import copy
import dataclasses
import inspect
from collections.abc import Collection, Iterable
from typing import Any, TypeVar

from ease.builders.fields import field_names, is_namedtuple
from ease.errors import FieldNotWritableError, NoDefaultConstructorError
from ease.observability.logging import get_logger

T = TypeVar("T")


def _has_zero_arg_path(target: type) -> bool | None:
    """``True``/``False`` when the signature is readable, ``None`` otherwise."""
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        return None
    for param in signature.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.default is param.empty:
            return False
    return True


def default_instance(target: type[T]) -> T:
    """Create a blank ``target`` through its zero-argument constructor."""
    if not isinstance(target, type) or inspect.isabstract(target):
        raise NoDefaultConstructorError(target)

    usable = _has_zero_arg_path(target)
    if usable is False:
        raise NoDefaultConstructorError(target)
    try:
        return target()
    except TypeError as exc:
        if usable is None:
            raise NoDefaultConstructorError(target, cause=exc) from exc
        raise


def _is_frozen(instance: Any) -> bool:
    params = getattr(type(instance), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def _declares(instance: Any, key: str) -> bool:
    """Whether a plain (non-dataclass) object already knows attribute *key*."""
    if hasattr(type(instance), key) or hasattr(instance, key):
        return True
    return any(key in inspect.get_annotations(klass) for klass in type(instance).__mro__)


def _copy(key: str, value: Any) -> Any:
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as exc:
        get_logger(__name__).debug("builder.copy_skipped", field=key, reason=str(exc))
        return value


def _replace_frozen(instance: Any, pending: dict[str, Any]) -> Any:
    init_fields = {f.name for f in dataclasses.fields(instance) if f.init}
    result = dataclasses.replace(
        instance, **{k: v for k, v in pending.items() if k in init_fields}
    )
    for key, value in pending.items():
        if key not in init_fields:
            object.__setattr__(result, key, value)
    return result


def apply_overrides(
    instance: T,
    overrides: Iterable[tuple[str, Any]],
    *,
    copy_keys: Collection[str] = frozenset(),
) -> T:
    """Write *overrides* onto *instance* in order and return the result.

    Values under *copy_keys* are deep-copied first; values that cannot be
    copied are written as they are. Everything else is written by identity.

    Frozen dataclasses are rebuilt with :func:`dataclasses.replace` and
    namedtuples with ``_replace``, so the returned object is not necessarily
    *instance* itself. Keys the target does not declare are skipped.

    Raises:
        FieldNotWritableError: an attribute rejected the write.
    """
    target = type(instance)
    declared = field_names(target)
    pending: dict[str, Any] = {}

    for key, value in overrides:
        known = key in declared if declared is not None else _declares(instance, key)
        if not known:
            get_logger(__name__).warning(
                "builder.override_skipped", target=target.__qualname__, field=key
            )
            continue
        pending[key] = _copy(key, value) if key in copy_keys else value

    if not pending:
        return instance
    if is_namedtuple(target):
        return instance._replace(**pending)  # type: ignore[attr-defined]
    if _is_frozen(instance):
        return _replace_frozen(instance, pending)
    for key, value in pending.items():
        try:
            setattr(instance, key, value)
        except (AttributeError, TypeError) as exc:
            raise FieldNotWritableError(target, key, str(exc)) from exc
    return instance


__all__ = ["apply_overrides", "default_instance"]
