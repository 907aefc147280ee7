"""Builder errors — usage and configuration mistakes in fixture builders.

None of these are transient: they surface straight to the test that
triggered them.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ease.errors.base import BaseError


def _type_name(target: Any) -> str:
    return getattr(target, "__qualname__", None) or repr(target)


class BuilderError(BaseError):
    """Raised when a builder is misused or misconfigured."""

    default_code = "builder_error"


class InvalidAccessorError(BuilderError):
    """A field selector is not a single direct attribute read."""

    default_code = "invalid_accessor"

    def __init__(self, accessor: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid field accessor {accessor!r}: {reason}",
            detail={"accessor": repr(accessor), "reason": reason},
            **kwargs,
        )
        self.accessor = accessor
        self.reason = reason


class NoDefaultConstructorError(BuilderError):
    """The target cannot be created without arguments."""

    default_code = "no_default_constructor"

    def __init__(self, target: type, **kwargs: Any) -> None:
        name = _type_name(target)
        super().__init__(
            f"Unable to invoke a zero-argument constructor for {name}. "
            "Pass factory= to the builder or override create_instance().",
            detail={"target": name},
            **kwargs,
        )
        self.target = target


class FieldNotWritableError(BuilderError):
    """An override cannot be written onto the materialized instance."""

    default_code = "field_not_writable"

    def __init__(self, target: type, field: str, reason: str, **kwargs: Any) -> None:
        name = _type_name(target)
        super().__init__(
            f"Cannot write field {field!r} on {name}: {reason}. "
            "Pass factory= to the builder or override create_instance().",
            detail={"target": name, "field": field, "reason": reason},
            **kwargs,
        )
        self.target = target
        self.field = field
        self.reason = reason


class MissingOverrideForRequiredFieldError(BuilderError):
    """Strict mode: a required field has no override at build time."""

    default_code = "missing_required_override"

    def __init__(self, target: type, fields: Iterable[str], **kwargs: Any) -> None:
        name = _type_name(target)
        missing = sorted(fields)
        super().__init__(
            f"{name} is missing overrides for required field(s): {', '.join(missing)}",
            detail={"target": name, "fields": missing},
            **kwargs,
        )
        self.target = target
        self.fields = missing


__all__ = [
    "BuilderError",
    "FieldNotWritableError",
    "InvalidAccessorError",
    "MissingOverrideForRequiredFieldError",
    "NoDefaultConstructorError",
]
