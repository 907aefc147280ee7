"""Root error class shared by builder and settings failures."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the ease error hierarchy.

    Every error carries a stable ``code`` slug and a ``detail`` dict naming
    the offending field, target type or setting, so a failing test reports
    exactly which fixture was misconfigured.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Field / target / setting context.
        cause: Exception that triggered this error, if any.
    """

    default_code: str = "ease_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form used by ``__str__`` and log events."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
