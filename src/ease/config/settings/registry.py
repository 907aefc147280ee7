"""Config settings – process-wide cached BuilderSettings."""
from __future__ import annotations

import dataclasses
import threading
from typing import Any

from ease.config.settings.base import BuilderSettings
from ease.config.settings.loaders import EnvSettingsLoader, SettingsLoader

_lock = threading.Lock()
_current: BuilderSettings | None = None


def get_settings(loader: SettingsLoader | None = None) -> BuilderSettings:
    """Return the cached settings, loading them from the environment once."""
    global _current
    with _lock:
        if _current is None:
            _current = (loader or EnvSettingsLoader()).load(BuilderSettings)
        return _current


def configure(**overrides: Any) -> BuilderSettings:
    """Replace the cached settings with a copy carrying *overrides*."""
    global _current
    base = get_settings()
    updated = dataclasses.replace(base, **overrides)
    with _lock:
        _current = updated
    return updated


def reset_settings() -> None:
    """Drop the cache; the next :func:`get_settings` re-reads the environment."""
    global _current
    with _lock:
        _current = None


__all__ = ["configure", "get_settings", "reset_settings"]
