"""Shared pytest configuration."""
from __future__ import annotations

import pytest

from ease.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for key in ("EASE_STRICT", "EASE_COPY_OVERRIDES", "EASE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
