"""Testing fixtures – builder_factory, builder_settings, strict_builders."""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from ease.builders import A, BuilderFactory
from ease.config import BuilderSettings, configure, get_settings, reset_settings


@pytest.fixture
def builder_factory() -> BuilderFactory:
    """Pytest fixture: the process-wide ``A`` builder factory."""
    return A


@pytest.fixture
def builder_settings() -> Iterator[BuilderSettings]:
    """Pytest fixture: freshly loaded settings, dropped again after the test."""
    reset_settings()
    yield get_settings()
    reset_settings()


@pytest.fixture
def strict_builders(builder_settings: BuilderSettings) -> BuilderSettings:  # noqa: ARG001
    """Pytest fixture: every builder enforces its required fields."""
    return configure(strict=True)
