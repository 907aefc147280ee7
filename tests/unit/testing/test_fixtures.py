"""Unit tests for the pytest fixtures shipped with ease."""
from __future__ import annotations

from ease.builders import A, BuilderFactory
from ease.config import BuilderSettings, get_settings


class TestFixtures:
    def test_builder_factory_is_default_registry(self, builder_factory: BuilderFactory) -> None:
        assert builder_factory is A

    def test_builder_settings_are_current(self, builder_settings: BuilderSettings) -> None:
        assert builder_settings is get_settings()
        assert builder_settings == BuilderSettings()

    def test_strict_builders(self, strict_builders: BuilderSettings) -> None:
        assert strict_builders.strict is True
        assert get_settings().strict is True

    def test_strictness_does_not_leak(self) -> None:
        assert get_settings().strict is False
