"""Testing fixtures – pytest fixtures for builders."""
from ease.testing.fixtures.builders import builder_factory, builder_settings, strict_builders

__all__ = ["builder_factory", "builder_settings", "strict_builders"]
