"""Config settings – 12-factor env-based configuration."""
from ease.config.settings.base import BuilderSettings, Settings
from ease.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from ease.config.settings.registry import configure, get_settings, reset_settings

__all__ = [
    "BuilderSettings",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "configure",
    "get_settings",
    "reset_settings",
]
