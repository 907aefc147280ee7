"""Config – builder settings and their loaders."""

from ease.config.settings import (
    BuilderSettings,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    configure,
    get_settings,
    reset_settings,
)
from ease.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "BuilderSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "configure",
    "get_settings",
    "reset_settings",
]
