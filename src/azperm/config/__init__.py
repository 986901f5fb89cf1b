"""Config – environment settings and their validation errors."""

from azperm.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from azperm.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
