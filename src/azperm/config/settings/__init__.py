"""Config settings – environment-based configuration."""
from azperm.config.settings.base import Settings
from azperm.config.settings.factory import SettingsFactory
from azperm.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
