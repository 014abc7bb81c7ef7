"""Config settings – 12-factor env-based configuration."""
from vendbus.config.settings.base import Settings
from vendbus.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
