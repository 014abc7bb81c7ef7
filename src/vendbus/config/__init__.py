"""Config – 12-factor settings and loaders."""

from vendbus.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from vendbus.config.simulation import SimulationSettings
from vendbus.kernel.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "SimulationSettings",
]
