"""Application-layer errors – configuration and wiring, not inventory."""

from __future__ import annotations

from vendbus.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Failure outside the inventory model: settings, CLI, wiring."""

    default_code = "application_error"


class ConfigError(ApplicationError):
    """Simulation settings could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(
            f"Environment variable {env_key} is required",
            detail={"env_key": env_key},
        )
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting parsed but is out of range for the simulation.

    ``setting`` is the environment key when raised by a loader and the
    field name when raised by ``SimulationSettings._validate``.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting}={value!r} rejected: {reason}",
            detail={"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason


__all__ = [
    "ApplicationError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
