"""Config – SimulationSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from vendbus.config.settings.base import Settings
from vendbus.domain.machine import LOW_STOCK_THRESHOLD
from vendbus.kernel.errors import InvalidSettingValueError


@dataclasses.dataclass
class SimulationSettings(Settings):
    """Settings for one simulation run, read from ``VENDBUS_*`` variables."""

    _prefix: ClassVar[str] = "VENDBUS"

    machine_ids: list[str] = dataclasses.field(default_factory=lambda: ["001", "002", "003"])
    initial_stock: int = 5
    low_stock_threshold: int = LOW_STOCK_THRESHOLD
    event_count: int = 9
    seed: int | None = None
    sale_quantities: list[int] = dataclasses.field(default_factory=lambda: [3, 5])
    refill_quantities: list[int] = dataclasses.field(default_factory=lambda: [3, 5])
    notification_history: int = 50
    log_level: str = "INFO"
    log_json: bool = False

    def _validate(self) -> None:
        if not self.machine_ids:
            raise InvalidSettingValueError("machine_ids", self.machine_ids, "at least one machine is required")
        if len(set(self.machine_ids)) != len(self.machine_ids):
            raise InvalidSettingValueError("machine_ids", self.machine_ids, "machine ids must be unique")
        if any(not mid for mid in self.machine_ids):
            raise InvalidSettingValueError("machine_ids", self.machine_ids, "machine ids must not be empty")
        for name in ("initial_stock", "low_stock_threshold", "event_count"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidSettingValueError(name, value, "must be non-negative")
        if self.notification_history < 1:
            raise InvalidSettingValueError("notification_history", self.notification_history, "must be positive")
        for name in ("sale_quantities", "refill_quantities"):
            choices = getattr(self, name)
            if not choices or any(q < 0 for q in choices):
                raise InvalidSettingValueError(name, choices, "needs at least one non-negative quantity")


__all__ = ["SimulationSettings"]
