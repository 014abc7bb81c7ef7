"""Machine events – the closed set of variants routed by the bus.

Every variant carries the target machine identity and one quantity.
Sold and refilled quantities are non-negative; the stock left reported by
warning and OK events may be negative. ``EventType`` values double as
routing keys and match the variant class names.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import ClassVar, assert_never

from vendbus.kernel.ddd.domain_event import DomainEvent
from vendbus.kernel.errors import ValidationError


class EventType(str, Enum):
    """Routing key for each event variant."""

    SALE = "MachineSaleEvent"
    REFILL = "MachineRefillEvent"
    WARNING = "StockWarningEvent"
    OK = "StockLevelOKEvent"


def _require_non_negative(event: _MachineEventBase, field: str, value: int) -> None:
    if value < 0:
        raise ValidationError(
            f"{event.event_type} {field} must be non-negative",
            errors=[{"field": field, "value": value}],
        )


@dataclasses.dataclass(frozen=True)
class _MachineEventBase(DomainEvent):
    machine_id: str

    kind: ClassVar[EventType]

    def __post_init__(self) -> None:
        if not self.machine_id:
            raise ValidationError(f"{self.event_type} requires a machine id")

    @property
    def type(self) -> EventType:
        return self.kind

    @property
    def event_type(self) -> str:
        return self.kind.value


@dataclasses.dataclass(frozen=True)
class MachineSaleEvent(_MachineEventBase):
    """Items were sold from a machine."""

    sold_quantity: int

    kind: ClassVar[EventType] = EventType.SALE

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_non_negative(self, "sold_quantity", self.sold_quantity)

    @property
    def quantity(self) -> int:
        return self.sold_quantity


@dataclasses.dataclass(frozen=True)
class MachineRefillEvent(_MachineEventBase):
    """A machine was refilled."""

    refill_quantity: int

    kind: ClassVar[EventType] = EventType.REFILL

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_non_negative(self, "refill_quantity", self.refill_quantity)

    @property
    def quantity(self) -> int:
        return self.refill_quantity


@dataclasses.dataclass(frozen=True)
class StockWarningEvent(_MachineEventBase):
    """A machine's stock dropped below the low-stock threshold.

    ``remaining_quantity`` is the stock left after the sale and may be
    negative.
    """

    remaining_quantity: int

    kind: ClassVar[EventType] = EventType.WARNING

    @property
    def quantity(self) -> int:
        return self.remaining_quantity


@dataclasses.dataclass(frozen=True)
class StockLevelOKEvent(_MachineEventBase):
    """A machine's stock climbed back to the low-stock threshold or above."""

    remaining_quantity: int

    kind: ClassVar[EventType] = EventType.OK

    @property
    def quantity(self) -> int:
        return self.remaining_quantity


MachineEvent = MachineSaleEvent | MachineRefillEvent | StockWarningEvent | StockLevelOKEvent

EVENT_CLASSES: dict[EventType, type[_MachineEventBase]] = {
    EventType.SALE: MachineSaleEvent,
    EventType.REFILL: MachineRefillEvent,
    EventType.WARNING: StockWarningEvent,
    EventType.OK: StockLevelOKEvent,
}


def describe_event(event: MachineEvent) -> str:
    """Human-readable one-liner for *event*."""
    match event:
        case MachineSaleEvent():
            detail = f"sold={event.sold_quantity}"
        case MachineRefillEvent():
            detail = f"refill={event.refill_quantity}"
        case StockWarningEvent() | StockLevelOKEvent():
            detail = f"stock_left={event.remaining_quantity}"
        case _:
            assert_never(event)
    return f"{event.event_type}, machine={event.machine_id}, {detail}"


__all__ = [
    "EVENT_CLASSES",
    "EventType",
    "MachineEvent",
    "MachineRefillEvent",
    "MachineSaleEvent",
    "StockLevelOKEvent",
    "StockWarningEvent",
    "describe_event",
]
