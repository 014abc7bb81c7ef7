"""Inventory domain – machines and the events they emit."""

from vendbus.domain.events import (
    EVENT_CLASSES,
    EventType,
    MachineEvent,
    MachineRefillEvent,
    MachineSaleEvent,
    StockLevelOKEvent,
    StockWarningEvent,
    describe_event,
)
from vendbus.domain.machine import LOW_STOCK_THRESHOLD, Machine

__all__ = [
    "EVENT_CLASSES",
    "LOW_STOCK_THRESHOLD",
    "EventType",
    "Machine",
    "MachineEvent",
    "MachineRefillEvent",
    "MachineSaleEvent",
    "StockLevelOKEvent",
    "StockWarningEvent",
    "describe_event",
]
