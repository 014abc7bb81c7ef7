"""Application handlers – one subscriber per event type."""
from vendbus.application.handlers.base import EventHandler
from vendbus.application.handlers.notifications import (
    DEFAULT_HISTORY,
    StockLevelOKHandler,
    StockWarningHandler,
)
from vendbus.application.handlers.refill import MachineRefillHandler
from vendbus.application.handlers.sale import MachineSaleHandler

__all__ = [
    "DEFAULT_HISTORY",
    "EventHandler",
    "MachineRefillHandler",
    "MachineSaleHandler",
    "StockLevelOKHandler",
    "StockWarningHandler",
]
