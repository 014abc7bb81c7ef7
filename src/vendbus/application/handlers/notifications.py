"""Application handlers – terminal stock notification handlers.

These handlers end the sale → warning and refill → ok chains: they log a
notification and never mutate state or publish.
"""

from __future__ import annotations

from collections import deque

from vendbus.application.handlers.base import EventHandler
from vendbus.domain.events import EventType, StockLevelOKEvent, StockWarningEvent, describe_event
from vendbus.observability.logging import get_logger

#: Default number of notifications each handler remembers.
DEFAULT_HISTORY = 50


class StockWarningHandler(EventHandler[StockWarningEvent]):
    """Report that a machine is running low."""

    event_type = EventType.WARNING
    event_class = StockWarningEvent

    def __init__(self, history: int = DEFAULT_HISTORY) -> None:
        self.notifications: deque[str] = deque(maxlen=history)
        self._log = get_logger(__name__)

    def on_event(self, event: StockWarningEvent) -> None:
        self.notifications.append(describe_event(event))
        self._log.warning(
            "stock.warning",
            event_type=event.event_type,
            machine_id=event.machine_id,
            stock_level=event.remaining_quantity,
        )


class StockLevelOKHandler(EventHandler[StockLevelOKEvent]):
    """Report that a machine is back to a healthy stock level."""

    event_type = EventType.OK
    event_class = StockLevelOKEvent

    def __init__(self, history: int = DEFAULT_HISTORY) -> None:
        self.notifications: deque[str] = deque(maxlen=history)
        self._log = get_logger(__name__)

    def on_event(self, event: StockLevelOKEvent) -> None:
        self.notifications.append(describe_event(event))
        self._log.info(
            "stock.ok",
            event_type=event.event_type,
            machine_id=event.machine_id,
            stock_level=event.remaining_quantity,
        )


__all__ = ["DEFAULT_HISTORY", "StockLevelOKHandler", "StockWarningHandler"]
