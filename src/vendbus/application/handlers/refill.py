"""Application handlers – MachineRefillHandler."""

from __future__ import annotations

from vendbus.application.handlers.base import EventHandler
from vendbus.domain.events import EventType, MachineRefillEvent, StockLevelOKEvent
from vendbus.domain.machine import LOW_STOCK_THRESHOLD, Machine
from vendbus.kernel.ddd.event_bus import PublishSubscribeService
from vendbus.kernel.ddd.repository import Repository
from vendbus.observability.logging import get_logger


class MachineRefillHandler(EventHandler[MachineRefillEvent]):
    """Restock a machine and announce once when it recovers to the threshold."""

    event_type = EventType.REFILL
    event_class = MachineRefillEvent

    def __init__(
        self,
        machines: Repository[Machine],
        publisher: PublishSubscribeService,
        *,
        threshold: int = LOW_STOCK_THRESHOLD,
    ) -> None:
        self._machines = machines
        self._publisher = publisher
        self._threshold = threshold
        self._log = get_logger(__name__)

    def on_event(self, event: MachineRefillEvent) -> None:
        machine = self._machines.lookup(event.machine_id)
        was_below = machine.is_low(self._threshold)
        stock = machine.restock(event.refill_quantity)

        self._log.info(
            "refill.handled",
            event_type=event.event_type,
            machine_id=event.machine_id,
            refill=event.refill_quantity,
            stock_level=stock,
            publish_allowed=was_below,
        )

        if stock >= self._threshold and was_below:
            self._publisher.publish(StockLevelOKEvent(event.machine_id, stock))


__all__ = ["MachineRefillHandler"]
