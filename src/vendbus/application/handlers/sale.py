"""Application handlers – MachineSaleHandler."""

from __future__ import annotations

from vendbus.application.handlers.base import EventHandler
from vendbus.domain.events import EventType, MachineSaleEvent, StockWarningEvent
from vendbus.domain.machine import LOW_STOCK_THRESHOLD, Machine
from vendbus.kernel.ddd.event_bus import PublishSubscribeService
from vendbus.kernel.ddd.repository import Repository
from vendbus.observability.logging import get_logger


class MachineSaleHandler(EventHandler[MachineSaleEvent]):
    """Withdraw sold items and warn once when stock falls below the threshold.

    The warning is edge-triggered: it fires only for the sale that takes the
    machine from ``>= threshold`` to ``< threshold``. Sales while already low
    publish nothing. Stock may go negative.
    """

    event_type = EventType.SALE
    event_class = MachineSaleEvent

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

    def on_event(self, event: MachineSaleEvent) -> None:
        machine = self._machines.lookup(event.machine_id)
        was_above = not machine.is_low(self._threshold)
        stock = machine.withdraw(event.sold_quantity)

        self._log.info(
            "sale.handled",
            event_type=event.event_type,
            machine_id=event.machine_id,
            sold=event.sold_quantity,
            stock_level=stock,
            publish_allowed=was_above,
        )

        if stock < self._threshold and was_above:
            self._publisher.publish(StockWarningEvent(event.machine_id, stock))


__all__ = ["MachineSaleHandler"]
