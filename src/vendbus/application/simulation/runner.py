"""Application simulation – wiring and the Simulation runner."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from uuid import uuid4

from vendbus.application.handlers import (
    DEFAULT_HISTORY,
    MachineRefillHandler,
    MachineSaleHandler,
    StockLevelOKHandler,
    StockWarningHandler,
)
from vendbus.application.pubsub import InProcessPublishSubscribeService
from vendbus.application.registry import InMemoryMachineRegistry
from vendbus.application.simulation.generator import RandomEventGenerator
from vendbus.config.simulation import SimulationSettings
from vendbus.domain.events import EventType, MachineEvent
from vendbus.domain.machine import LOW_STOCK_THRESHOLD
from vendbus.observability.logging import get_logger, simulation_context


@dataclasses.dataclass(frozen=True)
class Wiring:
    """A bus together with the four handlers subscribed to it."""

    bus: InProcessPublishSubscribeService
    sale: MachineSaleHandler
    refill: MachineRefillHandler
    warning: StockWarningHandler
    ok: StockLevelOKHandler


@dataclasses.dataclass(frozen=True)
class SimulationReport:
    """Outcome of one simulation run."""

    run_id: str
    events_published: int
    handled: dict[str, int]
    final_stock: dict[str, int]
    notifications: list[str] = dataclasses.field(default_factory=list)


def build_registry(settings: SimulationSettings) -> InMemoryMachineRegistry:
    """Create one machine per configured id, all at the initial stock level."""
    registry = InMemoryMachineRegistry()
    for machine_id in settings.machine_ids:
        registry.create(machine_id, settings.initial_stock)
    return registry


def wire(
    registry: InMemoryMachineRegistry,
    *,
    threshold: int = LOW_STOCK_THRESHOLD,
    history: int = DEFAULT_HISTORY,
) -> Wiring:
    """Build a bus and subscribe one handler per event type."""
    bus = InProcessPublishSubscribeService()
    wiring = Wiring(
        bus=bus,
        sale=MachineSaleHandler(registry, bus, threshold=threshold),
        refill=MachineRefillHandler(registry, bus, threshold=threshold),
        warning=StockWarningHandler(history),
        ok=StockLevelOKHandler(history),
    )
    bus.subscribe(EventType.SALE, wiring.sale)
    bus.subscribe(EventType.REFILL, wiring.refill)
    bus.subscribe(EventType.WARNING, wiring.warning)
    bus.subscribe(EventType.OK, wiring.ok)
    return wiring


class Simulation:
    """Feed generated sale and refill events through a freshly wired bus.

    Example::

        report = Simulation(SimulationSettings(seed=7)).run()
        print(report.final_stock)
    """

    def __init__(self, settings: SimulationSettings | None = None) -> None:
        self.settings = settings or SimulationSettings()
        self.registry = build_registry(self.settings)
        self.wiring = wire(
            self.registry,
            threshold=self.settings.low_stock_threshold,
            history=self.settings.notification_history,
        )
        self._log = get_logger(__name__)

    def generator(self) -> RandomEventGenerator:
        return RandomEventGenerator(
            self.registry.ids(),
            sale_quantities=self.settings.sale_quantities,
            refill_quantities=self.settings.refill_quantities,
            seed=self.settings.seed,
        )

    def run(self, events: Iterable[MachineEvent] | None = None) -> SimulationReport:
        """Publish *events* (or ``event_count`` generated ones) in order."""
        if events is None:
            events = self.generator().generate(self.settings.event_count)

        run_id = str(uuid4())
        published = 0
        with simulation_context(run_id, seed=self.settings.seed):
            self._log.info(
                "simulation.started",
                machines=self.registry.snapshot(),
                threshold=self.settings.low_stock_threshold,
            )
            for event in events:
                self.wiring.bus.publish(event)
                published += 1

            report = SimulationReport(
                run_id=run_id,
                events_published=published,
                handled={
                    EventType.SALE.value: self.wiring.sale.handled_count,
                    EventType.REFILL.value: self.wiring.refill.handled_count,
                    EventType.WARNING.value: self.wiring.warning.handled_count,
                    EventType.OK.value: self.wiring.ok.handled_count,
                },
                final_stock=self.registry.snapshot(),
                notifications=[*self.wiring.warning.notifications, *self.wiring.ok.notifications],
            )
            self._log.info(
                "simulation.completed",
                events_published=published,
                handled=report.handled,
                final_stock=report.final_stock,
            )
        return report


__all__ = ["Simulation", "SimulationReport", "Wiring", "build_registry", "wire"]
