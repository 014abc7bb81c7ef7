"""Application simulation – RandomEventGenerator."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence

from vendbus.domain.events import MachineRefillEvent, MachineSaleEvent
from vendbus.kernel.errors import ValidationError


class RandomEventGenerator:
    """Produce a stream of random sale and refill events.

    Each event is a sale or a refill with equal probability, targets a
    uniformly chosen machine and carries a quantity drawn uniformly from
    the configured choices. Pass ``seed`` for a reproducible stream.
    """

    def __init__(
        self,
        machine_ids: Sequence[str],
        *,
        sale_quantities: Sequence[int] = (3, 5),
        refill_quantities: Sequence[int] = (3, 5),
        seed: int | None = None,
    ) -> None:
        if not machine_ids:
            raise ValidationError("RandomEventGenerator needs at least one machine id")
        if not sale_quantities or not refill_quantities:
            raise ValidationError("RandomEventGenerator needs quantity choices")
        self._machine_ids = list(machine_ids)
        self._sale_quantities = list(sale_quantities)
        self._refill_quantities = list(refill_quantities)
        self._random = random.Random(seed)

    def next_event(self) -> MachineSaleEvent | MachineRefillEvent:
        machine_id = self._random.choice(self._machine_ids)
        if self._random.random() < 0.5:
            return MachineSaleEvent(machine_id, self._random.choice(self._sale_quantities))
        return MachineRefillEvent(machine_id, self._random.choice(self._refill_quantities))

    def generate(self, count: int) -> list[MachineSaleEvent | MachineRefillEvent]:
        return [self.next_event() for _ in range(count)]

    def __iter__(self) -> Iterator[MachineSaleEvent | MachineRefillEvent]:
        while True:
            yield self.next_event()


__all__ = ["RandomEventGenerator"]
