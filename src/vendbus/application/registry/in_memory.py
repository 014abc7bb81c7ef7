"""Application registry – InMemoryMachineRegistry."""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from vendbus.domain.machine import Machine
from vendbus.kernel.ddd.repository import Repository
from vendbus.kernel.errors import ConflictError, MachineNotFoundError


class InMemoryMachineRegistry(Repository[Machine]):
    """Holds exactly one :class:`Machine` per identity.

    The registry is a passive store: it adds machines and hands out
    references by identity. Stock changes go through the handlers.
    """

    def __init__(self, machines: Iterable[Machine] = ()) -> None:
        self._machines: dict[str, Machine] = {}
        for machine in machines:
            self.add(machine)

    def add(self, item: Machine) -> None:
        if item.id in self._machines:
            raise ConflictError(
                f"Machine '{item.id}' is already registered",
                detail={"machine_id": item.id},
            )
        self._machines[item.id] = item

    def create(self, machine_id: str, stock_level: int = 5) -> Machine:
        machine = Machine(machine_id, stock_level)
        self.add(machine)
        return machine

    def get(self, id: str) -> Machine | None:  # noqa: A002
        return self._machines.get(id)

    def lookup(self, id: str) -> Machine:  # noqa: A002
        try:
            return self._machines[id]
        except KeyError:
            raise MachineNotFoundError(id) from None

    def ids(self) -> list[str]:
        return list(self._machines)

    def snapshot(self) -> dict[str, int]:
        """Current stock level per machine id."""
        return {mid: m.stock_level for mid, m in self._machines.items()}

    def __contains__(self, machine_id: object) -> bool:
        return machine_id in self._machines

    def __iter__(self) -> Iterator[Machine]:
        return iter(list(self._machines.values()))

    def __len__(self) -> int:
        return len(self._machines)


__all__ = ["InMemoryMachineRegistry"]
