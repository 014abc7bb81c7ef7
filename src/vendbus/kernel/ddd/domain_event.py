"""Domain event base class."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from uuid import uuid4


@dataclasses.dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for domain events.

    Subclasses add their own payload fields; the envelope fields below are
    keyword-only so subclasses may declare positional payload fields.

    Example::

        @dataclasses.dataclass(frozen=True)
        class MachineSaleEvent(MachineEvent):
            sold_quantity: int
    """

    event_id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC), compare=False
    )

    @property
    def event_type(self) -> str:
        return type(self).__name__


__all__ = ["DomainEvent"]
