"""Application handlers – EventHandler base with variant checking."""

from __future__ import annotations

import abc
from typing import Any, ClassVar, Generic, TypeVar

from vendbus.domain.events import EventType
from vendbus.kernel.ddd.domain_event import DomainEvent
from vendbus.kernel.errors import UnexpectedEventError

E = TypeVar("E", bound=DomainEvent)


class EventHandler(abc.ABC, Generic[E]):
    """Handle a single event variant.

    Subclasses declare the variant they accept; :meth:`handle` refuses any
    other variant instead of trusting the bus wiring.
    """

    event_type: ClassVar[EventType]
    event_class: ClassVar[type[Any]]

    #: Number of events this handler has processed.
    handled_count: int = 0

    def handle(self, event: DomainEvent) -> None:
        if not isinstance(event, self.event_class):
            raise UnexpectedEventError(
                type(self).__name__, self.event_type.value, event.event_type
            )
        self.handled_count += 1
        self.on_event(event)

    @abc.abstractmethod
    def on_event(self, event: E) -> None: ...


__all__ = ["EventHandler"]
