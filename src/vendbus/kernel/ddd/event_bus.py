"""PublishSubscribeService port – in-process, single-subscriber event routing."""

from __future__ import annotations

from typing import Protocol

from vendbus.kernel.ddd.domain_event import DomainEvent


class Subscriber(Protocol):
    """Anything that can consume a routed event."""

    def handle(self, event: DomainEvent) -> None: ...


class PublishSubscribeService(Protocol):
    """Port: route each event type to at most one subscriber.

    Handlers are registered by bootstrap or test setup. Delivery is
    synchronous; a subscriber may publish again before returning.

    Example::

        bus = InProcessPublishSubscribeService()
        bus.subscribe(EventType.SALE, sale_handler)
        bus.publish(MachineSaleEvent("001", 3))
    """

    def publish(self, event: DomainEvent) -> None:
        """Deliver *event* to the subscriber registered for its type, if any."""
        ...

    def subscribe(self, event_type: str, handler: Subscriber) -> None:
        """Register *handler* for *event_type* unless one is already registered."""
        ...

    def unsubscribe(self, event_type: str, handler: Subscriber) -> None:
        """Remove whichever subscriber is registered for *event_type*."""
        ...


__all__ = ["PublishSubscribeService", "Subscriber"]
