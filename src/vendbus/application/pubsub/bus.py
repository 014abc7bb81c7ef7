"""Application pub/sub – InProcessPublishSubscribeService."""

from __future__ import annotations

from vendbus.domain.events import EventType
from vendbus.kernel.ddd.domain_event import DomainEvent
from vendbus.kernel.ddd.event_bus import PublishSubscribeService, Subscriber
from vendbus.kernel.errors import ValidationError
from vendbus.observability.logging import get_logger


def _as_event_type(tag: EventType | str) -> EventType:
    try:
        return EventType(tag)
    except ValueError:
        raise ValidationError(
            f"Unknown event type {tag!r}",
            errors=[{"field": "event_type", "value": tag}],
        ) from None


class InProcessPublishSubscribeService(PublishSubscribeService):
    """Synchronous single-subscriber event bus.

    Each event type maps to at most one subscriber; the first registration
    wins and later ones are ignored. :meth:`publish` runs the subscriber on
    the caller's stack, so a subscriber that publishes again completes the
    nested event before its own ``handle`` returns. Events without a
    subscriber are dropped. There is no recursion limit.

    The registration table belongs to the instance; separate buses never
    share subscribers.
    """

    def __init__(self) -> None:
        self._subscribers: dict[EventType, Subscriber] = {}
        self._log = get_logger(__name__)

    def subscribe(self, event_type: EventType | str, handler: Subscriber) -> None:
        tag = _as_event_type(event_type)
        if tag in self._subscribers:
            self._log.debug(
                "subscriber.ignored",
                event_type=tag.value,
                handler=type(handler).__name__,
                registered=type(self._subscribers[tag]).__name__,
            )
            return
        self._subscribers[tag] = handler
        self._log.debug("subscriber.registered", event_type=tag.value, handler=type(handler).__name__)

    def unsubscribe(self, event_type: EventType | str, handler: Subscriber) -> None:  # noqa: ARG002
        """Drop whatever subscriber holds *event_type*; unknown tags are ignored."""
        try:
            tag = EventType(event_type)
        except ValueError:
            return
        removed = self._subscribers.pop(tag, None)
        if removed is not None:
            self._log.debug("subscriber.removed", event_type=tag.value, handler=type(removed).__name__)

    def publish(self, event: DomainEvent) -> None:
        subscriber = self._subscribers.get(event.event_type)  # type: ignore[call-overload]
        if subscriber is None:
            self._log.debug(
                "event.dropped",
                event_type=event.event_type,
                machine_id=getattr(event, "machine_id", None),
            )
            return
        self._log.debug(
            "event.published",
            event_type=event.event_type,
            machine_id=getattr(event, "machine_id", None),
            subscribers=len(self._subscribers),
        )
        subscriber.handle(event)

    def is_subscribed(self, event_type: EventType | str) -> bool:
        return _as_event_type(event_type) in self._subscribers

    def subscriber_for(self, event_type: EventType | str) -> Subscriber | None:
        return self._subscribers.get(_as_event_type(event_type))

    def __len__(self) -> int:
        return len(self._subscribers)


__all__ = ["InProcessPublishSubscribeService"]
