"""DDD building blocks – public re-export surface."""

from vendbus.kernel.ddd.domain_event import DomainEvent
from vendbus.kernel.ddd.event_bus import PublishSubscribeService, Subscriber
from vendbus.kernel.ddd.repository import Identified, Repository

__all__ = [
    "DomainEvent",
    "Identified",
    "PublishSubscribeService",
    "Repository",
    "Subscriber",
]
