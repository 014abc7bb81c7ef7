"""Application pub/sub – in-process event routing."""
from vendbus.application.pubsub.bus import InProcessPublishSubscribeService

__all__ = ["InProcessPublishSubscribeService"]
