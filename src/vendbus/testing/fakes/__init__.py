"""Testing fakes."""
from vendbus.testing.fakes.subscriber import RecordingSubscriber

__all__ = ["RecordingSubscriber"]
