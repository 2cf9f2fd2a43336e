"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

Example:
    >>> from tests.doubles import FakeConnectionGateway
    >>> gateway = FakeConnectionGateway()
    >>> gateway.set_variable("MAIN.counter", b"\\x01\\x00\\x00\\x00")
    >>> handle = gateway.create_handle("MAIN.counter")
"""

from .fake_gateway import FakeConnectionGateway
from .recording_event_sink import RecordingEventSink

__all__ = ["FakeConnectionGateway", "RecordingEventSink"]
