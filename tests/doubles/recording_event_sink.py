"""Event sink that keeps every event for assertions."""

from typing import List

from ads_bridge.domain.interfaces import IEventSink
from ads_bridge.domain.value_objects.bridge_event import BridgeEvent, LogCategory


class RecordingEventSink(IEventSink):
    """Fake sink recording emitted events."""

    def __init__(self):
        """Initialize empty event list."""
        self.events: List[BridgeEvent] = []

    def emit(self, event: BridgeEvent) -> None:
        """Record event."""
        self.events.append(event)

    def categories(self) -> List[LogCategory]:
        """Get categories of recorded events in order."""
        return [event.category for event in self.events]

    def messages(self, category: LogCategory) -> List[str]:
        """Get messages of one category."""
        return [event.message for event in self.events if event.category is category]
