"""IEventSink interface for observability channels."""

from abc import ABC, abstractmethod

from ..value_objects.bridge_event import BridgeEvent


class IEventSink(ABC):
    """Interface for the log/status channel.

    The bridge reports every batch it receives, every response it sends and
    every failure. A sink must never raise back into the processor; what it
    does with an event has no effect on processing.
    """

    @abstractmethod
    def emit(self, event: BridgeEvent) -> None:
        """Publish one event.

        Args:
            event: Event to publish
        """
