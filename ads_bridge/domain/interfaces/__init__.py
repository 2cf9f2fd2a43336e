"""Domain interfaces for the ADS variable bridge.

Infrastructure and callers implement these contracts; the use cases depend
only on them.
"""

from .i_connection_gateway import IConnectionGateway
from .i_event_sink import IEventSink

__all__ = [
    "IConnectionGateway",
    "IEventSink",
]
