"""BridgeEvent value object.

One record on the observability channel: what the bridge wants a human to
see about a batch.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class LogCategory(Enum):
    """Event categories."""

    INFO = "info"
    ERROR = "error"
    INCOMING = "incoming"
    OUTGOING = "outgoing"


class Verbosity(Enum):
    """How chatty an event is."""

    IMPORTANT = "important"
    VERBOSE = "verbose"


@dataclass(frozen=True)
class BridgeEvent:
    """Immutable observability event.

    Attributes:
        category: Event category
        message: Human-readable text
        verbosity: IMPORTANT events are always shown, VERBOSE on request
        when: Creation time
    """

    category: LogCategory
    message: str
    verbosity: Verbosity = Verbosity.IMPORTANT
    when: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        """String representation for logging."""
        return f"[{self.when:%H:%M:%S}] {self.category.value.upper()}: {self.message}"
