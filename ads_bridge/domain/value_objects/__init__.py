"""Value Objects for the ADS variable bridge.

Value Objects are immutable domain primitives that:
- Have no identity (equality based on value, not reference)
- Are immutable (cannot be changed after creation)
- Validate their invariants at construction
"""

from .batch_request import BatchRequest
from .batch_response import BatchResponse
from .bridge_event import BridgeEvent, LogCategory, Verbosity
from .type_token import ScalarKind, TypeToken

__all__ = [
    "BatchRequest",
    "BatchResponse",
    "BridgeEvent",
    "LogCategory",
    "ScalarKind",
    "TypeToken",
    "Verbosity",
]
