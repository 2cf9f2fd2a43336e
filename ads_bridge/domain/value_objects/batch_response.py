"""BatchResponse value object.

The response is a new value derived from the request plus the per-item
results; the caller's request is never modified.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Optional

from ..entities.request_state import RequestState
from ..helpers.conversions import format_timespan
from .batch_request import BatchRequest


def to_wire_value(value: Any) -> Any:
    """Convert a decoded value to a JSON-friendly representation.

    Examples:
        >>> to_wire_value(timedelta(seconds=90))
        '00:01:30'
        >>> to_wire_value((1, 2))
        [1, 2]
    """
    if isinstance(value, timedelta):
        return format_timespan(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    if isinstance(value, (list, tuple)):
        return [to_wire_value(item) for item in value]
    return value


@dataclass(frozen=True)
class BatchResponse:
    """Immutable result of one batch.

    Attributes:
        names: Echo of the request names
        types: Echo of the request types
        request_type: Echo of the request direction
        values: Read results (None for items never reached) or the written
            values
        message: Error summary on failure, otherwise the request's message
        correlation_tag: Audit identifier of the batch
        state: COMPLETED or FAILED
        failed_name: Variable that aborted the batch, if any
        error_kind: Error category of the failure, if any
    """

    names: tuple[str, ...]
    types: tuple[str, ...]
    request_type: Optional[str]
    values: Optional[tuple[Any, ...]]
    message: Optional[str]
    correlation_tag: str
    state: RequestState
    failed_name: Optional[str] = None
    error_kind: Optional[str] = None

    @classmethod
    def from_request(
        cls,
        request: BatchRequest,
        state: RequestState,
        values: Optional[tuple[Any, ...]],
        correlation_tag: str,
        error: Optional[str] = None,
        error_kind: Optional[str] = None,
        failed_name: Optional[str] = None,
    ) -> "BatchResponse":
        """Build the response for a request that reached ``state``.

        Args:
            request: Request being answered
            state: Final processing state (COMPLETED or FAILED)
            values: Per-item values
            correlation_tag: Audit identifier of the batch
            error: Error summary; replaces the request message when set
            error_kind: Error category of the failure
            failed_name: Variable that aborted the batch

        Raises:
            ValueError: If state is not terminal
        """
        if state not in (RequestState.COMPLETED, RequestState.FAILED):
            raise ValueError(f"Cannot answer a request in state {state.name}")
        return cls(
            names=request.names,
            types=request.types,
            request_type=request.request_type,
            values=values,
            message=request.message if error is None else error,
            correlation_tag=correlation_tag,
            state=state,
            failed_name=failed_name,
            error_kind=error_kind,
        )

    @property
    def success(self) -> bool:
        """Check if every item was processed."""
        return self.state == RequestState.COMPLETED

    def to_dict(self) -> dict[str, Any]:
        """Render the wire record.

        Returns:
            Dict with names, types, request_type, values and message
        """
        return {
            "names": list(self.names),
            "types": list(self.types),
            "request_type": self.request_type,
            "values": None if self.values is None else to_wire_value(self.values),
            "message": self.message,
        }
