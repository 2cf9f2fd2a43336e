"""BatchRequest value object.

Represents one read or write batch as received at the system boundary.
"""

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Optional

import voluptuous as vol

from ...const import CORRELATION_TAG_LENGTH, REQUEST_WRITE
from ..exceptions import RequestValidationError

BATCH_REQUEST_SCHEMA = vol.Schema(
    {
        vol.Optional("names", default=list): vol.Any(None, [str]),
        vol.Optional("types", default=list): vol.Any(None, [str]),
        vol.Optional("request_type", default=None): vol.Any(None, str),
        vol.Optional("values", default=None): vol.Any(None, list),
        vol.Optional("message", default=None): vol.Any(None, str),
    },
    extra=vol.REMOVE_EXTRA,
)


@dataclass(frozen=True)
class BatchRequest:
    """Immutable batch of variable reads or writes.

    Shape invariants (equal lengths, known direction) are deliberately not
    enforced here; the batch processor checks them and answers with a
    failure response instead of raising.

    Attributes:
        names: Variable names, in processing order
        types: Type token for each name
        request_type: "read" or "write"
        values: For writes, one value (or list of values for arrays) per name
        message: Optional caller message, echoed back on success

    Example:
        >>> request = BatchRequest(
        ...     names=["MAIN.counter"], types=["int"], request_type="read"
        ... )
        >>> request.names
        ('MAIN.counter',)
    """

    names: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    request_type: Optional[str] = None
    values: Optional[tuple[Any, ...]] = None
    message: Optional[str] = None

    def __post_init__(self) -> None:
        """Freeze sequence fields into tuples."""
        object.__setattr__(self, "names", tuple(self.names or ()))
        object.__setattr__(self, "types", tuple(self.types or ()))
        if self.values is not None:
            object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def from_dict(cls, payload: Any) -> "BatchRequest":
        """Build a request from its wire dictionary.

        Args:
            payload: Dict with names, types, request_type, values, message

        Returns:
            BatchRequest

        Raises:
            RequestValidationError: If a field has the wrong type
        """
        try:
            data = BATCH_REQUEST_SCHEMA(payload)
        except vol.Invalid as err:
            raise RequestValidationError(f"Malformed batch request: {err}") from err
        return cls(
            names=data["names"],
            types=data["types"],
            request_type=data["request_type"],
            values=data["values"],
            message=data["message"],
        )

    @property
    def is_write(self) -> bool:
        """Check if this is a write request."""
        return self.request_type == REQUEST_WRITE

    @property
    def correlation_tag(self) -> str:
        """Get a stable audit identifier derived from the batch content.

        Used only to correlate log lines of one batch.

        Example:
            >>> a = BatchRequest(["X"], ["int"], "read")
            >>> b = BatchRequest(["X"], ["int"], "read")
            >>> a.correlation_tag == b.correlation_tag
            True
        """
        fields = [self.request_type, self.names, self.types, self.values]
        try:
            content = json.dumps(fields, sort_keys=True, default=str)
        except (TypeError, ValueError, RecursionError):
            # Unsortable keys or circular values
            content = repr(fields)
        digest = hashlib.sha1(
            content.encode("utf-8", errors="backslashreplace")
        ).hexdigest()
        return digest[:CORRELATION_TAG_LENGTH]

    def __len__(self) -> int:
        """Get number of items."""
        return len(self.names)
