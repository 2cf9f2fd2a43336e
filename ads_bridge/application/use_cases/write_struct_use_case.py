"""WriteStructUseCase for flat struct variables.

Encodes a heterogeneous list of fields into one buffer and writes it with a
single handle. String fields use the controller's fixed 81-byte slot.
"""

import logging
from collections.abc import Sequence
from typing import Any, Optional

from ...const import ERROR_KIND_LENGTH, ERROR_KIND_TRANSPORT, ERROR_KIND_TYPE
from ...domain.exceptions import (
    BridgeError,
    DataTypeError,
    LengthMismatchError,
    RequestValidationError,
)
from ...domain.interfaces.i_connection_gateway import IConnectionGateway
from ...domain.interfaces.i_event_sink import IEventSink
from ...domain.strategies.struct_codec import StructCodec
from ...domain.strategies.value_codec_strategy import TypeCodec
from ...domain.value_objects.bridge_event import BridgeEvent, LogCategory
from ...infrastructure.gateway.variable_scope import open_variable
from .write_struct_result import WriteStructResult

_LOGGER = logging.getLogger(__name__)


class WriteStructUseCase:
    """Use case for writing struct variables.

    Example:
        >>> use_case = WriteStructUseCase(gateway, sink)
        >>> result = use_case.execute(
        ...     "MAIN.recipe", ["int", "string"], [[1, 2], ["mix"]]
        ... )
        >>> result.size
        89
    """

    def __init__(
        self,
        gateway: IConnectionGateway,
        event_sink: IEventSink,
        type_codec: Optional[TypeCodec] = None,
    ):
        """Initialize use case with dependencies.

        Args:
            gateway: Connection gateway
            event_sink: Event sink for error events
            type_codec: Scalar codec registry
        """
        self._gateway = gateway
        self._events = event_sink
        self._structs = StructCodec(type_codec or TypeCodec())

    def execute(
        self,
        struct_name: str,
        types: Sequence[str],
        values: Sequence[Sequence[Any]],
    ) -> WriteStructResult:
        """Encode and write one struct.

        Args:
            struct_name: Variable name of the struct
            types: Token of each field
            values: Values of each field (one list per field)

        Returns:
            WriteStructResult with success/error information

        Raises:
            RequestValidationError: If types and values do not pair up
        """
        if not types or len(types) != len(values):
            raise RequestValidationError(
                f"Struct {struct_name}: {len(types)} field types for "
                f"{len(values)} field values"
            )

        try:
            data = self._structs.encode(list(zip(types, values)))
            with open_variable(self._gateway, struct_name) as variable:
                variable.write(data)
        except BridgeError as err:
            _LOGGER.error("Failed to write struct %s: %s", struct_name, err)
            self._emit(
                LogCategory.ERROR, f"Struct write to {struct_name} failed: {err}"
            )
            return WriteStructResult(
                success=False,
                struct_name=struct_name,
                error=str(err),
                error_kind=self._error_kind(err),
            )

        _LOGGER.info("Wrote struct %s (%d bytes)", struct_name, len(data))
        return WriteStructResult(success=True, struct_name=struct_name, size=len(data))

    def _emit(self, category: LogCategory, message: str) -> None:
        """Publish an event; sink failures never affect the result."""
        try:
            self._events.emit(BridgeEvent(category, message))
        except Exception as err:
            _LOGGER.error("Event sink failed: %s", err)

    @staticmethod
    def _error_kind(err: BridgeError) -> str:
        if isinstance(err, LengthMismatchError):
            return ERROR_KIND_LENGTH
        if isinstance(err, DataTypeError):
            return ERROR_KIND_TYPE
        return ERROR_KIND_TRANSPORT
