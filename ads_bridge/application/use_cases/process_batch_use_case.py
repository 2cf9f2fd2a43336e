"""ProcessBatchUseCase for symbolic variable read/write batches.

This use case orchestrates one batch request:
1. Validate the batch shape (no I/O on rejection)
2. Resolve each item's type token before touching the controller
3. Read or write each item through its own scoped handle and buffer
4. Stop at the first failing item and report it by variable name
"""

import logging
import traceback
from typing import Any, Optional

from ...const import (
    ERROR_KIND_INTERNAL,
    ERROR_KIND_LENGTH,
    ERROR_KIND_TRANSPORT,
    ERROR_KIND_TYPE,
    ERROR_KIND_VALIDATION,
    INVALID_REQUEST_MESSAGE,
    ITEM_ERROR_TEMPLATE,
    REQUEST_TYPES,
)
from ...domain.exceptions import (
    DataTypeError,
    LengthMismatchError,
    RequestValidationError,
    TransportError,
)
from ...domain.helpers.binary_cursor import BinaryReader, BinaryWriter
from ...domain.interfaces.i_connection_gateway import IConnectionGateway
from ...domain.interfaces.i_event_sink import IEventSink
from ...domain.strategies.array_codec import ArrayCodec
from ...domain.strategies.value_codec_strategy import TypeCodec
from ...domain.value_objects.batch_request import BatchRequest
from ...domain.value_objects.batch_response import BatchResponse
from ...domain.value_objects.bridge_event import BridgeEvent, LogCategory
from ...infrastructure.gateway.variable_scope import open_variable
from ...infrastructure.state_machines.request_state_machine import (
    RequestEvent,
    RequestStateMachine,
)

_LOGGER = logging.getLogger(__name__)


class ProcessBatchUseCase:
    """Use case for processing read/write batch requests.

    Responsibilities:
    - Validate batch shape before any gateway call
    - Dispatch each item to the scalar or array codec
    - Scope every gateway handle to exactly one item
    - Fail fast: the first failing item aborts the rest of the batch
    - Report received/responded/failed events on the event sink

    Processing is synchronous. Items are handled strictly in order and no
    retries or timeouts are applied; a caller-level timeout must wrap the
    whole call.

    Dependencies (injected):
    - gateway: Handle-based access to controller variables
    - event_sink: Observability channel
    - type_codec: Scalar codec registry

    Example:
        >>> use_case = ProcessBatchUseCase(gateway, LoggingEventSink())
        >>> response = use_case.execute(
        ...     BatchRequest(["X", "Y"], ["int", "real"], "read")
        ... )
        >>> response.values
        (1, 1.0)
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
            event_sink: Event sink for received/responded/error events
            type_codec: Scalar codec registry (default: cp1252 strings)
        """
        self._gateway = gateway
        self._events = event_sink
        self._type_codec = type_codec or TypeCodec()
        self._arrays = ArrayCodec(self._type_codec)

    def execute(self, request: BatchRequest) -> BatchResponse:
        """Process one batch.

        Args:
            request: Batch to process

        Returns:
            BatchResponse; failures are reported in its message, never raised
        """
        tag = request.correlation_tag
        state = RequestStateMachine()
        self._advance(state, RequestEvent.VALIDATE)

        if not self._is_valid(request):
            self._advance(state, RequestEvent.REJECT)
            self._emit(LogCategory.ERROR, INVALID_REQUEST_MESSAGE)
            return BatchResponse.from_request(
                request,
                state.state,
                request.values,
                tag,
                error=INVALID_REQUEST_MESSAGE,
                error_kind=ERROR_KIND_VALIDATION,
            )

        self._emit(
            LogCategory.INCOMING,
            f"Received ADS {request.request_type} request for "
            f"{len(request)} items (tag: {tag})",
        )

        if request.is_write:
            self._advance(state, RequestEvent.ACCEPT_WRITE)
            results: list[Any] = list(request.values)
        else:
            self._advance(state, RequestEvent.ACCEPT_READ)
            results = [None] * len(request)

        current_name = ""
        try:
            for index, (name, token) in enumerate(zip(request.names, request.types)):
                current_name = name
                if request.is_write:
                    self._write_item(name, token, request.values[index])
                else:
                    results[index] = self._read_item(name, token)
        except Exception as err:
            self._advance(state, RequestEvent.FAIL)
            return self._failure(
                request, state, tuple(results), current_name, tag, err
            )

        self._advance(state, RequestEvent.COMPLETE)
        self._emit(
            LogCategory.OUTGOING,
            f"Responded to ADS {request.request_type} request for "
            f"{len(request)} items (tag: {tag})",
        )
        return BatchResponse.from_request(request, state.state, tuple(results), tag)

    def execute_dict(self, payload: Any) -> dict[str, Any]:
        """Process a batch given as its wire dictionary.

        Args:
            payload: Dict with names, types, request_type, values, message

        Returns:
            Response wire dictionary
        """
        try:
            request = BatchRequest.from_dict(payload)
        except RequestValidationError as err:
            message = f"{INVALID_REQUEST_MESSAGE} ({err})"
            self._emit(LogCategory.ERROR, message)
            state = RequestStateMachine()
            self._advance(state, RequestEvent.VALIDATE)
            self._advance(state, RequestEvent.REJECT)
            empty = BatchRequest()
            return BatchResponse.from_request(
                empty,
                state.state,
                None,
                empty.correlation_tag,
                error=message,
                error_kind=ERROR_KIND_VALIDATION,
            ).to_dict()
        return self.execute(request).to_dict()

    @staticmethod
    def _advance(state: RequestStateMachine, event: RequestEvent) -> None:
        """Apply one lifecycle event, logging it if the machine refuses it."""
        if not state.transition(event):
            _LOGGER.error("Request event %s refused by %s", event.name, state)

    @staticmethod
    def _is_valid(request: BatchRequest) -> bool:
        """Check batch shape invariants."""
        if len(request.names) == 0 or len(request.names) != len(request.types):
            return False
        if request.request_type not in REQUEST_TYPES:
            return False
        if request.is_write and (
            request.values is None or len(request.values) != len(request.names)
        ):
            return False
        return True

    def _read_item(self, name: str, type_name: str) -> Any:
        """Read one variable.

        The token is resolved before the handle is created, so an unsupported
        token never reaches the controller.
        """
        token = self._type_codec.resolve(type_name)
        with open_variable(self._gateway, name) as variable:
            buffer = variable.read(token.width)
            if token.is_array:
                value = self._arrays.decode(buffer, token.element, token.array_length)
            else:
                value = self._type_codec.decode(BinaryReader(buffer), token)
        _LOGGER.debug("Read %s (%s) = %r", name, token, value)
        return value

    def _write_item(self, name: str, type_name: str, value: Any) -> None:
        """Write one variable.

        The value is fully encoded before the handle is created, so encode
        failures never reach the controller.
        """
        token = self._type_codec.resolve(type_name)
        writer = BinaryWriter(token.width)
        if token.is_array:
            self._arrays.encode(
                writer, token.element, value, token.array_length, name=name
            )
        else:
            self._type_codec.encode(writer, token, value)

        with open_variable(self._gateway, name) as variable:
            variable.write(writer.getvalue())
        _LOGGER.debug("Wrote %s (%s) = %r", name, token, value)

    def _failure(
        self,
        request: BatchRequest,
        state: RequestStateMachine,
        values: tuple[Any, ...],
        name: str,
        tag: str,
        err: Exception,
    ) -> BatchResponse:
        """Build the failure response and report the full error."""
        detail = "".join(traceback.format_exception(type(err), err, err.__traceback__))
        self._emit(
            LogCategory.ERROR,
            "Exception occurred during processing of request:\n\t"
            f"Variable: {name}\n\tCorrelation tag: {tag}\n\tException: {detail}",
        )
        return BatchResponse.from_request(
            request,
            state.state,
            values,
            tag,
            error=ITEM_ERROR_TEMPLATE.format(name=name, cause=err),
            error_kind=self._error_kind(err),
            failed_name=name,
        )

    @staticmethod
    def _error_kind(err: Exception) -> str:
        """Map an exception to its reported error kind."""
        if isinstance(err, LengthMismatchError):
            return ERROR_KIND_LENGTH
        if isinstance(err, DataTypeError):
            return ERROR_KIND_TYPE
        if isinstance(err, TransportError):
            return ERROR_KIND_TRANSPORT
        if isinstance(err, RequestValidationError):
            return ERROR_KIND_VALIDATION
        return ERROR_KIND_INTERNAL

    def _emit(self, category: LogCategory, message: str) -> None:
        """Publish an event; sink failures never affect processing."""
        try:
            self._events.emit(BridgeEvent(category, message))
        except Exception as err:
            _LOGGER.error("Event sink failed: %s", err)
