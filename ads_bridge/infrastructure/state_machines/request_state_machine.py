"""Request state machine for explicit batch state management."""

import logging
from enum import Enum, auto
from typing import Optional

from ...domain.entities.request_state import RequestState

_LOGGER = logging.getLogger(__name__)


class RequestEvent(Enum):
    """Processing events that trigger state transitions."""

    VALIDATE = auto()
    ACCEPT_READ = auto()
    ACCEPT_WRITE = auto()
    REJECT = auto()
    COMPLETE = auto()
    FAIL = auto()


class RequestStateMachine:
    """State machine for one batch request.

    Valid transitions:
        RECEIVED -> VALIDATING (on VALIDATE)
        VALIDATING -> READING (on ACCEPT_READ)
        VALIDATING -> WRITING (on ACCEPT_WRITE)
        VALIDATING -> FAILED (on REJECT)
        READING -> COMPLETED (on COMPLETE)
        READING -> FAILED (on FAIL)
        WRITING -> COMPLETED (on COMPLETE)
        WRITING -> FAILED (on FAIL)

    The batch processor copies the final state into its response.

    Example:
        >>> sm = RequestStateMachine()
        >>> sm.transition(RequestEvent.VALIDATE)
        True
        >>> sm.transition(RequestEvent.ACCEPT_READ)
        True
        >>> sm.state
        <RequestState.READING: 'reading'>
    """

    def __init__(self):
        """Initialize state machine in RECEIVED state."""
        self._state = RequestState.RECEIVED
        self._previous_state: Optional[RequestState] = None

        # Valid transitions: (current_state, event) -> new_state
        self._transitions = {
            (RequestState.RECEIVED, RequestEvent.VALIDATE): RequestState.VALIDATING,
            (RequestState.VALIDATING, RequestEvent.ACCEPT_READ): RequestState.READING,
            (RequestState.VALIDATING, RequestEvent.ACCEPT_WRITE): RequestState.WRITING,
            (RequestState.VALIDATING, RequestEvent.REJECT): RequestState.FAILED,
            (RequestState.READING, RequestEvent.COMPLETE): RequestState.COMPLETED,
            (RequestState.READING, RequestEvent.FAIL): RequestState.FAILED,
            (RequestState.WRITING, RequestEvent.COMPLETE): RequestState.COMPLETED,
            (RequestState.WRITING, RequestEvent.FAIL): RequestState.FAILED,
        }

    @property
    def state(self) -> RequestState:
        """Get current state."""
        return self._state

    def transition(self, event: RequestEvent) -> bool:
        """Attempt state transition.

        Args:
            event: Event triggering transition

        Returns:
            True if transition valid and executed, False otherwise
        """
        key = (self._state, event)

        if key not in self._transitions:
            _LOGGER.debug(
                "Invalid transition: %s + %s",
                self._state.name,
                event.name,
            )
            return False

        self._previous_state = self._state
        self._state = self._transitions[key]
        _LOGGER.debug(
            "Request state: %s -> %s (event: %s)",
            self._previous_state.name,
            self._state.name,
            event.name,
        )
        return True

    def __str__(self) -> str:
        """String representation."""
        return f"RequestStateMachine(state={self._state.name})"

    def __repr__(self) -> str:
        """Developer representation."""
        return f"RequestStateMachine(state={self._state!r}, previous={self._previous_state!r})"
