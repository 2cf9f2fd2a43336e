"""Tests for RequestStateMachine."""

import pytest

from ads_bridge.domain.entities.request_state import RequestState
from ads_bridge.infrastructure.state_machines.request_state_machine import (
    RequestEvent,
    RequestStateMachine,
)


class TestRequestStateMachine:
    """Test request lifecycle transitions."""

    def test_initial_state(self):
        """Test machine starts in RECEIVED."""
        sm = RequestStateMachine()
        assert sm.state is RequestState.RECEIVED
        assert str(sm) == "RequestStateMachine(state=RECEIVED)"

    @pytest.mark.parametrize(
        "events,final",
        [
            ([RequestEvent.VALIDATE, RequestEvent.ACCEPT_READ, RequestEvent.COMPLETE],
             RequestState.COMPLETED),
            ([RequestEvent.VALIDATE, RequestEvent.ACCEPT_WRITE, RequestEvent.FAIL],
             RequestState.FAILED),
            ([RequestEvent.VALIDATE, RequestEvent.REJECT], RequestState.FAILED),
        ],
    )
    def test_lifecycles(self, events, final):
        """Test valid paths reach a terminal state."""
        sm = RequestStateMachine()
        for event in events:
            assert sm.transition(event) is True
        assert sm.state is final

    def test_accept_write(self):
        """Test write batches enter WRITING."""
        sm = RequestStateMachine()
        sm.transition(RequestEvent.VALIDATE)
        sm.transition(RequestEvent.ACCEPT_WRITE)

        assert sm.state is RequestState.WRITING
        assert "previous=<RequestState.VALIDATING" in repr(sm)

    @pytest.mark.parametrize(
        "event", [RequestEvent.COMPLETE, RequestEvent.FAIL, RequestEvent.ACCEPT_READ]
    )
    def test_invalid_transition_ignored(self, event):
        """Test invalid events leave the state unchanged."""
        sm = RequestStateMachine()
        assert sm.transition(event) is False
        assert sm.state is RequestState.RECEIVED

    def test_terminal_state_is_final(self):
        """Test no event leaves COMPLETED."""
        sm = RequestStateMachine()
        for event in (RequestEvent.VALIDATE, RequestEvent.ACCEPT_WRITE, RequestEvent.COMPLETE):
            sm.transition(event)

        assert not any(sm.transition(event) for event in RequestEvent)
        assert sm.state is RequestState.COMPLETED
