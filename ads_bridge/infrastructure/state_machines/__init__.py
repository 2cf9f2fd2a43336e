"""State machines."""

from .request_state_machine import RequestEvent, RequestStateMachine

__all__ = ["RequestEvent", "RequestStateMachine"]
