"""Domain entities."""

from .request_state import RequestState

__all__ = ["RequestState"]
