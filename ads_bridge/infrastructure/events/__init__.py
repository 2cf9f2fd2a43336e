"""Event sink implementations."""

from .log_event_sink import LoggingEventSink

__all__ = ["LoggingEventSink"]
