"""Tests for LoggingEventSink."""

import logging

from ads_bridge.domain.value_objects.bridge_event import (
    BridgeEvent,
    LogCategory,
    Verbosity,
)
from ads_bridge.infrastructure.events.log_event_sink import LoggingEventSink

LOGGER_NAME = "ads_bridge.events.test"


class TestLoggingEventSink:
    """Test event forwarding to logging."""

    def test_info_event(self, caplog):
        """Test non-error events are logged at INFO."""
        sink = LoggingEventSink(LOGGER_NAME)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            sink.emit(BridgeEvent(LogCategory.INCOMING, "Received request"))

        record = caplog.records[-1]
        assert record.name == LOGGER_NAME
        assert record.levelno == logging.INFO
        assert record.getMessage() == "incoming: Received request"

    def test_error_event(self, caplog):
        """Test error events are logged at ERROR."""
        sink = LoggingEventSink(LOGGER_NAME)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            sink.emit(BridgeEvent(LogCategory.ERROR, "Broken"))

        assert caplog.records[-1].levelno == logging.ERROR

    def test_verbose_dropped_by_default(self, caplog):
        """Test verbose events are suppressed at IMPORTANT verbosity."""
        sink = LoggingEventSink(LOGGER_NAME)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            sink.emit(BridgeEvent(LogCategory.INFO, "chatter", Verbosity.VERBOSE))

        assert caplog.records == []

    def test_verbose_published_when_enabled(self, caplog):
        """Test verbose events are logged at DEBUG when enabled."""
        sink = LoggingEventSink(LOGGER_NAME, verbosity=Verbosity.VERBOSE)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            sink.emit(BridgeEvent(LogCategory.INFO, "chatter", Verbosity.VERBOSE))

        assert sink.verbosity is Verbosity.VERBOSE
        assert caplog.records[-1].levelno == logging.DEBUG

    def test_event_str(self):
        """Test event string form carries category and message."""
        event = BridgeEvent(LogCategory.OUTGOING, "Responded")
        assert str(event).endswith("OUTGOING: Responded")
