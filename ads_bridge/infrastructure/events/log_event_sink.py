"""Event sink that forwards bridge events to the logging module."""

import logging

from ...const import DEFAULT_EVENT_LOGGER
from ...domain.interfaces.i_event_sink import IEventSink
from ...domain.value_objects.bridge_event import BridgeEvent, LogCategory, Verbosity


class LoggingEventSink(IEventSink):
    """Publish events on a standard logger.

    ERROR events are logged at ERROR level, every other category at INFO.
    VERBOSE events are logged at DEBUG and are dropped entirely unless the
    sink was created with ``Verbosity.VERBOSE``.

    Example:
        >>> sink = LoggingEventSink(verbosity=Verbosity.VERBOSE)
        >>> sink.emit(BridgeEvent(LogCategory.INFO, "Bridge started"))
    """

    def __init__(
        self,
        logger_name: str = DEFAULT_EVENT_LOGGER,
        verbosity: Verbosity = Verbosity.IMPORTANT,
    ):
        """Initialize sink.

        Args:
            logger_name: Logger that receives the events
            verbosity: Most verbose level that is still published
        """
        self._logger = logging.getLogger(logger_name)
        self._verbosity = verbosity

    @property
    def verbosity(self) -> Verbosity:
        """Get publishing threshold."""
        return self._verbosity

    def emit(self, event: BridgeEvent) -> None:
        """Log one event."""
        if (
            event.verbosity is Verbosity.VERBOSE
            and self._verbosity is not Verbosity.VERBOSE
        ):
            return

        if event.category is LogCategory.ERROR:
            level = logging.ERROR
        elif event.verbosity is Verbosity.VERBOSE:
            level = logging.DEBUG
        else:
            level = logging.INFO

        self._logger.log(level, "%s: %s", event.category.value, event.message)
