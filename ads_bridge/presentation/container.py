"""Dependency Injection Container.

This module implements a simple DI container using dataclasses.
The container holds all dependencies and provides factory methods
for creating the full dependency graph.

Pattern: Service Locator + Factory
"""

from dataclasses import dataclass
from typing import Optional

from ..application.use_cases.process_batch_use_case import ProcessBatchUseCase
from ..application.use_cases.write_struct_use_case import WriteStructUseCase
from ..config_loader import BridgeConfig
from ..domain.interfaces.i_connection_gateway import IConnectionGateway
from ..domain.interfaces.i_event_sink import IEventSink
from ..domain.strategies.value_codec_strategy import TypeCodec
from ..infrastructure.events.log_event_sink import LoggingEventSink


@dataclass
class DIContainer:
    """Dependency Injection Container.

    Each dependency is lazily created on first access.

    Attributes:
        gateway: Connection gateway supplied by the caller
        config: Bridge configuration
        event_sink: Observability channel (default: LoggingEventSink)
        type_codec: Scalar codec registry
        process_batch_use_case: Batch request processor
        write_struct_use_case: Struct writer

    Example:
        >>> container = create_container(gateway)
        >>> response = container.get_process_batch_use_case().execute(request)
    """

    gateway: IConnectionGateway
    config: BridgeConfig

    event_sink: Optional[IEventSink] = None
    type_codec: Optional[TypeCodec] = None
    process_batch_use_case: Optional[ProcessBatchUseCase] = None
    write_struct_use_case: Optional[WriteStructUseCase] = None

    def get_event_sink(self) -> IEventSink:
        """Get or create event sink."""
        if self.event_sink is None:
            self.event_sink = LoggingEventSink(
                logger_name=self.config.logger_name,
                verbosity=self.config.verbosity,
            )
        return self.event_sink

    def get_type_codec(self) -> TypeCodec:
        """Get or create codec registry."""
        if self.type_codec is None:
            self.type_codec = TypeCodec(string_encoding=self.config.string_encoding)
        return self.type_codec

    def get_process_batch_use_case(self) -> ProcessBatchUseCase:
        """Get or create batch processor."""
        if self.process_batch_use_case is None:
            self.process_batch_use_case = ProcessBatchUseCase(
                gateway=self.gateway,
                event_sink=self.get_event_sink(),
                type_codec=self.get_type_codec(),
            )
        return self.process_batch_use_case

    def get_write_struct_use_case(self) -> WriteStructUseCase:
        """Get or create struct writer."""
        if self.write_struct_use_case is None:
            self.write_struct_use_case = WriteStructUseCase(
                gateway=self.gateway,
                event_sink=self.get_event_sink(),
                type_codec=self.get_type_codec(),
            )
        return self.write_struct_use_case


def create_container(
    gateway: IConnectionGateway,
    config: Optional[BridgeConfig] = None,
    event_sink: Optional[IEventSink] = None,
) -> DIContainer:
    """Create DI container with all dependencies wired.

    Args:
        gateway: Connection gateway
        config: Bridge configuration (default: built-in defaults)
        event_sink: Custom event sink (default: logging sink from config)

    Returns:
        DIContainer
    """
    return DIContainer(
        gateway=gateway,
        config=config or BridgeConfig(),
        event_sink=event_sink,
    )
