"""Symbolic read/write access to ADS controller variables.

Callers describe a batch of variables by name and type token; the bridge
marshals every value to and from the controller's fixed binary layout.
"""

from .application.use_cases import (
    ProcessBatchUseCase,
    WriteStructResult,
    WriteStructUseCase,
)
from .config_loader import BridgeConfig, load_config
from .domain.exceptions import (
    BridgeError,
    DataTypeError,
    LengthMismatchError,
    RequestValidationError,
    TransportError,
    UnsupportedTypeError,
)
from .domain.interfaces import IConnectionGateway, IEventSink
from .domain.value_objects import BatchRequest, BatchResponse, TypeToken
from .presentation.container import DIContainer, create_container

__version__ = "0.1.0"

__all__ = [
    "BatchRequest",
    "BatchResponse",
    "BridgeConfig",
    "BridgeError",
    "DataTypeError",
    "DIContainer",
    "IConnectionGateway",
    "IEventSink",
    "LengthMismatchError",
    "ProcessBatchUseCase",
    "RequestValidationError",
    "TransportError",
    "TypeToken",
    "UnsupportedTypeError",
    "WriteStructResult",
    "WriteStructUseCase",
    "create_container",
    "load_config",
]
