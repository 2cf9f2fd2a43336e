"""Scoped access to one controller variable.

A handle and its buffer live for exactly one gateway call. ``open_variable``
guarantees the handle is released on every exit path, including decode and
encode failures inside the ``with`` block.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from ...domain.exceptions import TransportError
from ...domain.interfaces.i_connection_gateway import IConnectionGateway
from ..decorators.error_handler import handle_gateway_errors

_LOGGER = logging.getLogger(__name__)


@handle_gateway_errors("Create variable handle")
def _create_handle(gateway: IConnectionGateway, name: str) -> int:
    return gateway.create_handle(name)


@handle_gateway_errors("Delete variable handle")
def _delete_handle(gateway: IConnectionGateway, handle: int) -> None:
    gateway.delete_handle(handle)


class VariableScope:
    """One open variable handle.

    Attributes:
        name: Variable name the handle belongs to
        handle: Gateway handle
    """

    def __init__(self, gateway: IConnectionGateway, name: str, handle: int):
        """Initialize scope.

        Args:
            gateway: Gateway that created the handle
            name: Variable name
            handle: Handle returned by the gateway
        """
        self._gateway = gateway
        self.name = name
        self.handle = handle

    @handle_gateway_errors("Read variable")
    def read(self, size: int) -> bytearray:
        """Read ``size`` bytes into a fresh buffer.

        Returns:
            Buffer filled by the gateway
        """
        buffer = bytearray(size)
        self._gateway.read(self.handle, buffer)
        if len(buffer) != size:
            raise TransportError(
                f"Gateway resized read buffer for {self.name} "
                f"from {size} to {len(buffer)} bytes"
            )
        return buffer

    @handle_gateway_errors("Write variable")
    def write(self, data: bytes) -> None:
        """Write an encoded buffer."""
        self._gateway.write(self.handle, bytes(data))


@contextmanager
def open_variable(gateway: IConnectionGateway, name: str) -> Iterator[VariableScope]:
    """Open a handle for ``name`` and release it when the block exits.

    Args:
        gateway: Connection gateway
        name: Variable name

    Yields:
        VariableScope for the variable

    Raises:
        TransportError: If the handle cannot be created, or cannot be
            released after an otherwise successful block
    """
    handle = _create_handle(gateway, name)
    _LOGGER.debug("Created handle %s for %s", handle, name)
    try:
        yield VariableScope(gateway, name, handle)
    except BaseException:
        # Keep the original failure; a release error is only logged here.
        try:
            _delete_handle(gateway, handle)
        except TransportError as err:
            _LOGGER.warning("Handle %s for %s not released: %s", handle, name, err)
        raise
    _delete_handle(gateway, handle)
    _LOGGER.debug("Released handle %s for %s", handle, name)
