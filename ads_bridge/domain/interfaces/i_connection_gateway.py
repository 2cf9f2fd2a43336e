"""IConnectionGateway interface for controller access implementations."""

from abc import ABC, abstractmethod


class IConnectionGateway(ABC):
    """Interface for handle-based access to controller variables.

    The gateway owns the transport connection; establishing and tearing it
    down happens outside the bridge. The batch processor only uses handles,
    one per item:

        1. create_handle(name) → handle
        2. read(handle, buffer) or write(handle, data)
        3. delete_handle(handle)

    Implementations must serialize access to the transport themselves if the
    same gateway is shared between threads.

    Example:
        >>> handle = gateway.create_handle("MAIN.counter")
        >>> buffer = bytearray(4)
        >>> gateway.read(handle, buffer)
        >>> gateway.delete_handle(handle)
    """

    @abstractmethod
    def create_handle(self, name: str) -> int:
        """Create a handle for a named variable.

        Args:
            name: Symbolic variable name, e.g. "MAIN.counter"

        Returns:
            Opaque handle valid until delete_handle()

        Raises:
            Exception: Any transport failure (converted to TransportError by
                the caller)
        """

    @abstractmethod
    def read(self, handle: int, buffer: bytearray) -> None:
        """Fill ``buffer`` with the variable's current bytes.

        Args:
            handle: Handle from create_handle()
            buffer: Mutable buffer sized to exactly the bytes to read
        """

    @abstractmethod
    def write(self, handle: int, data: bytes) -> None:
        """Write ``data`` to the variable.

        Args:
            handle: Handle from create_handle()
            data: Encoded bytes, sized to exactly the variable's layout
        """

    @abstractmethod
    def delete_handle(self, handle: int) -> None:
        """Release a handle.

        Args:
            handle: Handle from create_handle()
        """
