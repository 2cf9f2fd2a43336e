"""Cursor helpers over fixed-size byte buffers.

The codecs never index buffers directly. They read and write through these
cursors, which advance by exactly the number of bytes consumed and refuse to
run past the end of the buffer.
"""

import struct
from typing import Any, Union

from ...const import BYTE_ORDER

BytesLike = Union[bytes, bytearray, memoryview]


class BinaryReader:
    """Sequential reader over an immutable view of a buffer.

    Example:
        >>> reader = BinaryReader(b"\\x01\\x00\\x00\\x00")
        >>> reader.unpack("i")
        1
        >>> reader.position
        4
    """

    def __init__(self, data: BytesLike):
        """Initialize reader at position 0.

        Args:
            data: Buffer to read from
        """
        self._data = memoryview(data).cast("B")
        self._position = 0

    @property
    def position(self) -> int:
        """Get current offset."""
        return self._position

    @property
    def remaining(self) -> int:
        """Get number of unread bytes."""
        return len(self._data) - self._position

    def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes and advance.

        Raises:
            ValueError: If fewer than ``size`` bytes remain
        """
        if size < 0 or size > self.remaining:
            raise ValueError(
                f"Cannot read {size} bytes at offset {self._position} "
                f"(buffer size {len(self._data)})"
            )
        chunk = bytes(self._data[self._position : self._position + size])
        self._position += size
        return chunk

    def unpack(self, fmt: str) -> Any:
        """Read one little-endian struct field."""
        fmt = BYTE_ORDER + fmt
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))[0]

    def skip(self, size: int) -> None:
        """Advance without reading."""
        self.read(size)


class BinaryWriter:
    """Sequential writer into a fixed-size zero-initialized buffer.

    Example:
        >>> writer = BinaryWriter(4)
        >>> writer.pack("f", 1.0)
        >>> writer.getvalue()
        b'\\x00\\x00\\x80?'
    """

    def __init__(self, size: int):
        """Allocate a zeroed buffer of ``size`` bytes."""
        if size < 0:
            raise ValueError(f"Buffer size must be non-negative, got {size}")
        self._buffer = bytearray(size)
        self._position = 0

    @property
    def position(self) -> int:
        """Get current offset."""
        return self._position

    @property
    def remaining(self) -> int:
        """Get number of bytes left before the end of the buffer."""
        return len(self._buffer) - self._position

    def write(self, data: BytesLike) -> None:
        """Write raw bytes and advance.

        Raises:
            ValueError: If data does not fit in the remaining space
        """
        size = len(data)
        if size > self.remaining:
            raise ValueError(
                f"Cannot write {size} bytes at offset {self._position} "
                f"(buffer size {len(self._buffer)})"
            )
        self._buffer[self._position : self._position + size] = data
        self._position += size

    def pack(self, fmt: str, value: Any) -> None:
        """Write one little-endian struct field."""
        self.write(struct.pack(BYTE_ORDER + fmt, value))

    def skip(self, size: int) -> None:
        """Advance over ``size`` bytes, leaving them zero."""
        if size < 0 or size > self.remaining:
            raise ValueError(
                f"Cannot skip {size} bytes at offset {self._position} "
                f"(buffer size {len(self._buffer)})"
            )
        self._position += size

    def getvalue(self) -> bytes:
        """Get a copy of the whole buffer."""
        return bytes(self._buffer)
