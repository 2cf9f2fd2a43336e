"""Array codec for homogeneous ``base[N]`` tokens."""

from collections.abc import Sequence
from typing import Any, Optional, Union

from ..exceptions import DataTypeError, LengthMismatchError
from ..helpers.binary_cursor import BinaryReader, BinaryWriter, BytesLike
from ..value_objects.type_token import TypeToken
from .value_codec_strategy import TypeCodec


class ArrayCodec:
    """Repeats a scalar codec over a contiguous buffer.

    A token is array-typed iff it ends with ``]`` and does not start with
    ``string``; ``string[N]`` is the fixed-length string form, not an array.

    Example:
        >>> arrays = ArrayCodec(TypeCodec())
        >>> arrays.parse("real[4]")
        ('real', 4)
        >>> arrays.parse("string[20]") is None
        True
    """

    def __init__(self, type_codec: TypeCodec):
        """Initialize with the scalar codec registry."""
        self._type_codec = type_codec

    @staticmethod
    def is_array(token: str) -> bool:
        """Check if a token string declares an array."""
        return token.endswith("]") and not token.startswith("string")

    @classmethod
    def parse(cls, token: str) -> Optional[tuple[str, int]]:
        """Split an array token into base token and declared length.

        Args:
            token: Token such as ``int[3]``

        Returns:
            (base_token, declared_length), or None if not an array

        Raises:
            UnsupportedTypeError: If the array token is malformed
        """
        if not cls.is_array(token):
            return None
        parsed = TypeToken.parse(token)
        return str(parsed.element), parsed.array_length

    def byte_size(self, base: Union[str, TypeToken], count: int) -> int:
        """Get buffer size for ``count`` elements of ``base``."""
        return self._type_codec.width(base) * count

    def decode(
        self, buffer: BytesLike, base: Union[str, TypeToken], count: int
    ) -> list[Any]:
        """Decode exactly ``count`` elements in order.

        Raises:
            ValueError: If the buffer is not ``count`` elements wide
        """
        expected = self.byte_size(base, count)
        if len(buffer) != expected:
            raise ValueError(
                f"Buffer of {len(buffer)} bytes cannot hold {count} x {base} "
                f"({expected} bytes)"
            )
        reader = BinaryReader(buffer)
        return [self._type_codec.decode(reader, base) for _ in range(count)]

    def encode(
        self,
        writer: BinaryWriter,
        base: Union[str, TypeToken],
        values: Any,
        declared_length: Optional[int] = None,
        name: Optional[str] = None,
    ) -> None:
        """Encode a value sequence element by element.

        Args:
            writer: Destination cursor
            base: Element token
            values: Sequence of element values
            declared_length: Length declared in the array token
            name: Variable name for error messages

        Raises:
            DataTypeError: If values is not a sequence
            LengthMismatchError: If len(values) != declared_length
        """
        values = self.check_values(values, declared_length, name)
        for value in values:
            self._type_codec.encode(writer, base, value)

    @staticmethod
    def check_values(
        values: Any, declared_length: Optional[int], name: Optional[str] = None
    ) -> Sequence:
        """Validate an array value payload before anything is written.

        Returns:
            The values as a sequence
        """
        if isinstance(values, (str, bytes, bytearray)) or not isinstance(
            values, Sequence
        ):
            target = f" for {name}" if name else ""
            raise DataTypeError(f"Array value{target} must be a list, got {values!r}")
        if declared_length is not None and len(values) != declared_length:
            raise LengthMismatchError(len(values), declared_length, name)
        return values
