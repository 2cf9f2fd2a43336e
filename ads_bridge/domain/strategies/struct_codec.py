"""Struct codec for flat heterogeneous field sequences.

String fields always occupy a fixed 81-byte slot, matching the controller's
native string slot, whatever their own declared width.
"""

from collections.abc import Sequence
from typing import Any, Union

from ...const import STRUCT_STRING_SLOT
from ..exceptions import DataTypeError
from ..helpers.binary_cursor import BinaryReader, BinaryWriter
from ..value_objects.type_token import TypeToken
from .array_codec import ArrayCodec
from .value_codec_strategy import TypeCodec

TokenLike = Union[str, TypeToken]


class StructCodec:
    """Encodes/decodes ordered (token, values) fields into one buffer.

    Example:
        >>> structs = StructCodec(TypeCodec())
        >>> fields = [("int", [1, 2]), ("string", ["abc"])]
        >>> structs.size(fields)
        89
        >>> data = structs.encode(fields)
        >>> structs.decode(data, [("int", 2), ("string", 1)])
        [[1, 2], ['abc']]
    """

    def __init__(self, type_codec: TypeCodec):
        """Initialize with the scalar codec registry."""
        self._type_codec = type_codec

    def slot_width(self, token: TokenLike) -> int:
        """Get the bytes one value of a field occupies.

        Raises:
            UnsupportedTypeError: If the token is unknown
            DataTypeError: If the token cannot live inside a struct
        """
        parsed = self._type_codec.resolve(token)
        if parsed.is_array:
            raise DataTypeError(
                f"Struct field {token} must be a scalar; list its values instead"
            )
        if parsed.is_string:
            if parsed.element_width > STRUCT_STRING_SLOT:
                raise DataTypeError(
                    f"Struct field {token} does not fit the "
                    f"{STRUCT_STRING_SLOT}-byte string slot"
                )
            return STRUCT_STRING_SLOT
        return parsed.element_width

    def size(self, fields: Sequence[tuple[TokenLike, Sequence[Any]]]) -> int:
        """Get buffer size for a list of (token, values) fields."""
        return sum(
            self.slot_width(token) * len(self._field_values(token, values))
            for token, values in fields
        )

    def encode(self, fields: Sequence[tuple[TokenLike, Sequence[Any]]]) -> bytes:
        """Encode fields in declaration order.

        Args:
            fields: (token, values) pairs; each field may hold several values

        Returns:
            Encoded buffer of exactly ``size(fields)`` bytes
        """
        writer = BinaryWriter(self.size(fields))
        for token, values in fields:
            self.encode_field(writer, token, self._field_values(token, values))
        return writer.getvalue()

    def encode_field(
        self, writer: BinaryWriter, token: TokenLike, values: Sequence[Any]
    ) -> None:
        """Encode one field's values, honoring the string slot stride."""
        parsed = self._type_codec.resolve(token)
        slot = self.slot_width(parsed)
        for value in values:
            start = writer.position
            self._type_codec.encode(writer, parsed, value)
            writer.skip(slot - (writer.position - start))

    def decode(
        self, data: bytes, fields: Sequence[tuple[TokenLike, int]]
    ) -> list[list[Any]]:
        """Decode fields given as (token, count) pairs.

        Raises:
            ValueError: If the buffer size does not match the field layout
        """
        expected = sum(self.slot_width(token) * count for token, count in fields)
        if len(data) != expected:
            raise ValueError(
                f"Struct buffer of {len(data)} bytes does not match layout "
                f"of {expected} bytes"
            )

        reader = BinaryReader(data)
        output = []
        for token, count in fields:
            parsed = self._type_codec.resolve(token)
            slot = self.slot_width(parsed)
            field = []
            for _ in range(count):
                start = reader.position
                field.append(self._type_codec.decode(reader, parsed))
                reader.skip(slot - (reader.position - start))
            output.append(field)
        return output

    @staticmethod
    def _field_values(token: TokenLike, values: Any) -> Sequence[Any]:
        return ArrayCodec.check_values(values, None, str(token))
