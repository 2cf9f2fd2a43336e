"""Value encoding/decoding strategies using Strategy pattern."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any, Dict, Union

from ...const import DEFAULT_STRING_ENCODING
from ..exceptions import DataTypeError
from ..helpers.binary_cursor import BinaryReader, BinaryWriter
from ..helpers.conversions import (
    check_range,
    datetime_to_plc_date,
    parse_bool,
    parse_date,
    parse_invariant_float,
    parse_invariant_int,
    parse_timespan,
    plc_date_to_datetime,
)
from ..value_objects.type_token import ScalarKind, TypeToken

_UINT32_MAX = 0xFFFFFFFF


class ValueCodecStrategy(ABC):
    """Abstract strategy for encoding/decoding one scalar element."""

    @abstractmethod
    def decode(self, reader: BinaryReader, token: TypeToken) -> Any:
        """Decode one element.

        Args:
            reader: Cursor positioned at the element; advanced by its width
            token: Scalar token of the element

        Returns:
            Decoded Python value
        """

    @abstractmethod
    def encode(self, writer: BinaryWriter, token: TypeToken, value: Any) -> None:
        """Encode one element.

        Args:
            writer: Cursor positioned at the element; advanced by its width
            token: Scalar token of the element
            value: Python value to encode

        Raises:
            DataTypeError: If value does not fit the token
        """


class BoolCodec(ValueCodecStrategy):
    """Codec for booleans (one byte, non-zero = True)."""

    def decode(self, reader: BinaryReader, token: TypeToken) -> bool:
        """Decode to boolean."""
        return reader.read(1)[0] != 0

    def encode(self, writer: BinaryWriter, token: TypeToken, value: Any) -> None:
        """Encode from boolean or 'true'/'false'."""
        writer.write(b"\x01" if parse_bool(value) else b"\x00")


class ByteCodec(ValueCodecStrategy):
    """Codec for raw 8-bit values.

    Bytes are never parsed from text: the value must already be a byte.
    """

    def decode(self, reader: BinaryReader, token: TypeToken) -> int:
        """Decode raw byte."""
        return reader.read(1)[0]

    def encode(self, writer: BinaryWriter, token: TypeToken, value: Any) -> None:
        """Encode raw byte."""
        if isinstance(value, (bytes, bytearray)) and len(value) == 1:
            writer.write(bytes(value))
            return
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFF:
            writer.write(bytes((value,)))
            return
        raise DataTypeError(f"Value {value!r} is not a byte")


class IntegerCodec(ValueCodecStrategy):
    """Codec for fixed-width integers."""

    def __init__(self, fmt: str, signed: bool):
        """Initialize codec.

        Args:
            fmt: struct format character (h, H, i, I, q, Q)
            signed: Whether the integer is two's complement
        """
        self._fmt = fmt
        bits = {"h": 16, "i": 32, "q": 64}[fmt.lower()]
        if signed:
            self._low, self._high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        else:
            self._low, self._high = 0, (1 << bits) - 1

    def decode(self, reader: BinaryReader, token: TypeToken) -> int:
        """Decode integer."""
        return reader.unpack(self._fmt)

    def encode(self, writer: BinaryWriter, token: TypeToken, value: Any) -> None:
        """Encode integer parsed with invariant formatting."""
        name = token.kind.value
        number = check_range(
            parse_invariant_int(value, name), self._low, self._high, name
        )
        writer.pack(self._fmt, number)


class RealCodec(ValueCodecStrategy):
    """Codec for IEEE 754 floats (f = single, d = double)."""

    def __init__(self, fmt: str):
        """Initialize with struct format character."""
        self._fmt = fmt

    def decode(self, reader: BinaryReader, token: TypeToken) -> float:
        """Decode float."""
        return reader.unpack(self._fmt)

    def encode(self, writer: BinaryWriter, token: TypeToken, value: Any) -> None:
        """Encode float parsed with invariant formatting."""
        number = parse_invariant_float(value, token.kind.value)
        try:
            writer.pack(self._fmt, number)
        except OverflowError as err:
            raise DataTypeError(
                f"Value {value!r} is out of range for {token.kind.value}"
            ) from err


class TimeCodec(ValueCodecStrategy):
    """Codec for TIME (unsigned 32-bit milliseconds)."""

    def decode(self, reader: BinaryReader, token: TypeToken) -> timedelta:
        """Decode to timedelta."""
        return timedelta(milliseconds=reader.unpack("I"))

    def encode(self, writer: BinaryWriter, token: TypeToken, value: Any) -> None:
        """Encode timedelta or TimeSpan text (sub-millisecond part dropped)."""
        span = parse_timespan(value)
        milliseconds = span // timedelta(milliseconds=1)
        writer.pack("I", check_range(milliseconds, 0, _UINT32_MAX, "time (ms)"))


class DateCodec(ValueCodecStrategy):
    """Codec for DATE (unsigned 32-bit seconds since 1970-01-01)."""

    def decode(self, reader: BinaryReader, token: TypeToken) -> datetime:
        """Decode to naive UTC datetime."""
        return plc_date_to_datetime(reader.unpack("I"))

    def encode(self, writer: BinaryWriter, token: TypeToken, value: Any) -> None:
        """Encode datetime, date or ISO 8601 text."""
        seconds = datetime_to_plc_date(parse_date(value))
        writer.pack("I", check_range(seconds, 0, _UINT32_MAX, "date (s)"))


class StringCodec(ValueCodecStrategy):
    """Codec for fixed-length ANSI strings.

    The slot always ends with at least one NUL byte, so a ``string<N>`` holds
    at most N-1 encoded bytes. Longer text is rejected, never truncated.
    """

    def __init__(self, encoding: str = DEFAULT_STRING_ENCODING):
        """Initialize with the controller code page."""
        self._encoding = encoding

    def decode(self, reader: BinaryReader, token: TypeToken) -> str:
        """Decode text up to the first terminator."""
        raw = reader.read(token.element_width)
        return raw.split(b"\x00", 1)[0].decode(self._encoding, errors="replace")

    def encode(self, writer: BinaryWriter, token: TypeToken, value: Any) -> None:
        """Encode text and zero-pad to the slot width."""
        if not isinstance(value, str):
            raise DataTypeError(f"Value {value!r} is not a string")
        if "\x00" in value:
            raise DataTypeError("String values must not contain NUL characters")
        try:
            encoded = value.encode(self._encoding)
        except UnicodeEncodeError as err:
            raise DataTypeError(
                f"String {value!r} cannot be encoded as {self._encoding}"
            ) from err

        width = token.element_width
        if len(encoded) >= width:
            raise DataTypeError(
                f"String of length {len(encoded)} does not fit {token} "
                f"(maximum {width - 1} characters)"
            )
        writer.write(encoded)
        writer.skip(width - len(encoded))


class TypeCodec:
    """Registry mapping scalar kinds to codecs.

    Resolves type tokens and dispatches element encode/decode to the matching
    strategy.

    Example:
        >>> codec = TypeCodec()
        >>> codec.width("lreal")
        8
        >>> writer = BinaryWriter(codec.width("int"))
        >>> codec.encode(writer, "int", "42")
        >>> codec.decode(BinaryReader(writer.getvalue()), "int")
        42
    """

    def __init__(self, string_encoding: str = DEFAULT_STRING_ENCODING):
        """Initialize registry with the built-in codecs.

        Args:
            string_encoding: Code page for string values
        """
        self._codecs: Dict[ScalarKind, ValueCodecStrategy] = {
            ScalarKind.BOOL: BoolCodec(),
            ScalarKind.BYTE: ByteCodec(),
            ScalarKind.SINT: IntegerCodec("h", signed=True),
            ScalarKind.USINT: IntegerCodec("H", signed=False),
            ScalarKind.INT: IntegerCodec("i", signed=True),
            ScalarKind.UINT: IntegerCodec("I", signed=False),
            ScalarKind.DINT: IntegerCodec("q", signed=True),
            ScalarKind.UDINT: IntegerCodec("Q", signed=False),
            ScalarKind.REAL: RealCodec("f"),
            ScalarKind.LREAL: RealCodec("d"),
            ScalarKind.TIME: TimeCodec(),
            ScalarKind.DATE: DateCodec(),
            ScalarKind.STRING: StringCodec(string_encoding),
        }
        self.string_encoding = string_encoding

    @staticmethod
    def resolve(token: Union[str, TypeToken]) -> TypeToken:
        """Parse a token string, passing parsed tokens through.

        Raises:
            UnsupportedTypeError: If the token is unknown
        """
        if isinstance(token, TypeToken):
            return token
        return TypeToken.parse(token)

    def get_codec(self, kind: ScalarKind) -> ValueCodecStrategy:
        """Get codec for a scalar kind."""
        return self._codecs[kind]

    def register_codec(self, kind: ScalarKind, codec: ValueCodecStrategy) -> None:
        """Replace the codec used for a scalar kind."""
        self._codecs[kind] = codec

    def get_supported_types(self) -> list[str]:
        """Get list of supported scalar type names."""
        return [kind.value for kind in self._codecs]

    def width(self, token: Union[str, TypeToken]) -> int:
        """Get width in bytes of one element of ``token``.

        Raises:
            UnsupportedTypeError: If the token is unknown
        """
        return self.resolve(token).element_width

    def decode(self, reader: BinaryReader, token: Union[str, TypeToken]) -> Any:
        """Decode one element of ``token`` at the reader's position."""
        element = self.resolve(token).element
        return self._codecs[element.kind].decode(reader, element)

    def encode(
        self, writer: BinaryWriter, token: Union[str, TypeToken], value: Any
    ) -> None:
        """Encode one element of ``token`` at the writer's position."""
        element = self.resolve(token).element
        self._codecs[element.kind].encode(writer, element, value)
