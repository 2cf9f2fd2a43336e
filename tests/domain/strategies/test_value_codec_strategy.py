"""Tests for scalar codec strategies and the TypeCodec registry."""

import math
from datetime import datetime, timedelta

import pytest

from ads_bridge.domain.exceptions import DataTypeError, UnsupportedTypeError
from ads_bridge.domain.helpers.binary_cursor import BinaryReader, BinaryWriter
from ads_bridge.domain.strategies.value_codec_strategy import (
    StringCodec,
    TypeCodec,
    ValueCodecStrategy,
)
from ads_bridge.domain.value_objects.type_token import ScalarKind, TypeToken


def encode(codec: TypeCodec, token: str, value) -> bytes:
    """Encode one value into a buffer of the token's width."""
    writer = BinaryWriter(codec.width(token))
    codec.encode(writer, token, value)
    return writer.getvalue()


def decode(codec: TypeCodec, token: str, data: bytes):
    """Decode one value and check the whole buffer was consumed."""
    reader = BinaryReader(data)
    value = codec.decode(reader, token)
    assert reader.remaining == 0
    return value


class TestEncoding:
    """Test exact wire bytes per scalar kind."""

    @pytest.mark.parametrize(
        "token,value,expected",
        [
            ("bool", True, b"\x01"),
            ("bool", "false", b"\x00"),
            ("byte", 200, b"\xc8"),
            ("byte", b"\x7f", b"\x7f"),
            ("sint", -2, b"\xfe\xff"),
            ("usint", "65535", b"\xff\xff"),
            ("int", 1, b"\x01\x00\x00\x00"),
            ("int", "-1", b"\xff\xff\xff\xff"),
            ("uint", 4294967295, b"\xff\xff\xff\xff"),
            ("dint", -2, b"\xfe" + b"\xff" * 7),
            ("udint", 1, b"\x01" + b"\x00" * 7),
            ("real", 1.0, b"\x00\x00\x80\x3f"),
            ("real", "1.5", b"\x00\x00\xc0\x3f"),
            ("lreal", 1.0, b"\x00" * 6 + b"\xf0\x3f"),
            ("time", timedelta(seconds=1), b"\xe8\x03\x00\x00"),
            ("time", "00:00:01.5", b"\xdc\x05\x00\x00"),
            ("date", datetime(1970, 1, 2), b"\x80\x51\x01\x00"),
            ("date", "1970-01-01T00:00:10Z", b"\x0a\x00\x00\x00"),
        ],
    )
    def test_encode(self, type_codec, token, value, expected):
        """Test encoding produces the controller layout."""
        assert encode(type_codec, token, value) == expected

    def test_string_zero_padded(self, type_codec):
        """Test strings are NUL-padded to the slot width."""
        data = encode(type_codec, "string<6>", "abc")
        assert data == b"abc\x00\x00\x00"

    def test_default_string_width(self, type_codec):
        """Test bare string occupies 81 bytes."""
        data = encode(type_codec, "string", "hi")
        assert len(data) == 81
        assert data.startswith(b"hi\x00")

    def test_string_code_page(self, type_codec):
        """Test non-ASCII text uses the ANSI code page."""
        assert encode(type_codec, "string<4>", "é€") == b"\xe9\x80\x00\x00"


class TestDecoding:
    """Test decoding per scalar kind."""

    @pytest.mark.parametrize(
        "token,data,expected",
        [
            ("bool", b"\x00", False),
            ("bool", b"\x02", True),
            ("byte", b"\xff", 255),
            ("sint", b"\x00\x80", -32768),
            ("usint", b"\x00\x80", 32768),
            ("int", b"\x01\x00\x00\x00", 1),
            ("uint", b"\xff\xff\xff\xff", 4294967295),
            ("dint", b"\xff" * 8, -1),
            ("udint", b"\xff" * 8, 18446744073709551615),
            ("real", b"\x00\x00\x80\x3f", 1.0),
            ("lreal", b"\x00" * 6 + b"\xf0\x3f", 1.0),
            ("time", b"\xe8\x03\x00\x00", timedelta(seconds=1)),
            ("date", b"\x80\x51\x01\x00", datetime(1970, 1, 2)),
        ],
    )
    def test_decode(self, type_codec, token, data, expected):
        """Test decoding the controller layout."""
        assert decode(type_codec, token, data) == expected

    def test_string_stops_at_terminator(self, type_codec):
        """Test bytes after the first NUL are ignored."""
        assert decode(type_codec, "string<8>", b"ab c\x00xyz") == "ab c"

    def test_string_without_terminator(self, type_codec):
        """Test a full slot decodes entirely."""
        assert decode(type_codec, "string<3>", b"abc") == "abc"

    def test_string_fixed_width_alias(self, type_codec):
        """Test string[N] decodes like string<N>."""
        assert decode(type_codec, "string[4]", b"ok\x00\x00") == "ok"


class TestEncodingErrors:
    """Test values that cannot be marshalled."""

    @pytest.mark.parametrize(
        "token,value",
        [
            ("bool", 1),
            ("byte", 256),
            ("byte", -1),
            ("byte", "12"),
            ("byte", True),
            ("byte", b"\x01\x02"),
            ("sint", 32768),
            ("usint", -1),
            ("int", "abc"),
            ("int", "1,000"),
            ("int", True),
            ("uint", -1),
            ("udint", 1 << 64),
            ("real", "1,5"),
            ("real", 1e40),
            ("time", "-00:00:01"),
            ("time", 5),
            ("date", "1969-12-31T23:59:59"),
            ("date", "not a date"),
            ("string", 5),
            ("string<4>", "a\x00b"),
            ("string<4>", "中"),
        ],
    )
    def test_rejected(self, type_codec, token, value):
        """Test invalid values raise DataTypeError."""
        writer = BinaryWriter(type_codec.width(token))
        with pytest.raises(DataTypeError):
            type_codec.encode(writer, token, value)

    def test_string_must_leave_room_for_terminator(self, type_codec):
        """Test a string<N> holds at most N-1 characters."""
        encode(type_codec, "string<4>", "abc")
        writer = BinaryWriter(4)
        with pytest.raises(DataTypeError, match="maximum 3 characters"):
            type_codec.encode(writer, "string<4>", "abcd")

    def test_default_string_holds_80_characters(self, type_codec):
        """Test the 81-byte string accepts 80 characters but not 81."""
        assert len(encode(type_codec, "string", "x" * 80)) == 81
        with pytest.raises(DataTypeError):
            encode(type_codec, "string", "x" * 81)

    def test_nan_real_encodes(self, type_codec):
        """Test NaN text is a valid real."""
        data = encode(type_codec, "real", "NaN")
        assert math.isnan(decode(type_codec, "real", data))


class TestTypeCodecRegistry:
    """Test TypeCodec registry behavior."""

    def test_unknown_token(self, type_codec):
        """Test unknown tokens raise UnsupportedTypeError."""
        with pytest.raises(UnsupportedTypeError):
            type_codec.width("foo")

    def test_resolve_passes_tokens_through(self):
        """Test parsed tokens are returned unchanged."""
        token = TypeToken(ScalarKind.INT)
        assert TypeCodec.resolve(token) is token

    def test_width_is_per_element(self, type_codec):
        """Test width of an array token is the element width."""
        assert type_codec.width("lreal[3]") == 8

    def test_supported_types(self, type_codec):
        """Test every scalar kind is registered."""
        assert set(type_codec.get_supported_types()) == {k.value for k in ScalarKind}

    def test_register_codec(self, type_codec):
        """Test a codec can be replaced."""

        class FixedCodec(ValueCodecStrategy):
            def decode(self, reader, token):
                reader.read(1)
                return "fixed"

            def encode(self, writer, token, value):
                writer.write(b"\x2a")

        type_codec.register_codec(ScalarKind.BOOL, FixedCodec())

        assert encode(type_codec, "bool", False) == b"\x2a"
        assert decode(type_codec, "bool", b"\x00") == "fixed"

    def test_custom_encoding(self):
        """Test the string code page is configurable."""
        codec = TypeCodec(string_encoding="utf-8")
        assert codec.string_encoding == "utf-8"
        assert encode(codec, "string<4>", "é") == b"\xc3\xa9\x00\x00"

    def test_undecodable_bytes_replaced(self):
        """Test undecodable bytes do not abort a read."""
        codec = StringCodec("ascii")
        token = TypeToken(ScalarKind.STRING, string_length=2)
        assert codec.decode(BinaryReader(b"\xff\x00"), token) == "\ufffd"


class TestRoundTrip:
    """Test decode(encode(v)) returns v for in-range values."""

    @pytest.mark.parametrize(
        "token,value",
        [
            ("sint", -32768),
            ("udint", 18446744073709551615),
            ("lreal", -1234.5678),
            ("time", timedelta(hours=5, milliseconds=7)),
            ("date", datetime(2038, 1, 19, 3, 14, 7)),
            ("string<12>", "abcdefghijk"),
        ],
    )
    def test_round_trip(self, type_codec, token, value):
        """Test values survive the wire format unchanged."""
        assert decode(type_codec, token, encode(type_codec, token, value)) == value
