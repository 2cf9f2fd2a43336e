"""Tests for TypeToken value object."""

import pytest
from dataclasses import FrozenInstanceError

from ads_bridge.domain.exceptions import DataTypeError, UnsupportedTypeError
from ads_bridge.domain.value_objects.type_token import ScalarKind, TypeToken


class TestTypeTokenParsing:
    """Test parsing of token strings."""

    @pytest.mark.parametrize(
        "token,width",
        [
            ("bool", 1),
            ("byte", 1),
            ("sint", 2),
            ("usint", 2),
            ("int", 4),
            ("uint", 4),
            ("dint", 8),
            ("udint", 8),
            ("real", 4),
            ("lreal", 8),
            ("time", 4),
            ("date", 4),
            ("string", 81),
            ("string<20>", 20),
        ],
    )
    def test_scalar_widths(self, token, width):
        """Test every scalar token resolves to its fixed width."""
        parsed = TypeToken.parse(token)
        assert parsed.element_width == width
        assert parsed.width == width
        assert not parsed.is_array

    def test_parse_array(self):
        """Test array token carries length and total width."""
        token = TypeToken.parse("real[4]")
        assert token.kind == ScalarKind.REAL
        assert token.array_length == 4
        assert token.is_array
        assert token.element_width == 4
        assert token.width == 16
        assert token.element == TypeToken(ScalarKind.REAL)

    def test_string_with_brackets_is_fixed_length_string(self):
        """Test string[N] is a scalar string of width N, not an array."""
        token = TypeToken.parse("string[20]")
        assert token.is_string
        assert not token.is_array
        assert token.string_length == 20
        assert token.width == 20

    @pytest.mark.parametrize(
        "token",
        ["foo", "weird", "", "Int", "int[]", "int[0]", "int[-1]", "string<0>",
         "string<10>[3]", "int<4>", "real[2][2]", " int", "int ", "int\n",
         "real[4]\n"],
    )
    def test_unsupported_tokens(self, token):
        """Test tokens outside the grammar are rejected."""
        with pytest.raises(UnsupportedTypeError) as exc_info:
            TypeToken.parse(token)
        assert exc_info.value.token == token
        assert "not supported" in str(exc_info.value)

    def test_unsupported_is_data_type_error(self):
        """Test unsupported tokens belong to the type error family."""
        with pytest.raises(DataTypeError):
            TypeToken.parse("foo")

    def test_non_string_token_rejected(self):
        """Test non-string input is rejected."""
        with pytest.raises(UnsupportedTypeError):
            TypeToken.parse(None)

    @pytest.mark.parametrize("token", ["int", "udint[3]", "string", "string<12>"])
    def test_str_renders_token_syntax(self, token):
        """Test str() gives back the canonical token."""
        assert str(TypeToken.parse(token)) == token


class TestTypeTokenInvariants:
    """Test TypeToken construction invariants."""

    def test_is_frozen(self):
        """Test token is immutable."""
        token = TypeToken.parse("int")
        with pytest.raises(FrozenInstanceError):
            token.kind = ScalarKind.REAL

    def test_string_length_only_for_strings(self):
        """Test non-string kinds cannot carry a string length."""
        with pytest.raises(ValueError, match="cannot carry a string length"):
            TypeToken(ScalarKind.INT, string_length=4)

    def test_string_arrays_rejected(self):
        """Test strings cannot be arrays."""
        with pytest.raises(ValueError, match="Arrays of strings"):
            TypeToken(ScalarKind.STRING, array_length=2)

    def test_element_count(self):
        """Test element count defaults to one."""
        assert TypeToken.parse("int").element_count == 1
        assert TypeToken.parse("int[7]").element_count == 7
