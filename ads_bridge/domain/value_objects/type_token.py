"""TypeToken value object.

Parses the symbolic type strings used in batch requests into a closed set of
scalar kinds plus optional string and array lengths.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...const import DEFAULT_STRING_WIDTH, SCALAR_WIDTHS
from ..exceptions import UnsupportedTypeError


class ScalarKind(Enum):
    """Scalar data kinds understood by the controller."""

    BOOL = "bool"
    BYTE = "byte"
    SINT = "sint"  # Signed 16-bit
    USINT = "usint"  # Unsigned 16-bit
    INT = "int"  # Signed 32-bit
    UINT = "uint"  # Unsigned 32-bit
    DINT = "dint"  # Signed 64-bit
    UDINT = "udint"  # Unsigned 64-bit
    REAL = "real"  # IEEE 754 single
    LREAL = "lreal"  # IEEE 754 double
    TIME = "time"  # Milliseconds, 32-bit
    DATE = "date"  # Seconds since 1970, 32-bit
    STRING = "string"  # Fixed-length ANSI string


_TOKEN_PATTERN = re.compile(
    r"(?P<kind>bool|byte|sint|usint|int|uint|dint|udint|real|lreal|time|date|string)"
    r"(?:<(?P<strlen>[0-9]+)>)?"
    r"(?:\[(?P<arrlen>[0-9]+)\])?"
)


@dataclass(frozen=True)
class TypeToken:
    """Immutable parsed type token.

    Attributes:
        kind: Scalar kind of each element
        string_length: Declared width of a fixed-length string (None for the
            default 81-byte string and for non-string kinds)
        array_length: Declared element count, None for scalars

    Example:
        >>> token = TypeToken.parse("real[4]")
        >>> token.kind, token.array_length, token.element_width
        (<ScalarKind.REAL: 'real'>, 4, 4)
        >>> TypeToken.parse("string<20>").element_width
        20
    """

    kind: ScalarKind
    string_length: Optional[int] = None
    array_length: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate lengths.

        Raises:
            ValueError: If a length is not positive or misplaced
        """
        if self.string_length is not None:
            if self.kind is not ScalarKind.STRING:
                raise ValueError(f"{self.kind.value} cannot carry a string length")
            if self.string_length <= 0:
                raise ValueError(
                    f"String length must be positive, got {self.string_length}"
                )
        if self.array_length is not None:
            if self.kind is ScalarKind.STRING:
                raise ValueError("Arrays of strings are not supported")
            if self.array_length <= 0:
                raise ValueError(
                    f"Array length must be positive, got {self.array_length}"
                )

    @classmethod
    def parse(cls, token: str) -> "TypeToken":
        """Parse a type token string.

        ``string[N]`` is read as the fixed-length string ``string<N>``; strings
        are never arrays.

        Args:
            token: Token such as ``int``, ``string<20>`` or ``real[4]``

        Returns:
            Parsed token

        Raises:
            UnsupportedTypeError: If the token is outside the grammar
        """
        if not isinstance(token, str):
            raise UnsupportedTypeError(repr(token))

        match = _TOKEN_PATTERN.fullmatch(token)
        if match is None:
            raise UnsupportedTypeError(token)

        kind = ScalarKind(match.group("kind"))
        strlen = match.group("strlen")
        arrlen = match.group("arrlen")

        if kind is ScalarKind.STRING:
            if strlen is not None and arrlen is not None:
                raise UnsupportedTypeError(token)
            length = strlen if strlen is not None else arrlen
            string_length = int(length) if length is not None else None
            array_length = None
        else:
            if strlen is not None:
                raise UnsupportedTypeError(token)
            string_length = None
            array_length = int(arrlen) if arrlen is not None else None

        try:
            return cls(kind, string_length, array_length)
        except ValueError as err:
            raise UnsupportedTypeError(token) from err

    @property
    def is_array(self) -> bool:
        """Check if token declares an array."""
        return self.array_length is not None

    @property
    def is_string(self) -> bool:
        """Check if token is a fixed-length string."""
        return self.kind is ScalarKind.STRING

    @property
    def element(self) -> "TypeToken":
        """Get the scalar token of one element."""
        if not self.is_array:
            return self
        return TypeToken(self.kind, self.string_length)

    @property
    def element_width(self) -> int:
        """Get width of one element in bytes."""
        if self.kind is ScalarKind.STRING:
            return self.string_length or DEFAULT_STRING_WIDTH
        return SCALAR_WIDTHS[self.kind.value]

    @property
    def element_count(self) -> int:
        """Get number of elements (1 for scalars)."""
        return self.array_length or 1

    @property
    def width(self) -> int:
        """Get total width in bytes."""
        return self.element_width * self.element_count

    def __str__(self) -> str:
        """Render back to token syntax."""
        text = self.kind.value
        if self.string_length is not None:
            text += f"<{self.string_length}>"
        if self.array_length is not None:
            text += f"[{self.array_length}]"
        return text
