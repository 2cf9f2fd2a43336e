"""Custom exceptions for the ADS variable bridge.

This module defines domain-specific exceptions that represent the expected
error conditions of a batch request. The batch processor turns every one of
them into a response message; none of them is meant to reach the caller.
"""

from typing import Optional


class BridgeError(Exception):
    """Base class for every error raised while processing a batch."""


class RequestValidationError(BridgeError, ValueError):
    """Batch request has a malformed shape.

    Detected before any gateway call is made. The caller can always recover by
    correcting the request.
    """


class DataTypeError(BridgeError, TypeError):
    """Value cannot be marshalled for the requested type token.

    Covers numeric parse failures, byte-type mismatches and string overflow.

    Example:
        >>> raise DataTypeError("Value 'abc' is not a valid int")
    """


class UnsupportedTypeError(DataTypeError):
    """Type token is outside the supported grammar."""

    def __init__(self, token: str):
        """Initialize with the offending token.

        Args:
            token: Type token as supplied by the caller
        """
        super().__init__(f"Data type '{token}' not supported")
        self.token = token


class LengthMismatchError(BridgeError, ValueError):
    """Array value count does not match the length declared in the token.

    Attributes:
        supplied: Number of values supplied by the caller
        declared: Array length declared in the type token
        name: Variable name, when known
    """

    def __init__(self, supplied: int, declared: int, name: Optional[str] = None):
        """Initialize with both counts.

        Args:
            supplied: Number of values supplied
            declared: Declared array length
            name: Variable the values were meant for
        """
        target = f"Write request for {name}: " if name else ""
        super().__init__(
            f"{target}Array length in 'values' ({supplied}) doesn't match the "
            f"indicated array length in 'types' property ({declared}). "
            f"For example if your item is an integer array of length three "
            f"('values' = [[2, 4, 1]]) indicate 'types' = ['int[3]']"
        )
        self.supplied = supplied
        self.declared = declared
        self.name = name


class TransportError(BridgeError):
    """Connection gateway failed to create a handle, read or write."""
