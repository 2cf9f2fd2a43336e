"""Domain strategies."""

from .array_codec import ArrayCodec
from .struct_codec import StructCodec
from .value_codec_strategy import (
    BoolCodec,
    ByteCodec,
    DateCodec,
    IntegerCodec,
    RealCodec,
    StringCodec,
    TimeCodec,
    TypeCodec,
    ValueCodecStrategy,
)

__all__ = [
    "ArrayCodec",
    "BoolCodec",
    "ByteCodec",
    "DateCodec",
    "IntegerCodec",
    "RealCodec",
    "StringCodec",
    "StructCodec",
    "TimeCodec",
    "TypeCodec",
    "ValueCodecStrategy",
]
