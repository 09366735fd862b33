"""Integer codec for tagged unions.

This module provides layout analysis, encoding and decoding of tagged-union
values to and from a single unsigned 64-bit integer.
"""

from __future__ import annotations

from .decoder import decode, try_decode
from .encoder import encode
from .primitives import U8, U16, U32, U64, USIZE, PayloadCodec, UInt
from .schema import (
    EncodingLayout,
    LayoutEntry,
    VariantSpec,
    VariantStyle,
    VariantValue,
    analyze,
)

__all__ = [
    "analyze",
    "encode",
    "decode",
    "try_decode",
    "EncodingLayout",
    "LayoutEntry",
    "VariantSpec",
    "VariantStyle",
    "VariantValue",
    "PayloadCodec",
    "UInt",
    "U8",
    "U16",
    "U32",
    "U64",
    "USIZE",
]
