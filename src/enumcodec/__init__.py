"""enumcodec: Integer Codec for Tagged Unions

A Python library that packs a tagged-union value (a type with a fixed set of
named variants, each empty, carrying one payload, or pinned to an explicit
number) into a single unsigned 64-bit integer, and unpacks it again. Suited to
storage keys, hashing and compact wire values.

Key Features:
- Pydantic-based union modeling
- Auto-numbered tags packed into the fewest low-order bits
- Constant variants pinned to explicit values
- Unions nest inside unions as payloads

Quick Start:
    >>> from typing import ClassVar, Sequence
    >>> from enumcodec import TaggedUnion, Unit, Field, U64, VariantSpec, register_union
    >>>
    >>> @register_union
    ... class Shape(TaggedUnion):
    ...     enumcodec_variants: ClassVar[Sequence[VariantSpec]] = [
    ...         Unit("A"),
    ...         Field("B", U64),
    ...         Unit("C"),
    ...     ]
    >>>
    >>> num = Shape.of("B", 5).encode()   # (5 << 2) | 1 == 21
    >>> Shape.decode(num)
    Shape(variant='B', value=5)
"""

from __future__ import annotations

from .codec import (
    U8,
    U16,
    U32,
    U64,
    USIZE,
    EncodingLayout,
    LayoutEntry,
    PayloadCodec,
    UInt,
    VariantSpec,
    VariantStyle,
    VariantValue,
    analyze,
    decode,
    encode,
    try_decode,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    EnumCodecError,
    NoMatchingVariant,
    SchemaError,
)
from .models import Constant, Field, TaggedUnion, UnionOptions, Unit
from .registry import layout_of, register_union
from .utils import payload_bits, tag_bits, tag_table

__version__ = "0.1.0"

__all__ = [
    # Core API
    "TaggedUnion",
    "register_union",
    "layout_of",
    "analyze",
    "encode",
    "decode",
    "try_decode",
    # Declarations
    "Unit",
    "Field",
    "Constant",
    "VariantSpec",
    "VariantStyle",
    "VariantValue",
    "EncodingLayout",
    "LayoutEntry",
    "UnionOptions",
    # Primitive payloads
    "PayloadCodec",
    "UInt",
    "U8",
    "U16",
    "U32",
    "U64",
    "USIZE",
    # Exceptions
    "EnumCodecError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "NoMatchingVariant",
    # Inspection
    "tag_bits",
    "payload_bits",
    "tag_table",
    # Version
    "__version__",
]
