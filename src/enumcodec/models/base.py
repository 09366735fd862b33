"""Base union class and enumcodec-specific Pydantic configuration.

This module provides the TaggedUnion class that all enumcodec unions should
inherit from, and the UnionOptions model that validates per-union options.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..codec import decoder, encoder
from ..codec.bitmath import WORD_MASK
from ..codec.schema import EncodingLayout, VariantSpec, VariantStyle
from ..exceptions import SchemaError


class UnionOptions(BaseModel):
    """Validated per-union layout options."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    start_at: int = Field(default=0, ge=0, le=WORD_MASK)

    @classmethod
    def for_union(cls, union_class: type, start_at: Optional[int] = None) -> UnionOptions:
        """Build options from a union's ClassVars, with an optional override.

        Raises:
            SchemaError: If an option is invalid
        """
        if start_at is None:
            start_at = getattr(union_class, "enumcodec_start_at", 0)
        try:
            return cls(start_at=start_at)
        except ValidationError as err:
            raise SchemaError(f"Invalid options for {union_class.__name__}: {err}") from err


class TaggedUnion(BaseModel):
    """Base class for all enumcodec unions.

    A union declares its variants as a ClassVar and must be registered with
    ``register_union`` before values are created. Each instance is one variant,
    with the payload in ``value`` for field variants.

    Example:
        >>> @register_union
        ... class Shape(TaggedUnion):
        ...     enumcodec_variants: ClassVar[Sequence[VariantSpec]] = [
        ...         Unit("A"),
        ...         Field("B", U64),
        ...         Unit("C"),
        ...     ]
        >>> Shape.of("B", 5).encode()
        21
        >>> Shape.decode(21)
        Shape(variant='B', value=5)

    Attributes:
        enumcodec_variants: Variant declarations, in declaration order
        enumcodec_start_at: First tag for auto-numbered variants
        enumcodec_layout: Layout computed by registration
    """

    model_config = ConfigDict(
        # Hashable, immutable values usable as storage keys
        frozen=True,
        # Payloads may be primitives or other unions
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    variant: str
    value: Any = None

    enumcodec_variants: ClassVar[Sequence[VariantSpec]] = ()
    enumcodec_start_at: ClassVar[int] = 0
    enumcodec_layout: ClassVar[Optional[EncodingLayout]] = None

    @model_validator(mode="after")
    def check_variant(self) -> TaggedUnion:
        layout = type(self).layout()
        entry = layout.entry(self.variant)
        if entry is None:
            raise ValueError(f"{layout.name} has no variant {self.variant!r}")

        if entry.spec.style is VariantStyle.FIELD:
            if self.value is None:
                raise ValueError(f"{layout.name}.{self.variant} requires a payload")
            entry.spec.payload_type.validate_payload(self.value)
        elif self.value is not None:
            raise ValueError(f"{layout.name}.{self.variant} carries no payload")
        return self

    @classmethod
    def layout(cls) -> EncodingLayout:
        """Return the layout computed when this class was registered.

        Raises:
            SchemaError: If the class itself was never registered
        """
        layout = cls.enumcodec_layout
        if layout is None or layout.owner is not cls:
            raise SchemaError(
                f"{cls.__name__} is not registered; decorate it with @register_union"
            )
        return layout

    @classmethod
    def of(cls, variant: str, value: Any = None) -> TaggedUnion:
        """Create a value of the given variant."""
        return cls(variant=variant, value=value)

    def encode(self) -> int:
        """Encode this value to an unsigned integer."""
        return encoder.encode(type(self).layout(), self)

    @classmethod
    def try_decode(cls, num: int) -> Optional[TaggedUnion]:
        """Decode an integer, returning None if it is not a valid encoding."""
        return decoder.try_decode(cls.layout(), num)

    @classmethod
    def decode(cls, num: int) -> TaggedUnion:
        """Decode an integer produced by encode().

        Raises:
            NoMatchingVariant: If the integer is not a valid encoding
        """
        return decoder.decode(cls.layout(), num)

    @classmethod
    def encode_payload(cls, value: TaggedUnion) -> int:
        return encoder.encode(cls.layout(), value)

    @classmethod
    def validate_payload(cls, value: Any) -> TaggedUnion:
        if not isinstance(value, cls):
            raise ValueError(f"expected {cls.__name__} payload, got {type(value).__name__}")
        return value

    def __int__(self) -> int:
        return self.encode()
