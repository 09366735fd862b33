"""Variant declaration helpers.

This module provides convenience constructors for the three variant styles a
tagged union can declare.
"""

from __future__ import annotations

from typing import Any

from ..codec.schema import VariantSpec, VariantStyle


def Unit(name: str) -> VariantSpec:
    """Declare a variant that carries nothing.

    Example:
        >>> class Light(TaggedUnion):
        ...     enumcodec_variants: ClassVar[Sequence[VariantSpec]] = [Unit("Off"), Unit("On")]
    """
    return VariantSpec(name=name, style=VariantStyle.UNIT)


def Field(name: str, *payload: Any, **named_payload: Any) -> VariantSpec:
    """Declare a variant carrying exactly one payload.

    The payload type is any PayloadCodec: a primitive such as ``U64`` or a
    registered TaggedUnion subclass. Declarations with zero or several payload
    types, or with named payloads, are accepted here and rejected with a
    SchemaError when the union is registered.

    Args:
        name: Variant name
        *payload: Payload type (exactly one)
        **named_payload: Unsupported; recorded so registration can reject it

    Example:
        >>> class Reading(TaggedUnion):
        ...     enumcodec_variants: ClassVar[Sequence[VariantSpec]] = [
        ...         Unit("Missing"),
        ...         Field("Celsius", U16),
        ...     ]
    """
    return VariantSpec(
        name=name,
        style=VariantStyle.FIELD,
        payload=tuple(payload),
        named_payload=tuple(named_payload),
    )


def Constant(name: str, value: int) -> VariantSpec:
    """Declare a variant pinned to an explicit integer.

    The value is emitted verbatim by encode and matched by full-width equality
    on decode, after every auto-numbered variant has been checked.
    """
    return VariantSpec(name=name, style=VariantStyle.CONSTANT, value=value)
