"""Tagged-union encoder.

This module provides the encode() function that packs a union value into a
single unsigned 64-bit integer using a precomputed EncodingLayout.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import EncodeError
from .bitmath import wrap_word
from .schema import EncodingLayout


def encode(layout: EncodingLayout, value: Any) -> int:
    """Encode a union value to an unsigned integer.

    Constant variants encode to their explicit value, unit variants to their
    tag, and field variants to ``(payload << mask_width) | tag``. Payload bits
    shifted past the 64-bit word are discarded without error.

    Args:
        layout: Layout of the value's union
        value: Union value exposing ``variant`` and ``value`` attributes

    Returns:
        Encoded integer in ``[0, 2**64)``

    Raises:
        EncodeError: If the value does not belong to the layout's union, or its
            payload is rejected by the payload type

    Example:
        >>> layout = analyze([Unit("A"), Field("B", U64), Unit("C")])
        >>> encode(layout, VariantValue("B", 5))
        21
    """
    if layout.owner is not None and not isinstance(value, layout.owner):
        raise EncodeError(
            f"Expected {layout.owner.__name__} value, got {type(value).__name__}"
        )

    variant = getattr(value, "variant", None)
    entry = layout.entry(variant) if isinstance(variant, str) else None
    if entry is None:
        raise EncodeError(f"Union {layout.name} has no variant {variant!r}")

    payload_type = entry.spec.payload_type
    if payload_type is not None:
        try:
            payload_type.validate_payload(value.value)
        except ValueError as err:
            raise EncodeError(f"Union {layout.name}, variant {entry.spec.name!r}: {err}") from err
        inner = payload_type.encode_payload(value.value)
        return wrap_word((inner << layout.mask_width) | entry.tag)

    # Unit tags already fit the mask; constants are emitted verbatim.
    return entry.tag
