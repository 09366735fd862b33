"""Tagged-union decoder.

This module provides try_decode() and decode(), which unpack an integer back
into a union value using the same EncodingLayout it was encoded with.

Checks run in a fixed order: every auto-numbered variant first (masked tag
comparison), then every constant variant (full-width equality). The first
match wins, so a constant whose low bits equal an auto tag decodes as the
auto-numbered variant.
"""

from __future__ import annotations

from typing import Any, Optional

from structlog import get_logger

from ..exceptions import NoMatchingVariant
from .bitmath import is_word
from .schema import EncodingLayout, VariantSpec, VariantStyle, VariantValue

logger = get_logger()


def try_decode(layout: EncodingLayout, num: int) -> Optional[Any]:
    """Decode an integer, returning None if no variant matches.

    A matching auto-numbered field variant whose payload fails to decode fails
    the whole decode; later checks are not tried.

    Args:
        layout: Layout of the target union
        num: Integer to decode

    Returns:
        Decoded value, or None on failure
    """
    if not is_word(num):
        logger.debug("no matching variant", union=layout.name, num=num, reason="not a 64-bit word")
        return None

    low_bits = num & layout.tag_mask
    for entry in layout.entries:
        spec = entry.spec
        if spec.is_constant:
            if num == entry.tag:
                return _build(layout, spec)
            continue

        if low_bits != entry.tag:
            continue

        if spec.style is VariantStyle.UNIT:
            return _build(layout, spec)

        payload = spec.payload_type.try_decode(num >> layout.mask_width)
        if payload is None:
            logger.debug("payload decode failed", union=layout.name, variant=spec.name, num=num)
            return None
        return _build(layout, spec, payload)

    logger.debug("no matching variant", union=layout.name, num=num)
    return None


def decode(layout: EncodingLayout, num: int) -> Any:
    """Decode an integer known to come from encode() on the same layout.

    Args:
        layout: Layout of the target union
        num: Integer previously produced by encode()

    Returns:
        Decoded value

    Raises:
        NoMatchingVariant: If the integer is not a valid encoding. This is a
            caller error; use try_decode() for untrusted input.
    """
    value = try_decode(layout, num)
    if value is None:
        raise NoMatchingVariant(f"Failure to parse number {num!r} into {layout.name}")
    return value


def _build(layout: EncodingLayout, spec: VariantSpec, payload: Any = None) -> Any:
    if layout.owner is None:
        return VariantValue(spec.name, payload)
    return layout.owner(variant=spec.name, value=payload)
