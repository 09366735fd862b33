"""Layout inspection utilities.

This module provides functions to inspect how a registered union packs its
values without encoding anything.
"""

from __future__ import annotations

from typing import Any

from ..codec.bitmath import WORD_BITS
from ..registry import layout_of


def tag_bits(union: Any) -> int:
    """Return the number of low bits reserved for auto-numbered tags.

    Args:
        union: Registered TaggedUnion class or value

    Raises:
        SchemaError: If the union is not registered

    Example:
        >>> tag_bits(Shape)
        2
    """
    return layout_of(union).mask_width


def payload_bits(union: Any) -> int:
    """Return the number of high bits left for a field variant's payload.

    Payload values wider than this lose their top bits when encoded.

    Example:
        >>> payload_bits(Shape)
        62
    """
    return WORD_BITS - layout_of(union).mask_width


def tag_table(union: Any) -> dict[str, int]:
    """Map each variant name to its tag, auto-numbered variants first.

    Constant variants map to their explicit value.

    Example:
        >>> tag_table(Shape)
        {'A': 0, 'B': 1, 'C': 2}
    """
    return layout_of(union).tags()
