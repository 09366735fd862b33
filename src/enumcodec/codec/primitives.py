"""Primitive payload adapters.

Raw unsigned integers are the terminal payloads of a union: they encode to
themselves and decode by keeping the low bits of whatever remains of the
word. This module also defines the PayloadCodec protocol that every payload
type, primitive or union, implements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from .bitmath import WORD_BITS, low_mask


@runtime_checkable
class PayloadCodec(Protocol):
    """Capability contract for types usable as a Field payload.

    Registered TaggedUnion subclasses implement these as classmethods, which
    is what lets unions nest inside unions.
    """

    def encode_payload(self, value: Any) -> int:
        """Encode a payload value to an unsigned integer."""
        ...

    def try_decode(self, num: int) -> Optional[Any]:
        """Decode an integer, returning None on failure."""
        ...

    def decode(self, num: int) -> Any:
        """Decode an integer, raising if it cannot be decoded."""
        ...

    def validate_payload(self, value: Any) -> Any:
        """Return ``value`` if acceptable as a payload, else raise ValueError."""
        ...


@dataclass(frozen=True)
class UInt:
    """Unsigned integer payload of a fixed bit width.

    Encoding is the identity. Decoding always succeeds and keeps only the low
    ``bits`` bits, so a stored value wider than the adapter is silently
    truncated.

    Example:
        >>> U8.decode(0x1FF)
        255
    """

    bits: int

    def __post_init__(self) -> None:
        if not 1 <= self.bits <= WORD_BITS:
            raise ValueError(f"bits must be 1-{WORD_BITS}, got {self.bits}")

    @property
    def max_value(self) -> int:
        return low_mask(self.bits)

    def encode_payload(self, value: int) -> int:
        return int(value)

    def try_decode(self, num: int) -> Optional[int]:
        return num & self.max_value

    def decode(self, num: int) -> int:
        return num & self.max_value

    def validate_payload(self, value: Any) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"expected int for u{self.bits} payload, got {type(value).__name__}")
        if value < 0 or value > self.max_value:
            raise ValueError(
                f"value {value} out of bounds for u{self.bits} [0, {self.max_value}]"
            )
        return value

    def __repr__(self) -> str:
        return f"UInt({self.bits})"


U8 = UInt(8)
U16 = UInt(16)
U32 = UInt(32)
U64 = UInt(64)
USIZE = UInt(WORD_BITS)
