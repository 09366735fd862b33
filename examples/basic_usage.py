#!/usr/bin/env python3
"""Basic usage example for enumcodec.

This example demonstrates:
1. Declaring and registering a tagged union
2. Encoding values to a single integer
3. Decoding integers back to union values
4. Inspecting the tag layout
"""

from __future__ import annotations

from typing import ClassVar, Sequence

from enumcodec import (
    U16,
    Constant,
    Field,
    TaggedUnion,
    Unit,
    VariantSpec,
    payload_bits,
    register_union,
    tag_bits,
    tag_table,
)


@register_union
class Reading(TaggedUnion):
    """Sensor reading.

    Missing, Celsius and Kelvin are auto-numbered (tags 0-2, two tag bits);
    Fault is pinned to 0xDEAF, whose low bits 0b11 name no auto tag.
    """

    enumcodec_variants: ClassVar[Sequence[VariantSpec]] = [
        Unit("Missing"),
        Field("Celsius", U16),
        Field("Kelvin", U16),
        Constant("Fault", 0xDEAF),
    ]


@register_union(start_at=1)
class Event(TaggedUnion):
    """Event carrying a nested Reading."""

    enumcodec_variants: ClassVar[Sequence[VariantSpec]] = [
        Field("Sample", Reading),
        Unit("Heartbeat"),
    ]


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("enumcodec Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Inspecting layouts...")
    for union in (Reading, Event):
        print(f"   {union.__name__}: {tag_bits(union)} tag bits, {payload_bits(union)} payload bits")
        for name, tag in tag_table(union).items():
            print(f"      {name}: {tag}")
    print()

    print("2. Encoding values...")
    values = [
        Event.of("Sample", Reading.of("Celsius", 21)),
        Event.of("Sample", Reading.of("Missing")),
        Event.of("Heartbeat"),
    ]
    encoded = [value.encode() for value in values]
    for value, num in zip(values, encoded):
        print(f"   {value!r} -> {num} (0b{num:b})")
    print()

    print("3. Decoding integers...")
    for num in encoded:
        decoded = Event.decode(num)
        print(f"   {num} -> {decoded!r}")
        assert decoded in values
    print()

    print("4. Handling untrusted input...")
    unknown = 0
    print(f"   Event.try_decode({unknown}) -> {Event.try_decode(unknown)!r}")
    print(f"   Reading.decode(0xDEAF) -> {Reading.decode(0xDEAF)!r}")
    print()

    print("✓ All values round-tripped")


if __name__ == "__main__":
    main()
