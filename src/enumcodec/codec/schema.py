"""Schema analysis for tagged unions.

This module turns an ordered list of variant declarations into an
EncodingLayout: the tag assigned to every variant and the number of low-order
bits reserved for auto-numbered tags.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

from structlog import get_logger

from ..exceptions import SchemaError
from .bitmath import WORD_BITS, WORD_MASK, is_word, low_mask, mask_width_for
from .primitives import PayloadCodec

logger = get_logger()


class VariantStyle(enum.Enum):
    """Shape of a declared variant."""

    UNIT = "unit"
    FIELD = "field"
    CONSTANT = "constant"


@dataclass(frozen=True)
class VariantSpec:
    """One declared case of a tagged union.

    Attributes:
        name: Variant name
        style: UNIT, FIELD or CONSTANT
        payload: Payload types as declared (exactly one for a valid FIELD)
        named_payload: Keyword payload names as declared (always rejected)
        value: Explicit integer for CONSTANT variants
    """

    name: str
    style: VariantStyle
    payload: Tuple[Any, ...] = ()
    named_payload: Tuple[str, ...] = ()
    value: Optional[int] = None

    @property
    def is_constant(self) -> bool:
        return self.style is VariantStyle.CONSTANT

    @property
    def payload_type(self) -> Optional[PayloadCodec]:
        """The single payload type of a FIELD variant, None otherwise."""
        if self.style is VariantStyle.FIELD and len(self.payload) == 1:
            return self.payload[0]
        return None


class LayoutEntry(NamedTuple):
    """A variant paired with its resolved tag."""

    spec: VariantSpec
    tag: int


class VariantValue(NamedTuple):
    """Decoded value for layouts that have no owning union class."""

    variant: str
    value: Any = None


@dataclass(frozen=True)
class EncodingLayout:
    """Immutable tag assignment for one union type.

    Entries are ordered with every auto-numbered variant first, in declaration
    order, followed by the constant variants in declaration order. Decoding
    walks the entries in exactly this order.

    Attributes:
        name: Union name, used in messages and logs
        entries: Ordered (spec, tag) pairs
        mask_width: Number of low-order bits reserved for auto-numbered tags
        start_at: First auto-numbered tag
        owner: Class that decoded values are built as (None yields VariantValue)
    """

    name: str
    entries: Tuple[LayoutEntry, ...]
    mask_width: int
    start_at: int = 0
    owner: Optional[type] = field(default=None, compare=False, repr=False)

    @property
    def tag_mask(self) -> int:
        return low_mask(self.mask_width)

    def entry(self, name: str) -> Optional[LayoutEntry]:
        """Look up the entry for a variant name."""
        for entry in self.entries:
            if entry.spec.name == name:
                return entry
        return None

    def tags(self) -> Dict[str, int]:
        """Map each variant name to its tag, in layout order."""
        return {entry.spec.name: entry.tag for entry in self.entries}

    def shadowed_constants(self) -> Dict[str, str]:
        """Find constants whose low bits equal an auto-numbered tag.

        Such a constant still encodes to its own value, but decoding that value
        yields the auto-numbered variant, since those are checked first.

        Returns:
            Mapping of constant variant name to the auto-numbered variant name
            that wins when decoding the constant's value
        """
        auto_by_tag = {e.tag: e.spec.name for e in self.entries if not e.spec.is_constant}
        shadowed = {}
        for entry in self.entries:
            if entry.spec.is_constant:
                winner = auto_by_tag.get(entry.tag & self.tag_mask)
                if winner is not None:
                    shadowed[entry.spec.name] = winner
        return shadowed


def analyze(
    variants: Iterable[VariantSpec],
    start_at: int = 0,
    *,
    name: str = "",
    owner: Optional[type] = None,
) -> EncodingLayout:
    """Compute the encoding layout for an ordered list of variants.

    Auto-numbered (unit and field) variants get tags ``start_at``,
    ``start_at + 1``, ... in declaration order, skipping nothing even when
    constants are interleaved. The mask width is the bit length of
    ``next_power_of_two(start_at + N) - 1``. Constants keep their value as tag,
    unconstrained by the mask width.

    Args:
        variants: Variant declarations in declaration order
        start_at: First tag assigned to auto-numbered variants
        name: Union name for messages and logs
        owner: Class decoded values are built as

    Returns:
        EncodingLayout

    Raises:
        SchemaError: If the declarations or start_at are invalid

    Example:
        >>> layout = analyze([Unit("A"), Field("B", U64), Unit("C")])
        >>> layout.mask_width
        2
        >>> layout.tags()
        {'A': 0, 'B': 1, 'C': 2}
    """
    specs = list(variants)
    if not name:
        name = owner.__name__ if owner is not None else "<anonymous>"
    log = logger.new(union=name)

    if not specs:
        raise SchemaError(f"Union {name} has no variants")

    if not is_word(start_at):
        raise SchemaError(f"Union {name}: start_at must be an integer 0-{WORD_MASK}, got {start_at!r}")

    seen_names = set()
    for spec in specs:
        _check_variant(name, spec)
        if spec.name in seen_names:
            raise SchemaError(f"Union {name}: duplicate variant name {spec.name!r}")
        seen_names.add(spec.name)

    auto = [spec for spec in specs if not spec.is_constant]
    constants = [spec for spec in specs if spec.is_constant]

    if start_at + len(auto) > WORD_MASK + 1:
        raise SchemaError(
            f"Union {name}: {len(auto)} variants starting at {start_at} "
            f"do not fit in a {WORD_BITS}-bit word"
        )

    seen_values: Dict[int, str] = {}
    for spec in constants:
        if spec.value in seen_values:
            raise SchemaError(
                f"Union {name}: variants {seen_values[spec.value]!r} and {spec.name!r} "
                f"share constant value {spec.value}"
            )
        seen_values[spec.value] = spec.name

    entries: List[LayoutEntry] = [LayoutEntry(spec, start_at + i) for i, spec in enumerate(auto)]
    entries.extend(LayoutEntry(spec, spec.value) for spec in constants)

    layout = EncodingLayout(
        name=name,
        entries=tuple(entries),
        mask_width=mask_width_for(start_at + len(auto)),
        start_at=start_at,
        owner=owner,
    )

    for constant_name, winner in layout.shadowed_constants().items():
        log.warning(
            "constant shadowed by auto-numbered tag",
            variant=constant_name,
            value=layout.tags()[constant_name],
            decodes_as=winner,
        )

    log.debug("layout computed", mask_width=layout.mask_width, entries=len(entries))
    return layout


def _check_variant(union_name: str, spec: VariantSpec) -> None:
    """Validate a single variant declaration.

    Raises:
        SchemaError: If the declaration is malformed
    """
    if not isinstance(spec, VariantSpec):
        raise SchemaError(f"Union {union_name}: expected VariantSpec, got {type(spec).__name__}")

    where = f"Union {union_name}, variant {spec.name!r}"

    if not isinstance(spec.name, str) or not spec.name:
        raise SchemaError(f"Union {union_name}: variant names must be non-empty strings")

    if spec.named_payload:
        raise SchemaError(
            f"{where}: named payload fields {list(spec.named_payload)} are not supported"
        )

    if spec.style is VariantStyle.CONSTANT:
        if spec.payload:
            raise SchemaError(f"{where}: constant variants cannot carry a payload")
        if not is_word(spec.value):
            raise SchemaError(
                f"{where}: constant value must be an integer 0-{WORD_MASK}, got {spec.value!r}"
            )
        return

    if spec.value is not None:
        raise SchemaError(f"{where}: only constant variants take an explicit value")

    if spec.style is VariantStyle.UNIT:
        if spec.payload:
            raise SchemaError(f"{where}: unit variants cannot carry a payload")
        return

    if len(spec.payload) != 1:
        raise SchemaError(
            f"{where}: field variants need exactly one payload type, got {len(spec.payload)}"
        )

    payload_type = spec.payload_type
    if not isinstance(payload_type, PayloadCodec):
        raise SchemaError(
            f"{where}: payload type {payload_type!r} does not implement "
            f"encode_payload/try_decode/decode/validate_payload"
        )

    # Union payloads carry their own layout, which must exist before this one.
    if isinstance(payload_type, type) and hasattr(payload_type, "enumcodec_layout"):
        payload_layout = payload_type.enumcodec_layout
        if payload_layout is None or payload_layout.owner is not payload_type:
            raise SchemaError(
                f"{where}: payload union {payload_type.__name__} is not registered; "
                f"register it before {union_name}"
            )
