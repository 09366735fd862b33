"""Word-level arithmetic helpers.

All encoded values live in a single unsigned 64-bit word. Python integers are
unbounded, so every shift that can carry bits past the word is masked back
into it explicitly.
"""

from __future__ import annotations

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1


def is_word(num: object) -> bool:
    """Return True if ``num`` is a plain int that fits in the 64-bit word."""
    return isinstance(num, int) and not isinstance(num, bool) and 0 <= num <= WORD_MASK


def wrap_word(num: int) -> int:
    """Truncate an integer to the 64-bit word, discarding overflow bits."""
    return num & WORD_MASK


def low_mask(width: int) -> int:
    """Return a mask selecting the low ``width`` bits.

    Args:
        width: Number of bits (0-64)

    Raises:
        ValueError: If width is out of range
    """
    if width < 0 or width > WORD_BITS:
        raise ValueError(f"width must be 0-{WORD_BITS}, got {width}")
    return (1 << width) - 1


def next_power_of_two(num: int) -> int:
    """Return the smallest power of two >= num.

    Zero and one both round to one.
    """
    if num <= 1:
        return 1
    return 1 << (num - 1).bit_length()


def mask_width_for(count: int) -> int:
    """Calculate how many low bits address every value in ``[0, count)``.

    The count is rounded up to a power of two first, so payload bits always
    start at an exact bit offset.

    Examples:
        >>> mask_width_for(3)
        2
        >>> mask_width_for(4)
        2
        >>> mask_width_for(5)
        3
        >>> mask_width_for(1)
        0
    """
    return (next_power_of_two(count) - 1).bit_length()
