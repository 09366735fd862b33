"""Unit tests for word arithmetic helpers."""

from __future__ import annotations

import pytest

from enumcodec.codec.bitmath import (
    WORD_BITS,
    WORD_MASK,
    is_word,
    low_mask,
    mask_width_for,
    next_power_of_two,
    wrap_word,
)


class TestNextPowerOfTwo:
    """Test power-of-two rounding."""

    @pytest.mark.parametrize(
        "num,expected",
        [(0, 1), (1, 1), (2, 2), (3, 4), (4, 4), (5, 8), (8, 8), (9, 16), (2**63 + 1, 2**64)],
    )
    def test_rounds_up(self, num: int, expected: int) -> None:
        assert next_power_of_two(num) == expected


class TestMaskWidth:
    """Test tag mask sizing."""

    @pytest.mark.parametrize(
        "count,expected",
        [(0, 0), (1, 0), (2, 1), (3, 2), (4, 2), (5, 3), (8, 3), (9, 4), (2**64, 64)],
    )
    def test_mask_width_for(self, count: int, expected: int) -> None:
        assert mask_width_for(count) == expected

    def test_low_mask(self) -> None:
        assert low_mask(0) == 0
        assert low_mask(2) == 0b11
        assert low_mask(WORD_BITS) == WORD_MASK

    def test_low_mask_bounds(self) -> None:
        with pytest.raises(ValueError, match="width must be"):
            low_mask(-1)
        with pytest.raises(ValueError, match="width must be"):
            low_mask(WORD_BITS + 1)


class TestWord:
    """Test 64-bit word checks."""

    def test_wrap_word_discards_overflow(self) -> None:
        assert wrap_word(WORD_MASK + 1) == 0
        assert wrap_word((1 << 65) | 21) == 21
        assert wrap_word(42) == 42

    def test_is_word(self) -> None:
        assert is_word(0)
        assert is_word(WORD_MASK)
        assert not is_word(WORD_MASK + 1)
        assert not is_word(-1)
        assert not is_word(True)
        assert not is_word(1.0)
        assert not is_word("1")
