"""Unit tests for primitive payload adapters."""

from __future__ import annotations

import pytest

from enumcodec import U8, U16, U32, U64, USIZE, PayloadCodec, UInt


class TestUInt:
    """Test UInt encode/decode."""

    def test_widths(self) -> None:
        assert [u.bits for u in (U8, U16, U32, U64, USIZE)] == [8, 16, 32, 64, 64]
        assert U16.max_value == 0xFFFF

    def test_encode_is_identity(self) -> None:
        assert U8.encode_payload(200) == 200
        assert U64.encode_payload(2**64 - 1) == 2**64 - 1

    def test_decode_truncates(self) -> None:
        assert U8.decode(0x1FF) == 0xFF
        assert U16.try_decode(0x12345) == 0x2345
        assert U32.decode(2**40 + 7) == 7

    def test_decode_always_succeeds(self) -> None:
        assert U8.try_decode(0) == 0
        assert U64.try_decode(2**64 - 1) == 2**64 - 1

    def test_validate_payload(self) -> None:
        assert U8.validate_payload(255) == 255

        with pytest.raises(ValueError, match="out of bounds"):
            U8.validate_payload(256)
        with pytest.raises(ValueError, match="out of bounds"):
            U8.validate_payload(-1)
        with pytest.raises(ValueError, match="expected int"):
            U8.validate_payload(True)
        with pytest.raises(ValueError, match="expected int"):
            U8.validate_payload("1")

    @pytest.mark.parametrize("bits", [0, 65])
    def test_invalid_width(self, bits: int) -> None:
        with pytest.raises(ValueError, match="bits must be"):
            UInt(bits)

    def test_satisfies_payload_protocol(self) -> None:
        assert isinstance(U8, PayloadCodec)
        assert repr(U32) == "UInt(32)"
        assert UInt(8) == U8
