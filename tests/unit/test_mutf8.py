"""Unit tests for the modified UTF-8 container form."""

from __future__ import annotations

import pytest

from sigcodec import ContainerError, decode, encode, from_mutf8, to_mutf8


class TestToMutf8:
    """Test to_mutf8()."""

    def test_plain_ascii(self) -> None:
        """Test units 1-127 are single bytes."""
        assert to_mutf8("\x01AB\x7f") == b"\x01AB\x7f"

    def test_zero_unit(self) -> None:
        """Test U+0000 becomes 0xC0 0x80."""
        assert to_mutf8("\x00\x02") == b"\xc0\x80\x02"

    def test_no_zero_bytes(self) -> None:
        """Test encoded 0xFF data is stored without zero bytes."""
        data = to_mutf8(encode(b"\xff" * 7))

        assert b"\x00" not in data
        assert data == b"\xc0\x80" * 8

    def test_rejects_8bit(self) -> None:
        """Test code points >= 128 are rejected."""
        with pytest.raises(ContainerError, match="position 1"):
            to_mutf8("\x01é")

    def test_empty(self) -> None:
        """Test empty text."""
        assert to_mutf8("") == b""


class TestFromMutf8:
    """Test from_mutf8()."""

    def test_inverse(self) -> None:
        """Test from_mutf8() undoes to_mutf8()."""
        text = "".join(chr(i) for i in range(128))
        assert from_mutf8(to_mutf8(text)) == text

    def test_nul_sequence(self) -> None:
        """Test 0xC0 0x80 reads back as U+0000."""
        assert from_mutf8(b"\x02\xc0\x80") == "\x02\x00"

    def test_raw_zero(self) -> None:
        """Test raw zero bytes are rejected."""
        with pytest.raises(ContainerError, match="zero byte"):
            from_mutf8(b"\x01\x00")

    def test_truncated_sequence(self) -> None:
        """Test a dangling 0xC0 is rejected."""
        with pytest.raises(ContainerError, match="Truncated"):
            from_mutf8(b"\x01\xc0")

    @pytest.mark.parametrize("data", [b"\xc3\xa9", b"\x80", b"\xc0\x81"])
    def test_unsupported_bytes(self, data: bytes) -> None:
        """Test other 8-bit bytes are rejected."""
        with pytest.raises(ContainerError, match="Unsupported"):
            from_mutf8(data)

    def test_full_pipeline(self, sample_payload: bytes) -> None:
        """Test raw -> text -> container -> text -> raw."""
        stored = to_mutf8(encode(sample_payload))
        assert decode(from_mutf8(stored)) == sample_payload
