"""End-to-end integration tests."""

from __future__ import annotations

import logging

import pytest

from sigcodec import (
    DecodeError,
    InvalidLengthError,
    SigcodecError,
    decode,
    encode,
    from_mutf8,
    is_valid_encoding,
    size_report,
    to_mutf8,
)


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_signature_workflow(self, sample_payload: bytes) -> None:
        """Test storing and loading a signature payload."""
        # 1. Encode the pickled bytes
        text = encode(sample_payload)
        assert len(text) == size_report(len(sample_payload)).packed_length

        # 2. Store in the class file string form
        stored = to_mutf8(text)
        assert b"\x00" not in stored

        # 3. Load it back and validate before decoding
        loaded = from_mutf8(stored)
        assert is_valid_encoding(loaded)

        # 4. Decode
        assert decode(loaded) == sample_payload

    def test_large_payload(self) -> None:
        """Test a payload spanning many groups."""
        payload = bytes(range(256)) * 40
        text = encode(payload)

        assert len(text) == size_report(len(payload)).packed_length
        assert decode(text) == payload

    def test_truncated_text(self, sample_payload: bytes) -> None:
        """Test truncation is reported, not silently decoded."""
        text = encode(sample_payload)
        # Keep 8k + 1 characters
        truncated = text[: ((len(text) - 1) // 8) * 8 + 1]

        with pytest.raises(InvalidLengthError):
            decode(truncated)

    def test_corrupted_text(self, sample_payload: bytes) -> None:
        """Test 8-bit corruption is reported."""
        text = encode(sample_payload)
        corrupted = text[:3] + chr(ord(text[3]) | 0x80) + text[4:]

        assert not is_valid_encoding(corrupted)
        with pytest.raises(DecodeError):
            decode(corrupted)

    def test_single_base_exception(self) -> None:
        """Test all failures can be caught as SigcodecError."""
        for bad in ("\x01", "\x01\xff"):
            with pytest.raises(SigcodecError):
                decode(bad)

        with pytest.raises(SigcodecError):
            encode("not bytes")  # type: ignore[arg-type]

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test decode failures are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="sigcodec"):
            with pytest.raises(InvalidLengthError):
                decode("\x01" * 9)

        assert any("Rejected encoded text of length 9" in r.message for r in caplog.records)
