"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing (a pickled-signature-like header)."""
    return b"\x05\x00\x02\x0b\x01\x04Main\x01\x00\x01\x08\x00\xff\xfe\x7f\x80"


@pytest.fixture
def group_payload() -> bytes:
    """Exactly one group of 7 raw bytes."""
    return bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07])


@pytest.fixture
def group_encoding() -> str:
    """Known encoding of group_payload."""
    return "\x02\x05\r!QAB\x04"
