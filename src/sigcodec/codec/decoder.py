"""Decoder from 7-bit safe text back to raw bytes.

This module provides decode(), the exact inverse of encode(), and the
is_valid_encoding() character-range check.
"""

from __future__ import annotations

import logging

from ..exceptions import DecodeError
from .bitpack import CELL_MASK, SevenBitUnpacker
from .zero import restore_zero

log = logging.getLogger(__name__)


def is_valid_encoding(text: str) -> bool:
    """Check that every character of ``text`` has a code point below 128.

    This only checks the character range; decode() can still reject text of
    an impossible length.

    Args:
        text: Candidate encoded text

    Returns:
        True if the text uses only 7-bit characters
    """
    return all(ord(char) <= CELL_MASK for char in text)


def decode(text: str) -> bytes:
    """Decode text produced by encode() back to the original bytes.

    The whole input is validated before any output is produced; there is no
    partial result.

    Args:
        text: Encoded text

    Returns:
        Decoded raw bytes

    Raises:
        DecodeError: If text is not a str
        InvalidCharacterError: If a character has a code point >= 128
        InvalidLengthError: If len(text) % 8 == 1

    Examples:
        ```python
        from sigcodec import InvalidLengthError, decode, encode

        assert decode(encode(b"\\xff")) == b"\\xff"

        try:
            decode("\\x01" * 9)
        except InvalidLengthError as e:
            print(f"Rejected length {e.length}")
        ```
    """
    if not isinstance(text, str):
        raise DecodeError(f"decode requires a str, got {type(text).__name__}")

    try:
        packed = restore_zero(text)
        unpacker = SevenBitUnpacker(packed)
    except DecodeError as e:
        log.debug("Rejected encoded text of length %d: %s", len(text), e)
        raise

    return unpacker.read_bytes(unpacker.bytes_remaining())
