"""Encoder from raw bytes to 7-bit safe text.

This module provides the encode() function: 8-to-7 bit repacking followed by
the zero-avoidance pass.
"""

from __future__ import annotations

import logging

from ..exceptions import EncodeError
from .bitpack import SevenBitPacker
from .zero import avoid_zero

log = logging.getLogger(__name__)


def encode(raw: bytes | bytearray | memoryview) -> str:
    """Encode raw bytes into text whose code points are all below 128.

    Args:
        raw: Bytes to encode (any content, any length)

    Returns:
        Encoded text of length ``encoded_length(len(raw))``

    Raises:
        EncodeError: If raw is not bytes-like

    Examples:
        ```python
        from sigcodec import decode, encode

        text = encode(b"\\x01\\x02\\x03\\x04\\x05\\x06\\x07")
        assert len(text) == 8
        assert decode(text) == b"\\x01\\x02\\x03\\x04\\x05\\x06\\x07"
        ```
    """
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise EncodeError(f"encode requires a bytes-like object, got {type(raw).__name__}")

    data = bytes(raw)
    packer = SevenBitPacker(len(data))
    packer.write_bytes(data)
    packed = packer.to_bytes()

    log.debug("Encoded %d raw bytes into %d cells", len(data), len(packed))
    return avoid_zero(packed)
