"""7-bit codec for sigcodec.

This module provides encoding and decoding between arbitrary bytes and text
using only code points below 128.
"""

from __future__ import annotations

from .bitpack import SevenBitPacker, SevenBitUnpacker, pack_byte, unpack_byte
from .decoder import decode, is_valid_encoding
from .encoder import encode
from .zero import avoid_zero, restore_zero

__all__ = [
    "encode",
    "decode",
    "is_valid_encoding",
    "avoid_zero",
    "restore_zero",
    "pack_byte",
    "unpack_byte",
    "SevenBitPacker",
    "SevenBitUnpacker",
]
