"""sigcodec: 7-bit safe byte codec for embedded signature data

A Python library for the SIP-10 byte encoding used to store pickled Scala
signatures (the ``ScalaSignature`` annotation) inside JVM class files.
Arbitrary bytes are repacked into 7-bit cells and shifted by one so the
result can live in a class file string.

Key Features:
- 8-to-7 bit repacking with exact length arithmetic
- Zero-avoidance pass kept separate from repacking
- Byte-for-byte compatible with the reference encoder
- Distinct errors for bad characters and impossible lengths

Quick Start:
    >>> from sigcodec import decode, encode
    >>>
    >>> text = encode(b"\\x05\\x00\\xff")
    >>> decode(text)
    b'\\x05\\x00\\xff'
"""

from __future__ import annotations

from .codec import decode, encode, is_valid_encoding
from .container import from_mutf8, to_mutf8
from .exceptions import (
    ContainerError,
    DecodeError,
    EncodeError,
    InvalidCharacterError,
    InvalidLengthError,
    SigcodecError,
)
from .models import SizeReport
from .utils import decoded_length, encoded_length, size_report

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "is_valid_encoding",
    # Sizing
    "encoded_length",
    "decoded_length",
    "size_report",
    "SizeReport",
    # Container form
    "to_mutf8",
    "from_mutf8",
    # Exceptions
    "SigcodecError",
    "EncodeError",
    "DecodeError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "ContainerError",
    # Version
    "__version__",
]
