"""Exception hierarchy for sigcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from SigcodecError for easy catching of any sigcodec-specific error.
"""

from __future__ import annotations


class SigcodecError(Exception):
    """Base exception for all sigcodec errors."""

    pass


class EncodeError(SigcodecError):
    """Raised when encoding fails.

    The codec itself is total over byte sequences, so this only signals a
    caller error:
        - Input is not bytes-like (e.g. ``str`` or ``int``)
    """

    pass


class DecodeError(SigcodecError):
    """Raised when decoding encoded text fails.

    Callers should treat any DecodeError as "do not trust this payload".

    Examples:
        - Input is not a ``str``
        - Character outside the 7-bit range (see InvalidCharacterError)
        - Truncated or padded text (see InvalidLengthError)
    """

    pass


class InvalidCharacterError(DecodeError):
    """Raised when encoded text contains a code point >= 128.

    The text was not produced by this codec or was corrupted in transit.

    Attributes:
        position: Index of the first offending character
        char: The offending character
    """

    def __init__(self, position: int, char: str) -> None:
        self.position = position
        self.char = char
        super().__init__(
            f"Invalid character {char!r} (U+{ord(char):04X}) at position {position}: "
            "encoded text must only contain code points below 128"
        )


class InvalidLengthError(DecodeError):
    """Raised when the encoded length cannot come from any raw buffer.

    A packed length whose remainder modulo 8 is exactly 1 leaves a single
    7-bit cell, which cannot hold a whole raw byte.

    Attributes:
        length: The rejected packed length
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Encoded length {length} is not valid for encoded data "
            f"({length} % 8 == 1 leaves a lone 7-bit cell)"
        )


class ContainerError(SigcodecError):
    """Raised when converting to or from the modified UTF-8 container form fails.

    Examples:
        - Text contains a code point >= 128
        - Container bytes contain a raw zero byte
        - Dangling or malformed two-byte sequence
    """

    pass
