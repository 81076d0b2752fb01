"""Modified UTF-8 container form of encoded text.

Class file strings are stored as modified UTF-8, in which U+0000 is written
as the two bytes ``0xC0 0x80`` and every other code point below 128 as a
single byte. Stored this way, encoded text never contains a zero byte.

Only the 7-bit alphabet that encode() produces is supported.
"""

from __future__ import annotations

from ..exceptions import ContainerError

NUL_SEQUENCE = b"\xc0\x80"


def to_mutf8(text: str) -> bytes:
    """Convert encoded text to modified UTF-8 bytes.

    Args:
        text: Encoded text (code points 0-127)

    Returns:
        Container bytes, free of zero bytes

    Raises:
        ContainerError: If a character has a code point >= 128

    Example:
        >>> to_mutf8("\\x00\\x02")
        b'\\xc0\\x80\\x02'
    """
    result = bytearray()
    for position, char in enumerate(text):
        code = ord(char)
        if code == 0:
            result.extend(NUL_SEQUENCE)
        elif code < 0x80:
            result.append(code)
        else:
            raise ContainerError(
                f"Character U+{code:04X} at position {position} is outside the 7-bit alphabet"
            )
    return bytes(result)


def from_mutf8(data: bytes) -> str:
    """Convert modified UTF-8 container bytes back to encoded text.

    Args:
        data: Container bytes

    Returns:
        Encoded text

    Raises:
        ContainerError: If data holds a raw zero byte, a truncated or unknown
            two-byte sequence, or any other byte >= 0x80

    Example:
        >>> from_mutf8(b"\\xc0\\x80\\x02")
        '\\x00\\x02'
    """
    chars = []
    position = 0
    while position < len(data):
        byte = data[position]
        if byte == 0:
            raise ContainerError(f"Raw zero byte at offset {position}")
        if byte < 0x80:
            chars.append(chr(byte))
            position += 1
        elif data[position : position + 2] == NUL_SEQUENCE:
            chars.append("\x00")
            position += 2
        elif byte == NUL_SEQUENCE[0] and position + 1 == len(data):
            raise ContainerError(f"Truncated two-byte sequence at offset {position}")
        else:
            raise ContainerError(f"Unsupported byte 0x{byte:02X} at offset {position}")
    return "".join(chars)
