"""Zero-avoidance pass between packed cells and encoded text.

Each packed cell ``b`` becomes the character ``(b + 1) & 0x7F``, so cell 0
(the most common value in signature data) never turns into U+0000.

Cell 0x7F wraps round to U+0000. The reference encoder emits it as is and
leaves the class file's modified UTF-8 to store it as ``0xC0 0x80`` (see
:mod:`sigcodec.container.mutf8`); no two-unit escape is produced here, and
none is expected when reading.
"""

from __future__ import annotations

from ..exceptions import InvalidCharacterError
from .bitpack import CELL_MASK


def avoid_zero(packed: bytes) -> str:
    """Shift every packed cell up by one, modulo 128.

    Args:
        packed: Packed cells (0-127)

    Returns:
        Encoded text, one character per cell

    Example:
        >>> avoid_zero(b"\\x00\\x01\\x7e")
        '\\x01\\x02\\x7f'
    """
    return "".join(chr((cell + 1) & CELL_MASK) for cell in packed)


def restore_zero(text: str) -> bytes:
    """Undo avoid_zero(), validating the character range.

    Args:
        text: Encoded text

    Returns:
        Packed cells (0-127)

    Raises:
        InvalidCharacterError: If any character has a code point >= 128
    """
    packed = bytearray(len(text))
    for position, char in enumerate(text):
        code = ord(char)
        if code > CELL_MASK:
            raise InvalidCharacterError(position, char)
        packed[position] = (code - 1) & CELL_MASK
    return bytes(packed)
