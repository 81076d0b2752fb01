"""Length arithmetic relating raw and packed buffers.

Every 7 raw bytes occupy exactly 8 cells. A trailing partial group of ``r``
bytes (1-6) needs ``r + 1`` cells, so a packed length leaving exactly one
cell over a multiple of 8 can never occur.
"""

from __future__ import annotations

from ..codec.bitpack import GROUP_BYTES, GROUP_CELLS
from ..exceptions import InvalidLengthError
from ..models.report import SizeReport


def encoded_length(raw_length: int) -> int:
    """Calculate the packed length (and encoded text length) for a raw length.

    Args:
        raw_length: Number of raw bytes

    Returns:
        Number of 7-bit cells

    Raises:
        ValueError: If raw_length is negative

    Example:
        >>> encoded_length(7)
        8
        >>> encoded_length(10)
        12
    """
    if raw_length < 0:
        raise ValueError(f"raw_length must be non-negative, got {raw_length}")

    rem = raw_length % GROUP_BYTES
    return (raw_length // GROUP_BYTES) * GROUP_CELLS + (rem + 1 if rem > 0 else 0)


def decoded_length(packed_length: int) -> int:
    """Calculate the raw length held by a packed buffer.

    Args:
        packed_length: Number of 7-bit cells

    Returns:
        Number of raw bytes

    Raises:
        ValueError: If packed_length is negative
        InvalidLengthError: If packed_length % 8 == 1

    Example:
        >>> decoded_length(8)
        7
        >>> decoded_length(12)
        10
    """
    if packed_length < 0:
        raise ValueError(f"packed_length must be non-negative, got {packed_length}")

    rem = packed_length % GROUP_CELLS
    if rem == 1:
        raise InvalidLengthError(packed_length)
    return (packed_length // GROUP_CELLS) * GROUP_BYTES + (rem - 1 if rem > 0 else 0)


def size_report(raw_length: int) -> SizeReport:
    """Describe how ``raw_length`` raw bytes map onto packed cells.

    Raises:
        ValueError: If raw_length is negative
    """
    packed_length = encoded_length(raw_length)
    return SizeReport(
        raw_length=raw_length,
        packed_length=packed_length,
        full_groups=raw_length // GROUP_BYTES,
        remainder=raw_length % GROUP_BYTES,
        overhead=packed_length - raw_length,
    )
