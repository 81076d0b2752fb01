"""7-bit repacking primitives.

Raw 8-bit bytes are laid out as a dense little-endian bit stream and cut into
7-bit cells, so every group of 7 raw bytes (56 bits) fills exactly 8 cells.
The high bit of every cell is always 0.

Raw byte ``i`` puts its low ``7 - i % 7`` bits into the top of cell
``start = (i // 7) * 8 + i % 7`` and its remaining high bits into the bottom
of cell ``start + 1``::

    raw:    |aaaaaaaa|bbbbbbbb|cccccccc| ...
    cells:  |0aaaaaaa|0bbbbbba|0cccccbb| ...
"""

from __future__ import annotations

GROUP_BYTES = 7
GROUP_CELLS = 8
CELL_MASK = 0x7F
BYTE_MASK = 0xFF


def _cell_position(index: int) -> tuple[int, int]:
    """Return ``(start_cell, offset)`` for raw byte ordinal ``index``."""
    offset = index % GROUP_BYTES
    return (index // GROUP_BYTES) * GROUP_CELLS + offset, offset


def pack_byte(buffer: bytearray, index: int, value: int) -> None:
    """Merge raw byte ``value`` at ordinal ``index`` into a packed buffer.

    Bits already written into the shared cells by neighbouring bytes are
    preserved.

    Args:
        buffer: Packed buffer, at least ``encoded_length(index + 1)`` cells long
        index: Ordinal of the raw byte being packed
        value: Raw byte value (0-255)
    """
    start, offset = _cell_position(index)
    low_bits = 7 - offset

    # Low bits go above the `offset` bits owned by the previous byte
    low_mask = CELL_MASK & ~((1 << offset) - 1)
    low = (value << offset) & low_mask
    buffer[start] = (buffer[start] & ~low_mask & CELL_MASK) + low

    # High bits start at bit 0 of the next cell, below the next byte's bits
    high_mask = CELL_MASK & ~((1 << (8 - low_bits)) - 1)
    high = (value >> low_bits) & ~high_mask & CELL_MASK
    buffer[start + 1] = (buffer[start + 1] & high_mask) + high


def unpack_byte(buffer: bytes | bytearray, index: int) -> int:
    """Extract raw byte ``index`` from a packed buffer.

    Inverse of pack_byte(). Bits of neighbouring bytes are shifted out.

    Args:
        buffer: Packed buffer (cells in the range 0-127)
        index: Ordinal of the raw byte to extract

    Returns:
        Raw byte value (0-255)
    """
    start, offset = _cell_position(index)
    low_bits = 7 - offset

    low = buffer[start] >> offset
    high = (buffer[start + 1] << low_bits) & BYTE_MASK
    return (high + low) & BYTE_MASK


class SevenBitPacker:
    """Packs raw bytes one at a time into 7-bit cells.

    The packed buffer is sized up front from the raw length, as every cell
    count is fixed by the number of bytes to be written.

    Example:
        >>> packer = SevenBitPacker(2)
        >>> packer.write_byte(0x00)
        >>> packer.write_byte(0xFF)
        >>> packer.to_bytes()
        b'\\x00~\\x03'
    """

    def __init__(self, raw_length: int) -> None:
        """Initialize a packer for ``raw_length`` raw bytes.

        Args:
            raw_length: Number of raw bytes that will be written

        Raises:
            ValueError: If raw_length is negative
        """
        # sizing imports the group constants from this module
        from ..utils.sizing import encoded_length

        self._raw_length = raw_length
        self._buffer = bytearray(encoded_length(raw_length))
        self._position = 0

    def write_byte(self, value: int) -> None:
        """Pack the next raw byte.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value is not a byte
            IndexError: If all raw_length bytes have already been written
        """
        if value < 0 or value > BYTE_MASK:
            raise ValueError(f"write_byte requires a value in 0-255, got {value}")
        if self._position >= self._raw_length:
            raise IndexError(f"Packer is full: sized for {self._raw_length} bytes")

        pack_byte(self._buffer, self._position, value)
        self._position += 1

    def write_bytes(self, data: bytes) -> None:
        """Pack a run of raw bytes.

        Args:
            data: Bytes to pack
        """
        for byte in data:
            self.write_byte(byte)

    def byte_length(self) -> int:
        """Return the number of raw bytes written so far."""
        return self._position

    def to_bytes(self) -> bytes:
        """Return the packed cells.

        Cells belonging to bytes not yet written are left as zero.

        Returns:
            Packed buffer, every value in 0-127
        """
        return bytes(self._buffer)


class SevenBitUnpacker:
    """Unpacks raw bytes from a buffer of 7-bit cells.

    Example:
        >>> unpacker = SevenBitUnpacker(b"\\x00~\\x03")
        >>> unpacker.read_bytes(2)
        b'\\x00\\xff'
    """

    def __init__(self, data: bytes) -> None:
        """Initialize an unpacker over packed cells.

        Args:
            data: Packed buffer

        Raises:
            InvalidLengthError: If no raw length maps onto len(data) cells
            ValueError: If a cell has its high bit set
        """
        from ..utils.sizing import decoded_length

        for position, cell in enumerate(data):
            if cell > CELL_MASK:
                raise ValueError(f"Cell {position} is not 7-bit: 0x{cell:02X}")

        self._data = bytes(data)
        self._raw_length = decoded_length(len(self._data))
        self._position = 0

    def read_byte(self) -> int:
        """Unpack the next raw byte.

        Returns:
            Byte value (0-255)

        Raises:
            IndexError: If every raw byte has already been read
        """
        if self._position >= self._raw_length:
            raise IndexError("Attempted to read past end of packed buffer")

        value = unpack_byte(self._data, self._position)
        self._position += 1
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Unpack ``num_bytes`` raw bytes.

        Raises:
            IndexError: If not enough raw bytes remain
        """
        if num_bytes > self.bytes_remaining():
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )
        return bytes(self.read_byte() for _ in range(num_bytes))

    def bytes_remaining(self) -> int:
        """Return the number of raw bytes not yet read."""
        return self._raw_length - self._position

    def position(self) -> int:
        """Return the ordinal of the next raw byte to read."""
        return self._position
