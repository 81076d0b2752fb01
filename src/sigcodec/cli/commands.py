"""CLI command implementations."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO

from ..codec import decode, encode
from ..container import from_mutf8, to_mutf8
from ..exceptions import DecodeError
from ..utils.sizing import size_report

log = logging.getLogger(__name__)


def read_input(source: str) -> bytes:
    """Read all bytes from a file path, or from stdin when source is ``-``."""
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _read_text(source: str, mutf8: bool) -> str:
    data = read_input(source)
    if mutf8:
        return from_mutf8(data)
    # latin-1 maps bytes 1:1 so decode() reports out-of-range characters
    return data.decode("latin-1")


def encode_file(source: str, out: BinaryIO, *, mutf8: bool = False) -> None:
    """Encode raw bytes from ``source`` and write the text to ``out``.

    Args:
        source: Input file path or ``-``
        out: Binary output stream
        mutf8: Write modified UTF-8 container bytes instead of plain ASCII
    """
    raw = read_input(source)
    text = encode(raw)
    log.info("Encoded %d bytes from %s into %d characters", len(raw), source, len(text))
    out.write(to_mutf8(text) if mutf8 else text.encode("ascii"))


def decode_file(source: str, out: BinaryIO, *, mutf8: bool = False) -> None:
    """Decode encoded text from ``source`` and write the raw bytes to ``out``.

    Raises:
        DecodeError: If the text is not a valid encoding
        ContainerError: If mutf8 is set and the input is not modified UTF-8
    """
    raw = decode(_read_text(source, mutf8))
    log.info("Decoded %d bytes from %s", len(raw), source)
    out.write(raw)


def check_file(source: str, *, mutf8: bool = False) -> bool:
    """Report whether ``source`` holds a decodable encoding.

    Returns:
        True if the input decodes cleanly
    """
    text = _read_text(source, mutf8)
    try:
        raw = decode(text)
    except DecodeError as e:
        print(f"invalid: {e}")
        return False

    print(f"valid: {len(text)} characters, {len(raw)} raw bytes")
    return True


def print_sizes(raw_length: int) -> None:
    """Print the size report for a raw length as JSON."""
    print(size_report(raw_length).model_dump_json(indent=2))
