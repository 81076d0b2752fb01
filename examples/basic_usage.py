#!/usr/bin/env python3
"""Basic usage example for sigcodec.

This example demonstrates:
1. Encoding signature bytes to 7-bit safe text
2. Storing the text in its class file (modified UTF-8) form
3. Decoding back to the original bytes
4. Handling corrupted input
"""

from __future__ import annotations

from sigcodec import (
    DecodeError,
    decode,
    encode,
    from_mutf8,
    is_valid_encoding,
    size_report,
    to_mutf8,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("sigcodec Basic Usage Example")
    print("=" * 60)
    print()

    payload = b"\x05\x00\x02\x0b\x01\x04Main\x01\x00\xff\xfe\x7f\x80"

    print("1. Sizing the payload...")
    report = size_report(len(payload))
    print(f"   Raw bytes: {report.raw_length}")
    print(f"   Encoded characters: {report.packed_length} (+{report.overhead})")
    print()

    print("2. Encoding...")
    text = encode(payload)
    print(f"   Code points: {[ord(c) for c in text]}")
    print(f"   7-bit clean: {is_valid_encoding(text)}")
    print()

    print("3. Storing as modified UTF-8...")
    stored = to_mutf8(text)
    print(f"   Stored bytes: {len(stored)}, zero bytes: {stored.count(0)}")
    print()

    print("4. Decoding...")
    decoded = decode(from_mutf8(stored))
    print(f"   Round-trip OK: {decoded == payload}")
    print()

    print("5. Rejecting corrupted input...")
    for bad in (text[:9], text[:2] + "é" + text[3:]):
        try:
            decode(bad)
        except DecodeError as e:
            print(f"   {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
