#!/usr/bin/env python3
"""Streaming example for cborvariant.

This example demonstrates:
1. Appending several items to one buffer
2. Saving the buffer and loading it with read_file()
3. Walking the items with an explicit cursor
4. Handling decode errors on damaged input
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from cborvariant import (
    DecodeError,
    decode_from,
    encode_onto,
    from_python,
    iter_decode,
    read_file,
    to_debug_string,
)


def main() -> None:
    """Run the streaming example."""
    print("=" * 60)
    print("cborvariant Streaming Example")
    print("=" * 60)
    print()

    # Build a log of records
    print("1. Encoding log records...")
    buffer = bytearray()
    for seq in range(5):
        record = from_python({"seq": seq, "level": "info", "elapsed_s": seq * 0.25})
        encode_onto(record, buffer)
    print(f"   {len(buffer)} bytes for 5 records")
    print()

    # Save and load
    print("2. Saving and loading...")
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "log.cbor"
        path.write_bytes(buffer)
        data = read_file(path)
    print(f"   Loaded {len(data)} bytes")
    print()

    # Walk with a cursor
    print("3. Walking records with decode_from()...")
    offset = 0
    while offset < len(data):
        start = offset
        record, offset = decode_from(data, offset)
        print(f"   @{start:3d}: {to_debug_string(record)}")
    print()

    # Damaged input
    print("4. Decoding a truncated copy...")
    damaged = data[:-3]
    try:
        for record in iter_decode(damaged):
            print(f"   ok: {to_debug_string(record)}")
    except DecodeError as e:
        print(f"   ✗ {type(e).__name__} at offset {e.offset}: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
