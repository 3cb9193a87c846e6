#!/usr/bin/env python3
"""Basic usage example for cborvariant.

This example demonstrates:
1. Building a value tree with the Pydantic models
2. Encoding to CBOR
3. Decoding back to a value tree
4. Calculating encoded sizes
"""

from __future__ import annotations

import json

from cborvariant import (
    Array,
    Bytes,
    Float,
    Integer,
    Map,
    Null,
    Text,
    decode,
    encode,
    encoded_size,
    to_debug_string,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("cborvariant Basic Usage Example")
    print("=" * 60)
    print()

    # Build a value
    print("1. Building a sensor report...")
    report = Map(
        entries={
            Text(value="sensor"): Text(value="thermistor-2"),
            Text(value="celsius"): Float(value=21.375),
            Text(value="samples"): Array(
                items=[Integer(value=2137), Integer(value=2140), Integer(value=-3)]
            ),
            Text(value="calibration"): Bytes(value=b"\x0f\xa0"),
            Text(value="error"): Null(),
        }
    )
    print(f"   {to_debug_string(report)}")
    print()

    # Analyze sizes
    print("2. Analyzing entry sizes...")
    for key, value in report.entries.items():
        print(f"   {key.value}: {encoded_size(value)} bytes")
    print(f"   Total: {encoded_size(report)} bytes")
    print()

    # Encode
    print("3. Encoding to CBOR...")
    encoded_data = encode(report)
    print(f"   Encoded size: {len(encoded_data)} bytes")
    print(f"   Hex: {encoded_data.hex()}")
    print()

    # Decode
    print("4. Decoding from CBOR...")
    decoded = decode(encoded_data)
    print(f"   {to_debug_string(decoded)}")
    print()

    # Verify round-trip
    print("5. Verifying round-trip...")
    if decoded == report:
        print("   ✓ Round-trip successful! Values match.")
    else:
        print("   ✗ Round-trip failed! Values don't match.")
    print()

    # Compare to JSON
    print("6. Comparing to JSON encoding...")
    plain = decoded.to_python()
    plain["calibration"] = plain["calibration"].hex()
    json_bytes = json.dumps(plain).encode("utf-8")
    print(f"   CBOR size: {len(encoded_data)} bytes")
    print(f"   JSON size: {len(json_bytes)} bytes")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
