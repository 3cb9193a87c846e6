"""CBOR encoder.

This module provides the encode() and encode_onto() functions that convert a
Value tree to CBOR bytes. Headers always use the shortest form and floats are
always written at double precision.
"""

from __future__ import annotations

import struct

from ..exceptions import EncodeError
from ..models.value import Array, Bytes, CborValue, Float, Integer, Map, Null, Text
from .header import (
    FLOAT64_BYTE,
    MAJOR_ARRAY,
    MAJOR_BYTES,
    MAJOR_MAP,
    MAJOR_NEGATIVE,
    MAJOR_TEXT,
    MAJOR_UNSIGNED,
    NULL_BYTE,
    encode_header,
)


def encode(value: CborValue) -> bytes:
    """Encode a value to CBOR.

    Args:
        value: Value to encode

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If value is not a CborValue or an integer magnitude
            needs more than 32 bits

    Examples:
        ```python
        from cborvariant import Array, Integer, Null, Text, encode

        encode(Integer(value=10))        # b"\\x0a"
        encode(Integer(value=-1))        # b"\\x20"
        encode(Text(value="a"))          # b"\\x61\\x61"
        encode(Array(items=[Integer(value=1), Integer(value=2)]))  # b"\\x82\\x01\\x02"
        encode(Null())                   # b"\\xf6"
        ```
    """
    buffer = bytearray()
    encode_onto(value, buffer)
    return bytes(buffer)


def encode_onto(value: CborValue, buffer: bytearray) -> None:
    """Append the encoding of value onto buffer.

    Calls compose, so several items can be written back to back to build a
    stream that iter_decode() reads back.

    Args:
        value: Value to encode
        buffer: Output buffer, extended in place

    Raises:
        EncodeError: If value cannot be encoded
    """
    # Integers
    if isinstance(value, Integer):
        if value.value >= 0:
            _encode_argument(MAJOR_UNSIGNED, value.value, buffer)
        else:
            _encode_argument(MAJOR_NEGATIVE, -value.value - 1, buffer)
        return

    # https://tools.ietf.org/html/rfc7049#section-2.3
    if isinstance(value, Float):
        buffer.append(FLOAT64_BYTE)
        buffer.extend(struct.pack(">d", value.value))
        return

    if isinstance(value, Bytes):
        encode_header(MAJOR_BYTES, len(value.value), buffer)
        buffer.extend(value.value)
        return

    if isinstance(value, Text):
        _encode_text(text_bytes(value.value), buffer)
        return

    if isinstance(value, Array):
        encode_header(MAJOR_ARRAY, len(value.items), buffer)
        for item in value.items:
            encode_onto(item, buffer)
        return

    if isinstance(value, Map):
        encode_header(MAJOR_MAP, len(value.entries), buffer)
        for key, item in value.entries.items():
            # Keys are always written as text strings
            _encode_text(key_bytes(key), buffer)
            encode_onto(item, buffer)
        return

    if isinstance(value, Null):
        buffer.append(NULL_BYTE)
        return

    raise EncodeError(f"Cannot encode {type(value).__name__}: not a CBOR value")


def text_bytes(text: str) -> bytes:
    """Return the UTF-8 bytes of text, restoring any surrogate-escaped raw bytes."""
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError as e:
        raise EncodeError(f"Text cannot be encoded as UTF-8: {e}") from e


def key_bytes(key: CborValue) -> bytes:
    """Return the raw bytes a map key is written with."""
    if isinstance(key, Text):
        return text_bytes(key.value)
    if isinstance(key, Bytes):
        return key.value
    raise EncodeError(f"Map keys must be Text or Bytes, got {type(key).__name__}")


def _encode_text(data: bytes, buffer: bytearray) -> None:
    encode_header(MAJOR_TEXT, len(data), buffer)
    buffer.extend(data)


def _encode_argument(major: int, magnitude: int, buffer: bytearray) -> None:
    try:
        encode_header(major, magnitude, buffer)
    except EncodeError as e:
        raise EncodeError(f"Integer out of range for 32-bit CBOR encoding: {e}") from e
