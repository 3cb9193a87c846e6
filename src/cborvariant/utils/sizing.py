"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of values
without actually encoding them.
"""

from __future__ import annotations

from ..codec.encoder import key_bytes, text_bytes
from ..codec.header import argument_size
from ..exceptions import EncodeError
from ..models.value import Array, Bytes, CborValue, Float, Integer, Map, Null, Text


def header_size(argument: int) -> int:
    """Return the size in bytes of a header carrying argument.

    Example:
        >>> header_size(23), header_size(24), header_size(256), header_size(65536)
        (1, 2, 3, 5)
    """
    return 1 + argument_size(argument)


def encoded_size(value: CborValue) -> int:
    """Calculate the encoded size of a value in bytes.

    The result always equals ``len(encode(value))``.

    Args:
        value: Value to measure

    Returns:
        Size in bytes

    Raises:
        EncodeError: If value cannot be encoded

    Example:
        >>> encoded_size(Array(items=[Integer(value=1), Integer(value=500)]))
        5  # 1 header + 1 + 3
    """
    if isinstance(value, Integer):
        magnitude = value.value if value.value >= 0 else -value.value - 1
        return header_size(magnitude)
    if isinstance(value, Float):
        return 9
    if isinstance(value, Bytes):
        return header_size(len(value.value)) + len(value.value)
    if isinstance(value, Text):
        length = len(text_bytes(value.value))
        return header_size(length) + length
    if isinstance(value, Array):
        return header_size(len(value.items)) + sum(encoded_size(item) for item in value.items)
    if isinstance(value, Map):
        total = header_size(len(value.entries))
        for key, item in value.entries.items():
            length = len(key_bytes(key))
            total += header_size(length) + length + encoded_size(item)
        return total
    if isinstance(value, Null):
        return 1
    raise EncodeError(f"Cannot size {type(value).__name__}: not a CBOR value")
