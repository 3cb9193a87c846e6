"""CBOR initial byte and argument encoding.

Every item starts with one byte: the top 3 bits are the major type and the
low 5 bits are the additional information. Additional values 0-23 carry the
argument directly; 24, 25 and 26 say that 1, 2 or 4 big-endian bytes follow.

https://tools.ietf.org/html/rfc7049#section-2
"""

from __future__ import annotations

import struct

from ..exceptions import EncodeError, UnsupportedFeatureError
from .reader import ByteReader

# Major types
MAJOR_UNSIGNED = 0
MAJOR_NEGATIVE = 1
MAJOR_BYTES = 2
MAJOR_TEXT = 3
MAJOR_ARRAY = 4
MAJOR_MAP = 5
MAJOR_TAG = 6
MAJOR_SIMPLE = 7

# Additional information values
ADDITIONAL_UINT8 = 24
ADDITIONAL_UINT16 = 25
ADDITIONAL_UINT32 = 26
ADDITIONAL_UINT64 = 27
ADDITIONAL_INDEFINITE = 31

# Major type 7 uses the same slots for floats and simple values
SIMPLE_NULL = 22
SIMPLE_FLOAT32 = ADDITIONAL_UINT32
SIMPLE_FLOAT64 = ADDITIONAL_UINT64

NULL_BYTE = 0xF6
FLOAT64_BYTE = 0xFB

MAX_ARGUMENT = 0xFFFFFFFF

_ARGUMENT_SIZES = {ADDITIONAL_UINT8: 1, ADDITIONAL_UINT16: 2, ADDITIONAL_UINT32: 4}
_ARGUMENT_FORMATS = {1: ">BB", 2: ">BH", 4: ">BI"}


def initial_byte(major: int, additional: int) -> int:
    """Combine a major type and additional information into a header byte."""
    return ((major & 0x07) << 5) | (additional & 0x1F)


def split_initial_byte(byte: int) -> tuple[int, int]:
    """Split a header byte into (major, additional)."""
    return (byte >> 5) & 0x07, byte & 0x1F


def argument_size(value: int) -> int:
    """Return how many bytes follow the header byte for an argument.

    Always the shortest form: 0 below 24, then 1, 2 or 4 bytes.

    Raises:
        EncodeError: If value is negative or needs more than 32 bits
    """
    if value < 0 or value > MAX_ARGUMENT:
        raise EncodeError(f"Header argument must be 0-{MAX_ARGUMENT}, got {value}")
    if value < 24:
        return 0
    if value < 0x100:
        return 1
    if value < 0x10000:
        return 2
    return 4


def encode_header(major: int, value: int, buffer: bytearray) -> None:
    """Append a header for major type carrying value, in its shortest form.

    Args:
        major: Major type (0-7)
        value: Unsigned argument (length, count, tag or integer magnitude)
        buffer: Output buffer to append to

    Raises:
        EncodeError: If value needs more than 32 bits

    Example:
        >>> buffer = bytearray()
        >>> encode_header(MAJOR_TEXT, 300, buffer)
        >>> bytes(buffer)
        b'y\\x01,'
    """
    size = argument_size(value)
    if size == 0:
        buffer.append(initial_byte(major, value))
        return

    additional = {1: ADDITIONAL_UINT8, 2: ADDITIONAL_UINT16, 4: ADDITIONAL_UINT32}[size]
    buffer.extend(struct.pack(_ARGUMENT_FORMATS[size], initial_byte(major, additional), value))


def read_argument(reader: ByteReader, additional: int) -> int:
    """Read the unsigned argument announced by additional.

    Args:
        reader: Reader positioned just after the header byte
        additional: Low 5 bits of the header byte

    Returns:
        The decoded argument

    Raises:
        TruncatedInputError: If the argument bytes are missing
        UnsupportedFeatureError: For 64-bit, indefinite-length or reserved forms
    """
    if additional < 24:
        return additional

    size = _ARGUMENT_SIZES.get(additional)
    if size is not None:
        return reader.read_uint(size)

    offset = reader.position() - 1
    if additional == ADDITIONAL_UINT64:
        raise UnsupportedFeatureError(
            "64-bit integer arguments are not supported", offset=offset
        )
    if additional == ADDITIONAL_INDEFINITE:
        raise UnsupportedFeatureError(
            "Indefinite-length items are not supported", offset=offset
        )
    raise UnsupportedFeatureError(
        f"Reserved additional information value {additional}", offset=offset
    )


def decode_header(reader: ByteReader) -> tuple[int, int]:
    """Read a complete header and return (major, argument).

    Not for major type 7, whose additional values 25-27 select float widths
    rather than integer sizes.
    """
    major, additional = split_initial_byte(reader.read_byte())
    return major, read_argument(reader, additional)
