"""CBOR decoder.

This module converts CBOR bytes into Value trees. Decoding walks the input
once, recursively, over a shared ByteReader; there is no backtracking and no
partial result. Any problem aborts the whole call with a DecodeError subclass.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import (
    DecodeError,
    TruncatedInputError,
    UnknownMajorTypeError,
    UnsupportedFeatureError,
)
from ..models.value import Array, Bytes, CborValue, Float, Integer, Map, Null, Text
from .header import (
    MAJOR_ARRAY,
    MAJOR_BYTES,
    MAJOR_MAP,
    MAJOR_NEGATIVE,
    MAJOR_SIMPLE,
    MAJOR_TAG,
    MAJOR_TEXT,
    MAJOR_UNSIGNED,
    SIMPLE_FLOAT32,
    SIMPLE_FLOAT64,
    SIMPLE_NULL,
    read_argument,
    split_initial_byte,
)
from .reader import ByteReader

logger = logging.getLogger(__name__)


def decode(data: bytes | bytearray | memoryview, config: CodecConfig | None = None) -> CborValue:
    """Decode the CBOR item at the start of data.

    Args:
        data: Encoded bytes
        config: Decoding options (DEFAULT_CONFIG if omitted)

    Returns:
        Decoded value

    Raises:
        TruncatedInputError: If data ends before the item does
        UnsupportedFeatureError: If data uses 64-bit arguments, indefinite
            lengths, non-string map keys or unsupported simple values
        DecodeError: On any other malformed input, or trailing bytes when
            config.allow_trailing_data is False

    Examples:
        ```python
        from cborvariant import decode

        decode(b"\\x0a")            # Integer(value=10)
        decode(b"\\x82\\x01\\x02")    # Array(items=(Integer(value=1), Integer(value=2)))
        decode(b"\\xf6")            # Null()
        ```
    """
    config = config or DEFAULT_CONFIG
    reader = ByteReader(data)
    value = decode_item(reader, config)

    if not config.allow_trailing_data and not reader.at_end():
        raise DecodeError(
            f"{reader.remaining()} trailing byte(s) after CBOR item", offset=reader.position()
        )

    return value


def decode_from(
    data: bytes | bytearray | memoryview, offset: int = 0, config: CodecConfig | None = None
) -> tuple[CborValue, int]:
    """Decode one item starting at offset.

    Args:
        data: Encoded bytes
        offset: Position of the item's header byte
        config: Decoding options (DEFAULT_CONFIG if omitted)

    Returns:
        Tuple of (value, offset just past the item)

    Example:
        ```python
        value, offset = decode_from(stream)
        second, offset = decode_from(stream, offset)
        ```
    """
    reader = ByteReader(data, offset)
    value = decode_item(reader, config)
    return value, reader.position()


def iter_decode(
    data: bytes | bytearray | memoryview, config: CodecConfig | None = None
) -> Iterator[CborValue]:
    """Yield every item of a buffer holding concatenated CBOR items."""
    reader = ByteReader(data)
    while not reader.at_end():
        yield decode_item(reader, config)


def decode_item(reader: ByteReader, config: CodecConfig | None = None) -> CborValue:
    """Decode one item at the reader's cursor and advance past it."""
    config = config or DEFAULT_CONFIG
    start = reader.position()
    try:
        return _decode_value(reader, config, 0)
    except DecodeError as e:
        logger.debug("CBOR decode starting at offset %d failed at offset %s: %s", start, e.offset, e)
        raise


def _decode_value(reader: ByteReader, config: CodecConfig, depth: int) -> CborValue:
    """Decode a single item.

    Args:
        reader: Reader positioned on a header byte
        config: Decoding options
        depth: Current container nesting

    Returns:
        Decoded value
    """
    if depth > config.max_depth:
        raise DecodeError(
            f"Nesting exceeds max_depth={config.max_depth}", offset=reader.position()
        )

    offset = reader.position()
    major, additional = split_initial_byte(reader.read_byte())

    # Integers
    if major == MAJOR_UNSIGNED:
        return Integer.model_construct(value=read_argument(reader, additional))

    if major == MAJOR_NEGATIVE:
        return Integer.model_construct(value=-1 - read_argument(reader, additional))

    # Byte and text strings
    if major == MAJOR_BYTES:
        length = read_argument(reader, additional)
        return Bytes.model_construct(value=reader.read_bytes(length))

    if major == MAJOR_TEXT:
        length = read_argument(reader, additional)
        return Text.model_construct(value=_decode_text(reader.read_bytes(length)))

    # Arrays
    if major == MAJOR_ARRAY:
        count = read_argument(reader, additional)
        _check_count(reader, count, 1, "array item")
        items = []
        for _ in range(count):
            items.append(_decode_value(reader, config, depth + 1))
        return Array.model_construct(items=tuple(items))

    # Maps
    if major == MAJOR_MAP:
        count = read_argument(reader, additional)
        _check_count(reader, count, 2, "map entry")
        entries: dict[Text | Bytes, CborValue] = {}
        for _ in range(count):
            key = _decode_key(reader)
            # Duplicate keys: the later entry wins
            entries[key] = _decode_value(reader, config, depth + 1)
        return Map.model_construct(entries=MappingProxyType(entries))

    # Tags: the tag number is discarded and the wrapped item returned
    if major == MAJOR_TAG:
        read_argument(reader, additional)
        return _decode_value(reader, config, depth + 1)

    # Floats and null
    if major == MAJOR_SIMPLE:
        if additional == SIMPLE_FLOAT32:
            return Float.model_construct(value=reader.read_float(4))
        if additional == SIMPLE_FLOAT64:
            return Float.model_construct(value=reader.read_float(8))
        if additional == SIMPLE_NULL:
            return Null.model_construct()
        raise UnsupportedFeatureError(
            f"Major type 7 with additional information {additional} is neither "
            f"a float nor a double nor null",
            offset=offset,
        )

    raise UnknownMajorTypeError(f"Unknown major type {major}", offset=offset)


def _decode_key(reader: ByteReader) -> Text | Bytes:
    """Decode a map key, which must be a text or byte string."""
    offset = reader.position()
    major, additional = split_initial_byte(reader.read_byte())

    if major not in (MAJOR_BYTES, MAJOR_TEXT):
        raise UnsupportedFeatureError(
            f"Map keys must be text or byte strings, got major type {major}", offset=offset
        )

    payload = reader.read_bytes(read_argument(reader, additional))
    if major == MAJOR_BYTES:
        return Bytes.model_construct(value=payload)
    return Text.model_construct(value=_decode_text(payload))


def _decode_text(payload: bytes) -> str:
    # No UTF-8 validation: undecodable bytes survive as lone surrogates
    return payload.decode("utf-8", "surrogateescape")


def _check_count(reader: ByteReader, count: int, min_item_size: int, what: str) -> None:
    """Fail early when a declared count cannot fit in the remaining bytes."""
    if count * min_item_size > reader.remaining():
        raise TruncatedInputError(
            f"Truncated input: {count} {what}(s) declared, "
            f"only {reader.remaining()} byte(s) remain",
            offset=reader.position(),
        )
