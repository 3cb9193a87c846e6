"""cborvariant: compact CBOR encoder/decoder

A small Python library for RFC 7049 CBOR (Concise Binary Object
Representation). Values are modelled as a closed set of immutable Pydantic
models and converted to and from bytes by a single recursive codec.

Spec: https://tools.ietf.org/html/rfc7049

Key Features:
- Pydantic-based value model (Integer, Float, Text, Bytes, Array, Map, Null)
- Shortest-form headers, double-precision floats on the wire
- Cursor-based decoding for streams of concatenated items
- Pure Python implementation

Supported subset:
- Integers up to 32-bit magnitudes
- Definite-length strings, arrays and maps (text or byte-string keys)
- Tags are accepted and skipped; the wrapped item is returned

Quick Start:
    >>> from cborvariant import Array, Integer, Text, decode, encode
    >>>
    >>> data = encode(Array(items=[Integer(value=1), Text(value="a")]))
    >>> data
    b'\\x82\\x01aa'
    >>> decode(data) == Array(items=[Integer(value=1), Text(value="a")])
    True
"""

from __future__ import annotations

from .codec import ByteReader, decode, decode_from, decode_item, encode, encode_onto, iter_decode
from .config import DEFAULT_CONFIG, CodecConfig
from .debug import to_debug_string
from .exceptions import (
    CborError,
    DecodeError,
    EncodeError,
    FileReadError,
    TruncatedInputError,
    UnknownMajorTypeError,
    UnsupportedFeatureError,
)
from .models import (
    Array,
    Bytes,
    CborValue,
    Float,
    Integer,
    Map,
    MapKey,
    Null,
    Text,
    Value,
    from_python,
)
from .utils import encoded_size, header_size, read_file

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "encode_onto",
    "decode",
    "decode_from",
    "decode_item",
    "iter_decode",
    "ByteReader",
    # Value model
    "CborValue",
    "Value",
    "MapKey",
    "Integer",
    "Float",
    "Text",
    "Bytes",
    "Array",
    "Map",
    "Null",
    "from_python",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "CborError",
    "EncodeError",
    "DecodeError",
    "TruncatedInputError",
    "UnsupportedFeatureError",
    "UnknownMajorTypeError",
    "FileReadError",
    # Helpers
    "to_debug_string",
    "read_file",
    "encoded_size",
    "header_size",
    # Version
    "__version__",
]
