"""CBOR codec for cborvariant.

This module provides encoding and decoding between Value trees and the
RFC 7049 binary format.
"""

from __future__ import annotations

from .decoder import decode, decode_from, decode_item, iter_decode
from .encoder import encode, encode_onto
from .header import decode_header, encode_header
from .reader import ByteReader

__all__ = [
    "encode",
    "encode_onto",
    "decode",
    "decode_from",
    "decode_item",
    "iter_decode",
    "encode_header",
    "decode_header",
    "ByteReader",
]
