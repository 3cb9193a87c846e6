"""Pydantic value model for cborvariant.

This module provides the seven CBOR value variants, the Value union used to
validate them, and helpers to move between Value trees and plain Python.
"""

from __future__ import annotations

from .value import (
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

__all__ = [
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
]
