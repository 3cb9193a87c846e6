"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from cborvariant import Array, Bytes, Float, Integer, Map, Null, Text


@pytest.fixture
def sample_document() -> Map:
    """Nested document touching every value variant."""
    return Map(
        entries={
            Text(value="id"): Integer(value=42),
            Text(value="depth"): Float(value=-12.75),
            Text(value="name"): Text(value="probe-7"),
            Text(value="raw"): Bytes(value=b"\x00\x01\xfe\xff"),
            Text(value="readings"): Array(
                items=[Integer(value=1), Integer(value=-500), Integer(value=70000)]
            ),
            Text(value="note"): Null(),
        }
    )


@pytest.fixture
def sample_encoded() -> bytes:
    """Encoding of [1, "abc", null]."""
    return b"\x83\x01\x63abc\xf6"
