"""Unit tests for debug rendering."""

from __future__ import annotations

import pytest

from cborvariant import (
    Array,
    Bytes,
    CborError,
    Float,
    Integer,
    Map,
    Null,
    Text,
    decode,
    to_debug_string,
)


class TestDebugString:
    """Test to_debug_string output."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Integer(value=10), "10"),
            (Integer(value=-500), "-500"),
            (Float(value=1.5), "1.5"),
            (Float(value=-0.25), "-0.25"),
            (Text(value="abc"), '"abc"'),
            (Text(value='say "hi" \\'), '"say \\"hi\\" \\\\"'),
            (Bytes(value=b"\x01\xff"), "bytes([0x1, 0xff])"),
            (Bytes(value=b""), "bytes([])"),
            (Null(), "None"),
            (Array(), "[]"),
            (Map(), "{}"),
        ],
    )
    def test_scalars_and_empty(self, value: object, expected: str) -> None:
        """Test leaf values and empty containers."""
        assert to_debug_string(value) == expected  # type: ignore[arg-type]

    def test_nested(self) -> None:
        """Test containers are rendered recursively."""
        value = Map(
            entries={
                Text(value="a"): Array(items=[Integer(value=1), Null()]),
                Text(value="b"): Map(entries={Bytes(value=b"\x00"): Float(value=2.0)}),
            }
        )
        assert to_debug_string(value) == '{"a": [1, None], "b": {bytes([0x0]): 2.0}}'

    def test_decoded(self, sample_encoded: bytes) -> None:
        """Test rendering a decoded buffer."""
        assert to_debug_string(decode(sample_encoded)) == '[1, "abc", None]'

    def test_str(self) -> None:
        """Test str() on a value uses the debug rendering."""
        assert str(Array(items=[Text(value="x")])) == '["x"]'

    def test_python_literal(self) -> None:
        """Test the rendering evaluates back to the plain Python object."""
        value = Map(
            entries={
                Text(value="k"): Array(items=[Integer(value=-3), Float(value=0.5), Null()]),
                Text(value="q"): Text(value='"quoted"'),
                Text(value="b"): Bytes(value=b"\x10\x20"),
            }
        )
        assert eval(to_debug_string(value)) == value.to_python()

    def test_not_a_value(self) -> None:
        """Test non-values are rejected."""
        with pytest.raises(CborError):
            to_debug_string("plain")  # type: ignore[arg-type]
